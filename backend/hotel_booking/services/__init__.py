# hotel_booking/services/__init__.py
"""
Service layer.

Each service runs its store work through `core.store.store_session`, so every
operation holds one pooled connection for its duration and releases it on every
exit path. Services raise `hotel_booking.errors` kinds only.

- CredentialStore: signup, credential check, profile field updates
- BookingRepository: ownership-scoped booking CRUD
- UserProfileService: the caller's own profile
- HotelCatalog: read-only hotel listing
"""
from .bookings import BookingRepository
from .credentials import CredentialStore
from .hotels import HotelCatalog
from .profile import UserProfileService

__all__ = ["BookingRepository", "CredentialStore", "HotelCatalog", "UserProfileService"]
