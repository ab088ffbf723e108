# hotel_booking/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: Account credentials and profile fields
- Booking: A hotel stay owned by exactly one User
- Hotel: Read-only catalogue entry referenced by bookings
"""
from .user import User
from .booking import Booking
from .hotel import Hotel

# Largest value an IntField primary key / reference can hold (int4 on Postgres)
MAX_ID = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """True when `value` could be a row id; anything else cannot match a row."""
    return 1 <= value <= MAX_ID
