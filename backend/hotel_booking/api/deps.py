# hotel_booking/api/deps.py
import logging

from fastapi import Header, Request

from hotel_booking.core.security import Identity, verify_access_token
from hotel_booking.errors import TokenError
from hotel_booking.services import BookingRepository, CredentialStore, HotelCatalog, UserProfileService

logger = logging.getLogger("uvicorn.error")


def extract_token(authorization: str | None) -> str | None:
    """
    Pull the token out of an Authorization header value.

    Clients send the raw token as the whole header value; a leading
    "Bearer " keyword is also accepted and stripped.
    """
    if not authorization:
        return None
    value = authorization.strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == "bearer":
        value = rest.strip()
    return value or None


async def get_current_identity(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Identity:
    """
    FastAPI dependency guarding protected routes.

    Verifies the token on every request (nothing is cached) and attaches the
    resulting identity to `request.state.identity`. No store lookup happens
    here: a valid signature and unexpired claim are sufficient.

    Raises:
        TokenError (403): no token, or the token failed verification
    """
    token = extract_token(authorization)
    if token is None:
        raise TokenError("No token provided")

    try:
        identity = verify_access_token(token)
    except TokenError:
        logger.info("[auth] rejected token on %s %s", request.method, request.url.path)
        raise

    request.state.identity = identity
    return identity


# Service providers; overridable through app.dependency_overrides in tests
def get_credential_store() -> CredentialStore:
    return CredentialStore()


def get_booking_repository() -> BookingRepository:
    return BookingRepository()


def get_profile_service() -> UserProfileService:
    return UserProfileService()


def get_hotel_catalog() -> HotelCatalog:
    return HotelCatalog()
