# hotel_booking/core/security.py
"""
Security module for authentication.
Handles password hashing and signed identity token creation/validation.
"""
import datetime as dt
from dataclasses import dataclass

import jwt  # PyJWT
from passlib.context import CryptContext

from hotel_booking.config import settings
from hotel_booking.errors import TokenError

# Password hashing context
# bcrypt with a fixed cost factor; salt is generated per hash
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

# Token configuration
JWT_SECRET = settings.secret_key
TOKEN_TTL_SECONDS = settings.token_ttl_seconds
JWT_ALG = "HS256"  # HMAC SHA-256


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, as asserted by a verified token."""
    user_id: int
    email: str


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Never store plain text passwords. Always use this function before saving.
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plain text password against a stored bcrypt hash."""
    return pwd_context.verify(plain, hashed)


def create_access_token(user_id: int, email: str, issued_at: dt.datetime | None = None) -> str:
    """
    Create a signed access token for user authentication.

    Args:
        user_id: Unique user identifier
        email: The user's email at login time
        issued_at: Issue time; defaults to now (override to simulate clocks)

    Token payload includes:
        - sub: Subject (user ID as string)
        - user_id / email: Identity attached to authenticated requests
        - iat: Issued at timestamp
        - exp: iat + TOKEN_TTL_SECONDS
    """
    now = issued_at or dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": str(user_id),
        "user_id": user_id,
        "email": email,
        "iat": now,
        "exp": now + dt.timedelta(seconds=TOKEN_TTL_SECONDS),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)


def decode_access_token(token: str) -> dict:
    """
    Decode and validate a token, returning its raw claims.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or malformed
    """
    return jwt.decode(
        token,
        JWT_SECRET,
        algorithms=[JWT_ALG],
        options={"require": ["exp", "iat", "user_id"]},
    )


def verify_access_token(token: str) -> Identity:
    """
    Verify signature and expiry, returning the identity the token asserts.

    Purely computational: no store lookup, no revocation list. Every failure
    (bad signature, malformed, expired) surfaces as the same TokenError.
    """
    try:
        claims = decode_access_token(token)
        return Identity(user_id=int(claims["user_id"]), email=str(claims.get("email", "")))
    except (jwt.InvalidTokenError, TypeError, ValueError) as exc:
        raise TokenError() from exc
