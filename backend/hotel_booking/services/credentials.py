# hotel_booking/services/credentials.py
"""
Credential storage: account creation, login checks and profile field updates.

Plain text passwords only ever live in local variables here; they are hashed
in the threadpool (bcrypt is CPU bound) before any store call and are never
logged.
"""
import logging
from functools import lru_cache

from fastapi.concurrency import run_in_threadpool
from tortoise.exceptions import IntegrityError

from hotel_booking.core.security import hash_password, verify_password
from hotel_booking.core.store import store_session
from hotel_booking.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from hotel_booking.models.user import User

logger = logging.getLogger("uvicorn.error")

PROFILE_FIELDS = ("email", "password", "phone_number", "profile_picture")


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # Verified against when the email is unknown, so both failure paths cost one bcrypt check
    return hash_password("not-a-real-password")


class CredentialStore:
    """Hashes and verifies passwords; stores and looks up users by email."""

    async def register(
        self,
        email: str | None,
        password: str | None,
        phone_number: str | None = None,
        profile_picture: str | None = None,
    ) -> User:
        """
        Create a new user.

        Raises:
            ValidationError: email or password missing
            ConflictError: email already registered
        """
        if not email or not password:
            raise ValidationError("Email and password are required.")

        hashed = await run_in_threadpool(hash_password, password)
        async with store_session("registering the user") as conn:
            if await User.filter(email=email).using_db(conn).exists():
                raise ConflictError("Email is already taken")
            try:
                user = await User.create(
                    email=email,
                    password=hashed,
                    phone_number=phone_number or None,
                    profile_picture=profile_picture or None,
                    using_db=conn,
                )
            except IntegrityError as exc:
                # Lost a race with a concurrent signup for the same email
                raise ConflictError("Email is already taken") from exc
        logger.info("[auth] registered user id=%s", user.user_id)
        return user

    async def verify_credentials(self, email: str | None, password: str | None) -> User:
        """
        Return the user whose email and password match.

        Raises:
            ValidationError: email or password missing
            AuthenticationError: unknown email or wrong password (same message for both)
        """
        if not email or not password:
            raise ValidationError("Email and password are required.")

        async with store_session("logging in") as conn:
            user = await User.get_or_none(email=email, using_db=conn)

        if user is None:
            await run_in_threadpool(lambda: verify_password(password, _dummy_hash()))
            raise AuthenticationError()
        if not await run_in_threadpool(verify_password, password, user.password):
            raise AuthenticationError()
        return user

    async def update_profile(self, user_id: int, fields: dict) -> User:
        """
        Apply the provided profile fields to a user.

        Only keys present in `fields` are touched. A password is re-hashed;
        phone_number / profile_picture may be cleared with None.

        Raises:
            ValidationError: unknown field, or an empty email / password
            ConflictError: new email belongs to another user
            NotFoundError: no user with this id
        """
        unknown = set(fields) - set(PROFILE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown profile fields: {', '.join(sorted(unknown))}")
        for required in ("email", "password"):
            if required in fields and not fields[required]:
                raise ValidationError(f"{required} must not be empty")

        changes = dict(fields)
        if "password" in changes:
            changes["password"] = await run_in_threadpool(hash_password, changes["password"])

        async with store_session("updating the user profile") as conn:
            user = await User.get_or_none(user_id=user_id, using_db=conn)
            if user is None:
                raise NotFoundError("User not found")
            if "email" in changes and changes["email"] != user.email:
                taken = await User.filter(email=changes["email"]).exclude(user_id=user_id).using_db(conn).exists()
                if taken:
                    raise ConflictError("Email is already taken")
            if not changes:
                return user
            for name, value in changes.items():
                setattr(user, name, value)
            try:
                await user.save(using_db=conn, update_fields=list(changes))
            except IntegrityError as exc:
                raise ConflictError("Email is already taken") from exc
        logger.info("[auth] updated profile user id=%s fields=%s", user_id, sorted(changes))
        return user
