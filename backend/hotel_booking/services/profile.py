# hotel_booking/services/profile.py
"""
The authenticated user's own profile.

Results are returned as `UserOut`, which has no password field, so the stored
hash cannot leak through this service.
"""
from hotel_booking.core.store import store_session
from hotel_booking.errors import NotFoundError
from hotel_booking.models.user import User
from hotel_booking.schemas.user import UserOut
from hotel_booking.services.credentials import CredentialStore


class UserProfileService:

    def __init__(self, credentials: CredentialStore | None = None):
        self.credentials = credentials or CredentialStore()

    async def get_own_profile(self, user_id: int) -> UserOut:
        """
        Raises:
            NotFoundError: the token's user no longer exists
        """
        async with store_session("retrieving user details") as conn:
            user = await User.get_or_none(user_id=user_id, using_db=conn)
        if user is None:
            raise NotFoundError("User not found")
        return UserOut.model_validate(user)

    async def update_own_profile(self, user_id: int, fields: dict) -> UserOut:
        user = await self.credentials.update_profile(user_id, fields)
        return UserOut.model_validate(user)
