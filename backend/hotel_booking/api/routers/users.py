# hotel_booking/api/routers/users.py
from fastapi import APIRouter, Depends

from hotel_booking.api.deps import get_current_identity, get_profile_service
from hotel_booking.core.security import Identity
from hotel_booking.schemas.user import ProfileUpdateIn
from hotel_booking.services import UserProfileService

router = APIRouter(tags=["users"])


@router.get("/user/profile")
async def get_profile(
    identity: Identity = Depends(get_current_identity),
    profiles: UserProfileService = Depends(get_profile_service),
):
    """
    Return the caller's profile (never the password hash).

    Errors:
        404: the account behind the token no longer exists
    """
    profile = await profiles.get_own_profile(identity.user_id)
    return {"message": "user profile retrieved successfully", "user": profile.model_dump()}


@router.put("/userUpdate")
async def update_profile(
    body: ProfileUpdateIn,
    identity: Identity = Depends(get_current_identity),
    profiles: UserProfileService = Depends(get_profile_service),
):
    """
    Update the caller's own email, password, phone_number or profile_picture.

    Only fields present in the body change. A new password is hashed before
    it is stored; tokens already issued remain valid until they expire.
    """
    profile = await profiles.update_own_profile(identity.user_id, body.model_dump(exclude_unset=True))
    return {"message": "user profile updated successfully", "user": profile.model_dump()}
