# hotel_booking/schemas/user.py
"""
Pydantic schemas for the caller's own profile.
"""
from pydantic import BaseModel, ConfigDict

__all__ = ["UserOut", "ProfileUpdateIn"]


class UserOut(BaseModel):
    """
    Public view of a user. Deliberately has no password field, so a hash can
    never be serialized into a response.
    """
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    email: str
    phone_number: str | None = None
    profile_picture: str | None = None


class ProfileUpdateIn(BaseModel):
    """
    Partial profile update. Only fields present in the request body are applied;
    `password` is re-hashed before it is stored.
    """
    email: str | None = None
    password: str | None = None
    phone_number: str | None = None
    profile_picture: str | None = None
