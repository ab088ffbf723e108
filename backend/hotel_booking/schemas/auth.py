# hotel_booking/schemas/auth.py
"""
Pydantic schemas for signup and login.

Email and password are optional at the schema level so that a missing field
reaches the credential store and comes back as a 400 ValidationError with a
readable message, instead of a generic field-validation response.
"""
from pydantic import BaseModel

__all__ = ["SignupIn", "LoginIn"]


class SignupIn(BaseModel):
    email: str | None = None
    password: str | None = None
    phone_number: str | None = None
    profile_picture: str | None = None


class LoginIn(BaseModel):
    email: str | None = None
    password: str | None = None
