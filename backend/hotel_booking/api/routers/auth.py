# hotel_booking/api/routers/auth.py
import logging

import jwt
from fastapi import APIRouter, Depends, status

from hotel_booking.api.deps import get_credential_store
from hotel_booking.core.security import create_access_token
from hotel_booking.errors import InternalError
from hotel_booking.schemas.auth import LoginIn, SignupIn
from hotel_booking.schemas.user import UserOut
from hotel_booking.services import CredentialStore

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(body: SignupIn, store: CredentialStore = Depends(get_credential_store)):
    """
    Register a new user account.

    Args:
        body: email and password (required), phone_number and
            profile_picture (optional)

    Returns:
        dict: message plus the created user's public fields

    Errors:
        400: email/password missing, or email already taken
    """
    user = await store.register(body.email, body.password, body.phone_number, body.profile_picture)
    return {
        "message": "User registered successfully",
        "user": UserOut.model_validate(user).model_dump(),
    }


@router.post("/login")
async def login(body: LoginIn, store: CredentialStore = Depends(get_credential_store)):
    """
    Authenticate and issue a signed token valid for 24 hours.

    The token is returned in the body; clients send it back verbatim in the
    Authorization header.

    Errors:
        400: email/password missing
        401: email or password is incorrect (never says which)
    """
    user = await store.verify_credentials(body.email, body.password)
    try:
        token = create_access_token(user.user_id, user.email)
    except jwt.PyJWTError as exc:
        logger.exception("[auth] token signing failed for user id=%s", user.user_id)
        raise InternalError("An error occurred during user login", {"details": type(exc).__name__}) from exc
    logger.info("[auth] login user id=%s", user.user_id)
    return {
        "auth": True,
        "token": token,
        "message": "User logged in successfully",
        "user": UserOut.model_validate(user).model_dump(),
    }
