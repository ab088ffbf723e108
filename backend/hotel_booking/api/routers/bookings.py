# hotel_booking/api/routers/bookings.py
from fastapi import APIRouter, Depends, status

from hotel_booking.api.deps import get_booking_repository, get_current_identity
from hotel_booking.core.security import Identity
from hotel_booking.schemas.booking import BookingIn, BookingOut
from hotel_booking.services import BookingRepository

router = APIRouter(prefix="/bookings", tags=["bookings"])


def _out(booking) -> dict:
    return BookingOut.model_validate(booking).model_dump(mode="json")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_booking(
    body: BookingIn,
    identity: Identity = Depends(get_current_identity),
    repo: BookingRepository = Depends(get_booking_repository),
):
    """
    Create a booking owned by the caller.

    The owner is always the token's user; any user id in the body is ignored.
    """
    booking = await repo.create(identity.user_id, body.hotel_id, body.start_date, body.end_date)
    return {"message": "Booking created successfully", "booking": _out(booking)}


@router.get("")
async def list_bookings(
    identity: Identity = Depends(get_current_identity),
    repo: BookingRepository = Depends(get_booking_repository),
):
    """List the caller's bookings (empty list when there are none)."""
    bookings = await repo.list_by_owner(identity.user_id)
    return {"message": "Bookings retrieved successfully", "bookings": [_out(b) for b in bookings]}


@router.get("/{booking_id}")
async def get_booking(
    booking_id: int,
    identity: Identity = Depends(get_current_identity),
    repo: BookingRepository = Depends(get_booking_repository),
):
    booking = await repo.get_if_owned(booking_id, identity.user_id)
    return {"message": "Booking retrieved successfully", "booking": _out(booking)}


@router.put("/{booking_id}")
async def update_booking(
    booking_id: int,
    body: BookingIn,
    identity: Identity = Depends(get_current_identity),
    repo: BookingRepository = Depends(get_booking_repository),
):
    """
    Replace hotel and dates of one of the caller's bookings.

    Errors:
        404: booking does not exist or belongs to another user
    """
    booking = await repo.update_if_owned(
        booking_id, identity.user_id, body.hotel_id, body.start_date, body.end_date
    )
    return {"message": "booking updated successfully", "booking": _out(booking)}


@router.delete("/{booking_id}")
async def delete_booking(
    booking_id: int,
    identity: Identity = Depends(get_current_identity),
    repo: BookingRepository = Depends(get_booking_repository),
):
    """
    Delete one of the caller's bookings.

    Errors:
        404: booking does not exist or belongs to another user
    """
    await repo.delete_if_owned(booking_id, identity.user_id)
    return {"message": "booking deleted successfully"}
