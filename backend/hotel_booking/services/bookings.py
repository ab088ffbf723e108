# hotel_booking/services/bookings.py
"""
Ownership-scoped booking persistence.

Every read or write of an existing booking filters on booking_id AND user_id in
a single statement. A booking that exists but belongs to someone else is
therefore indistinguishable from one that does not exist: both raise
NotFoundError, and there is no window between "it exists" and "it is mine".
"""
import datetime as dt
import logging

from tortoise import timezone
from tortoise.exceptions import IntegrityError

from hotel_booking.core.store import store_session
from hotel_booking.errors import NotFoundError
from hotel_booking.models import is_storable_id
from hotel_booking.models.booking import Booking

logger = logging.getLogger("uvicorn.error")


class BookingRepository:

    async def create(self, owner_id: int, hotel_id: int, start_date: dt.date, end_date: dt.date) -> Booking:
        """
        Insert a booking owned by `owner_id`; timestamps are assigned server side.

        Raises:
            NotFoundError: the owner no longer exists (token outlived its user)
        """
        async with store_session("creating the booking") as conn:
            try:
                booking = await Booking.create(
                    user_id=owner_id,
                    hotel_id=hotel_id,
                    start_date=start_date,
                    end_date=end_date,
                    using_db=conn,
                )
            except IntegrityError as exc:
                raise NotFoundError("User not found") from exc
        logger.info("[bookings] created id=%s owner=%s", booking.booking_id, owner_id)
        return booking

    async def list_by_owner(self, owner_id: int) -> list[Booking]:
        """All bookings owned by `owner_id`; empty list when there are none."""
        async with store_session("retrieving the bookings") as conn:
            return await Booking.filter(user_id=owner_id).using_db(conn).order_by("booking_id")

    async def get_if_owned(self, booking_id: int, owner_id: int) -> Booking:
        if not is_storable_id(booking_id):
            raise NotFoundError("booking not found")
        async with store_session("retrieving the booking") as conn:
            booking = await Booking.get_or_none(booking_id=booking_id, user_id=owner_id, using_db=conn)
        if booking is None:
            raise NotFoundError("booking not found")
        return booking

    async def update_if_owned(
        self,
        booking_id: int,
        owner_id: int,
        hotel_id: int,
        start_date: dt.date,
        end_date: dt.date,
    ) -> Booking:
        """
        Replace hotel and dates of a booking the caller owns.

        The conditional UPDATE is the ownership check; the re-read happens in the
        same transaction, so it sees exactly the row that was written.

        Raises:
            NotFoundError: no booking with this id owned by `owner_id`
        """
        if not is_storable_id(booking_id):
            raise NotFoundError("booking not found")
        async with store_session("updating the booking") as conn:
            updated = await Booking.filter(booking_id=booking_id, user_id=owner_id).using_db(conn).update(
                hotel_id=hotel_id,
                start_date=start_date,
                end_date=end_date,
                updated_time=timezone.now(),
            )
            if not updated:
                raise NotFoundError("booking not found")
            booking = await Booking.get(booking_id=booking_id, using_db=conn)
        logger.info("[bookings] updated id=%s owner=%s", booking_id, owner_id)
        return booking

    async def delete_if_owned(self, booking_id: int, owner_id: int) -> None:
        """
        Delete a booking the caller owns.

        Raises:
            NotFoundError: no booking with this id owned by `owner_id`
        """
        if not is_storable_id(booking_id):
            raise NotFoundError("booking not found")
        async with store_session("deleting the booking") as conn:
            deleted = await Booking.filter(booking_id=booking_id, user_id=owner_id).using_db(conn).delete()
            if not deleted:
                raise NotFoundError("booking not found")
        logger.info("[bookings] deleted id=%s owner=%s", booking_id, owner_id)
