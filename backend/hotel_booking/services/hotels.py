# hotel_booking/services/hotels.py
from hotel_booking.core.store import store_session
from hotel_booking.errors import NotFoundError
from hotel_booking.models import is_storable_id
from hotel_booking.models.hotel import Hotel


class HotelCatalog:
    """Read-only access to the hotels table."""

    async def list_all(self) -> list[Hotel]:
        async with store_session("retrieving hotels") as conn:
            return await Hotel.all().using_db(conn).order_by("hotel_id")

    async def get(self, hotel_id: int) -> Hotel:
        if not is_storable_id(hotel_id):
            raise NotFoundError("Hotel not found")
        async with store_session("retrieving the hotel") as conn:
            hotel = await Hotel.get_or_none(hotel_id=hotel_id, using_db=conn)
        if hotel is None:
            raise NotFoundError("Hotel not found")
        return hotel
