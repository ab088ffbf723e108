# hotel_booking/schemas/hotel.py
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

__all__ = ["HotelOut"]


class HotelOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    hotel_id: int
    name: str
    location: str | None = None
    description: str | None = None
    price_per_night: Decimal | None = None
    image_url: str | None = None
