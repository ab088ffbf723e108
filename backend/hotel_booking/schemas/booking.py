# hotel_booking/schemas/booking.py
"""
Pydantic schemas for booking endpoints.
"""
import datetime as dt

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from hotel_booking.models import MAX_ID

__all__ = ["BookingIn", "BookingOut"]


class BookingIn(BaseModel):
    """
    Request body for creating or replacing a booking.
    Dates accept ISO strings; `start` / `end` are accepted as short aliases.
    """
    hotel_id: int = Field(ge=1, le=MAX_ID)
    start_date: dt.date = Field(validation_alias=AliasChoices("start_date", "start"))
    end_date: dt.date = Field(validation_alias=AliasChoices("end_date", "end"))

    @model_validator(mode="after")
    def _check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be earlier than start_date")
        return self


class BookingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    booking_id: int
    user_id: int  # Owner
    hotel_id: int
    start_date: dt.date
    end_date: dt.date
    created_time: dt.datetime
    updated_time: dt.datetime
