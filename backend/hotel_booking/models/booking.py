# hotel_booking/models/booking.py
"""
Database model for bookings.
A booking belongs to the user who created it; the owner never changes.
"""
from tortoise import fields, models


class Booking(models.Model):
    booking_id = fields.IntField(pk=True)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="bookings",
        on_delete=fields.CASCADE,
    )  # Stored as column user_id
    hotel_id = fields.IntField()  # Plain reference into hotels
    start_date = fields.DateField()
    end_date = fields.DateField()
    created_time = fields.DatetimeField(auto_now_add=True)
    updated_time = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "bookings"
