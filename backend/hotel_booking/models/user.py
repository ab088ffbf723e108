# hotel_booking/models/user.py
"""
Database model for users.
Holds login credentials and the optional profile fields a user edits themselves.
"""
from tortoise import fields, models


class User(models.Model):
    """
    User database model.

    Relationships:
    - Has many Bookings (one-to-many, via related_name="bookings")

    Security:
    - `password` stores the bcrypt hash, never the plain text
    - Email is unique and compared case-sensitively, as stored
    """
    user_id = fields.IntField(pk=True)
    email = fields.CharField(max_length=255, unique=True, index=True)
    password = fields.CharField(max_length=255)  # bcrypt hash
    phone_number = fields.CharField(max_length=32, null=True)
    profile_picture = fields.CharField(max_length=1024, null=True)  # URL or storage key

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"

    def __str__(self) -> str:
        return f"User({self.user_id})"
