# hotel_booking/models/hotel.py
from tortoise import fields, models


class Hotel(models.Model):
    """Catalogue entry. Managed outside this service; only read here."""
    hotel_id = fields.IntField(pk=True)
    name = fields.CharField(max_length=255)
    location = fields.CharField(max_length=255, null=True)
    description = fields.TextField(null=True)
    price_per_night = fields.DecimalField(max_digits=10, decimal_places=2, null=True)
    image_url = fields.CharField(max_length=1024, null=True)

    class Meta:
        table = "hotels"
