# hotel_booking/api/routers/hotels.py
from fastapi import APIRouter, Depends

from hotel_booking.api.deps import get_current_identity, get_hotel_catalog
from hotel_booking.core.security import Identity
from hotel_booking.schemas.hotel import HotelOut
from hotel_booking.services import HotelCatalog

router = APIRouter(prefix="/hotels", tags=["hotels"])


@router.get("")
async def list_hotels(catalog: HotelCatalog = Depends(get_hotel_catalog)):
    """Public hotel listing; no token required."""
    hotels = await catalog.list_all()
    return {
        "message": "hotels retrieved successfully",
        "hotels": [HotelOut.model_validate(h).model_dump(mode="json") for h in hotels],
    }


@router.get("/{hotel_id}")
async def get_hotel(
    hotel_id: int,
    identity: Identity = Depends(get_current_identity),
    catalog: HotelCatalog = Depends(get_hotel_catalog),
):
    """Single hotel detail; requires a valid token."""
    hotel = await catalog.get(hotel_id)
    return {"message": "hotel retrieved successfully", "hotel": HotelOut.model_validate(hotel).model_dump(mode="json")}
