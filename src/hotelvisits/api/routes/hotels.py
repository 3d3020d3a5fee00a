"""Hotel endpoints.

GET    /api/hotel        → list
POST   /api/hotel        → create
GET    /api/hotel/{id}   → read
PUT    /api/hotel/{id}   → replace every field but the id
DELETE /api/hotel/{id}   → delete (204)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from hotelvisits.api.deps import get_stores
from hotelvisits.api.schemas import HotelOut, HotelRequest
from hotelvisits.domain.models import HotelDraft
from hotelvisits.infra.stores.base import RecordNotFoundError
from hotelvisits.infra.stores.bundle import Stores
from hotelvisits.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/hotel", tags=["hotel"])


def _draft(body: HotelRequest) -> HotelDraft:
    name = body.name or ""
    if not name.strip():
        raise HTTPException(status_code=400, detail="Name is required")
    return HotelDraft(
        name=name,
        address=body.address,
        city=body.city,
        country=body.country,
        star_rating=body.star_rating,
    )


def _not_found(hotel_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Hotel with ID {hotel_id} not found")


@router.get("", response_model=list[HotelOut])
def list_hotels(stores: Stores = Depends(get_stores)) -> list[HotelOut]:
    return [HotelOut.model_validate(h) for h in stores.hotels.list_all()]


@router.post("", status_code=201, response_model=HotelOut)
def create_hotel(
    body: HotelRequest,
    stores: Stores = Depends(get_stores),
) -> HotelOut:
    """Create a hotel. Raises 400 if the name is blank."""
    created = stores.hotels.create(_draft(body))
    logger.info("hotel created", extra={"extra_fields": {"hotel_id": created.id}})
    return HotelOut.model_validate(created)


@router.get("/{hotel_id}", response_model=HotelOut)
def get_hotel(
    hotel_id: int = Path(..., description="Hotel ID"),
    stores: Stores = Depends(get_stores),
) -> HotelOut:
    hotel = stores.hotels.get(hotel_id)
    if hotel is None:
        raise _not_found(hotel_id)
    return HotelOut.model_validate(hotel)


@router.put("/{hotel_id}", response_model=HotelOut)
def update_hotel(
    body: HotelRequest,
    hotel_id: int = Path(..., description="Hotel ID"),
    stores: Stores = Depends(get_stores),
) -> HotelOut:
    draft = _draft(body)
    try:
        updated = stores.hotels.update(hotel_id, draft)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return HotelOut.model_validate(updated)


@router.delete("/{hotel_id}", status_code=204)
def delete_hotel(
    hotel_id: int = Path(..., description="Hotel ID"),
    stores: Stores = Depends(get_stores),
) -> Response:
    if not stores.hotels.delete(hotel_id):
        raise _not_found(hotel_id)
    logger.info("hotel deleted", extra={"extra_fields": {"hotel_id": hotel_id}})
    return Response(status_code=204)
