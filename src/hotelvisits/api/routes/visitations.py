"""Visitation endpoints. Every read returns joined visitation details.

GET    /api/visitation                          → all visitations
POST   /api/visitation                          → create (customer and hotel must exist)
GET    /api/visitation/customer/{id}            → visits of one customer
GET    /api/visitation/hotel/{id}               → visits to one hotel
GET    /api/visitation/daterange?startDate=&endDate=
GET    /api/visitation/analytics?month=&hotelIds=&loyalOnly=
GET    /api/visitation/{id}                     → read
PUT    /api/visitation/{id}                     → replace customer / hotel / date
DELETE /api/visitation/{id}                     → delete (204)

Customer and hotel references are checked only when a visitation is written.
Reads resolve dangling references to "Unknown Customer" / "Unknown Hotel".
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response

from hotelvisits.api.deps import get_stores
from hotelvisits.api.schemas import VisitationDetailOut, VisitationRequest
from hotelvisits.domain.analytics import AnalyticsQueryError, filter_details, month_bounds
from hotelvisits.domain.models import VisitationDraft
from hotelvisits.domain.visitation_details import build_details, detail_for
from hotelvisits.infra.stores.base import RecordNotFoundError
from hotelvisits.infra.stores.bundle import Stores
from hotelvisits.infra.time import ensure_utc
from hotelvisits.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/visitation", tags=["visitation"])


# ── Helpers ───────────────────────────────────────────────────────────────────


def _to_out(details) -> list[VisitationDetailOut]:
    return [VisitationDetailOut.model_validate(d) for d in details]


def _join_all(stores: Stores, visitations) -> list[VisitationDetailOut]:
    """Bulk join against full customer and hotel snapshots."""
    return _to_out(
        build_details(visitations, stores.customers.list_all(), stores.hotels.list_all())
    )


def _require_references(stores: Stores, body: VisitationRequest) -> None:
    if stores.customers.get(body.customer_id) is None:
        raise HTTPException(
            status_code=400, detail=f"Customer with ID {body.customer_id} not found"
        )
    if stores.hotels.get(body.hotel_id) is None:
        raise HTTPException(
            status_code=400, detail=f"Hotel with ID {body.hotel_id} not found"
        )


def _draft(body: VisitationRequest) -> VisitationDraft:
    return VisitationDraft(
        customer_id=body.customer_id,
        hotel_id=body.hotel_id,
        visit_date=body.visit_date,
    )


# ── GET /api/visitation ───────────────────────────────────────────────────────


@router.get("", response_model=list[VisitationDetailOut])
def list_visitations(stores: Stores = Depends(get_stores)) -> list[VisitationDetailOut]:
    return _join_all(stores, stores.visitations.list_all())


# ── POST /api/visitation ──────────────────────────────────────────────────────


@router.post("", status_code=201, response_model=VisitationDetailOut)
def add_visitation(
    body: VisitationRequest,
    stores: Stores = Depends(get_stores),
) -> VisitationDetailOut:
    """Record a visit. visitDate defaults to now.

    Raises 400 if the customer or the hotel does not exist.
    """
    _require_references(stores, body)
    created = stores.visitations.create(_draft(body))
    logger.info(
        "visitation created",
        extra={
            "extra_fields": {
                "visitation_id": created.id,
                "customer_id": created.customer_id,
                "hotel_id": created.hotel_id,
            }
        },
    )
    return VisitationDetailOut.model_validate(
        detail_for(created, stores.customers, stores.hotels)
    )


# ── GET /api/visitation/customer/{id} ─────────────────────────────────────────


@router.get("/customer/{customer_id}", response_model=list[VisitationDetailOut])
def visitations_by_customer(
    customer_id: int = Path(..., description="Customer ID"),
    stores: Stores = Depends(get_stores),
) -> list[VisitationDetailOut]:
    """Visits of one customer. Raises 404 if the customer does not exist."""
    if stores.customers.get(customer_id) is None:
        raise HTTPException(
            status_code=404, detail=f"Customer with ID {customer_id} not found"
        )
    return _join_all(stores, stores.visitations.by_customer(customer_id))


# ── GET /api/visitation/hotel/{id} ────────────────────────────────────────────


@router.get("/hotel/{hotel_id}", response_model=list[VisitationDetailOut])
def visitations_by_hotel(
    hotel_id: int = Path(..., description="Hotel ID"),
    stores: Stores = Depends(get_stores),
) -> list[VisitationDetailOut]:
    """Visits to one hotel. Raises 404 if the hotel does not exist."""
    if stores.hotels.get(hotel_id) is None:
        raise HTTPException(status_code=404, detail=f"Hotel with ID {hotel_id} not found")
    return _join_all(stores, stores.visitations.by_hotel(hotel_id))


# ── GET /api/visitation/daterange ─────────────────────────────────────────────


@router.get("/daterange", response_model=list[VisitationDetailOut])
def visitations_by_date_range(
    start_date: datetime = Query(..., alias="startDate"),
    end_date: datetime = Query(..., alias="endDate"),
    stores: Stores = Depends(get_stores),
) -> list[VisitationDetailOut]:
    """Visits within [startDate, endDate], both inclusive.

    Raises 400 if startDate is after endDate.
    """
    start, end = ensure_utc(start_date), ensure_utc(end_date)
    if start > end:
        raise HTTPException(
            status_code=400, detail="Start date cannot be greater than end date"
        )
    return _join_all(stores, stores.visitations.by_date_range(start, end))


# ── GET /api/visitation/analytics ─────────────────────────────────────────────


@router.get("/analytics", response_model=list[VisitationDetailOut])
def visitation_analytics(
    month: str | None = Query(None, description="YYYY-MM"),
    hotel_ids: list[int] | None = Query(None, alias="hotelIds"),
    loyal_only: bool = Query(False, alias="loyalOnly"),
    stores: Stores = Depends(get_stores),
) -> list[VisitationDetailOut]:
    """Dashboard analytics filter.

    month narrows to that calendar month; hotelIds keeps visits to those
    hotels; loyalOnly keeps visits by customers that were loyal at the start
    of the month (or now, without a month).

    Raises 400 on a malformed month.
    """
    as_of = None
    if month:
        try:
            start, end = month_bounds(month)
        except AnalyticsQueryError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        visitations = stores.visitations.by_date_range(start, end)
        as_of = start
    else:
        visitations = stores.visitations.list_all()

    loyal_ids = None
    if loyal_only:
        loyal_ids = {c.id for c in stores.customers.loyal_customers(as_of)}

    details = build_details(
        visitations, stores.customers.list_all(), stores.hotels.list_all()
    )
    return _to_out(
        filter_details(
            details,
            hotel_ids=set(hotel_ids) if hotel_ids else None,
            customer_ids=loyal_ids,
        )
    )


# ── GET /api/visitation/{id} ──────────────────────────────────────────────────


@router.get("/{visitation_id}", response_model=VisitationDetailOut)
def get_visitation(
    visitation_id: int = Path(..., description="Visitation ID"),
    stores: Stores = Depends(get_stores),
) -> VisitationDetailOut:
    visitation = stores.visitations.get(visitation_id)
    if visitation is None:
        raise HTTPException(
            status_code=404, detail=f"Visitation with ID {visitation_id} not found"
        )
    return VisitationDetailOut.model_validate(
        detail_for(visitation, stores.customers, stores.hotels)
    )


# ── PUT /api/visitation/{id} ──────────────────────────────────────────────────


@router.put("/{visitation_id}", response_model=VisitationDetailOut)
def update_visitation(
    body: VisitationRequest,
    visitation_id: int = Path(..., description="Visitation ID"),
    stores: Stores = Depends(get_stores),
) -> VisitationDetailOut:
    """Replace customer, hotel and (when given) visit date.

    Raises 400 for an unknown customer or hotel, 404 for an unknown visitation.
    """
    _require_references(stores, body)
    try:
        updated = stores.visitations.update(visitation_id, _draft(body))
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return VisitationDetailOut.model_validate(
        detail_for(updated, stores.customers, stores.hotels)
    )


# ── DELETE /api/visitation/{id} ───────────────────────────────────────────────


@router.delete("/{visitation_id}", status_code=204)
def delete_visitation(
    visitation_id: int = Path(..., description="Visitation ID"),
    stores: Stores = Depends(get_stores),
) -> Response:
    if not stores.visitations.delete(visitation_id):
        raise HTTPException(
            status_code=404, detail=f"Visitation with ID {visitation_id} not found"
        )
    logger.info(
        "visitation deleted",
        extra={"extra_fields": {"visitation_id": visitation_id}},
    )
    return Response(status_code=204)
