"""Customer endpoints.

GET    /api/customer/welcome         → API banner
POST   /api/customer                 → create, registered now
POST   /api/customer/register        → create at a given registration date
GET    /api/customer/loyal?date=...  → loyal customers as of date (default now)
GET    /api/customer/{id}            → read
PUT    /api/customer/{id}            → update name / email / purchases
DELETE /api/customer/{id}            → delete (204)
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from hotelvisits.api.deps import get_stores
from hotelvisits.api.schemas import CustomerOut, CustomerRequest, UpdateCustomerRequest
from hotelvisits.domain.models import CustomerDraft, CustomerUpdate
from hotelvisits.infra.stores.base import RecordNotFoundError
from hotelvisits.infra.stores.bundle import Stores
from hotelvisits.observability.logging import get_logger
from hotelvisits.observability.redaction import mask_email, safe_log_context

logger = get_logger(__name__)

router = APIRouter(prefix="/customer", tags=["customer"])

ENDPOINTS = [
    "GET /api/customer/welcome - This endpoint",
    "POST /api/customer - Add new customer",
    "GET /api/customer/{id} - Get a customer by ID",
    "PUT /api/customer/{id} - Update a customer",
    "DELETE /api/customer/{id} - Delete a customer",
    "GET /api/customer/loyal - Find loyal customers at date",
    "POST /api/customer/register - Register a customer at date",
]


def _require_contact(body: CustomerRequest | UpdateCustomerRequest) -> tuple[str, str]:
    """Return (name, email), raising 400 if either is null or blank."""
    name, email = body.name or "", body.email or ""
    if not name.strip() or not email.strip():
        logger.warning(
            "customer rejected",
            extra={
                "extra_fields": safe_log_context(
                    email=body.email,
                    name_given=bool(name.strip()),
                )
            },
        )
        raise HTTPException(status_code=400, detail="Name and Email are required")
    return name, email


def _log_created(action: str, customer: CustomerOut) -> None:
    logger.info(
        action,
        extra={
            "extra_fields": {
                "customer_id": customer.id,
                "email": mask_email(customer.email),
            }
        },
    )


# ── GET /api/customer/welcome ─────────────────────────────────────────────────


@router.get("/welcome")
def welcome() -> dict:
    return {
        "message": "Welcome to Priority Customer Management API!",
        "version": "1.0.0",
        "dataSource": "In-memory data seeded from customers.json",
        "endpoints": ENDPOINTS,
    }


# ── POST /api/customer ────────────────────────────────────────────────────────


@router.post("", status_code=201, response_model=CustomerOut)
def add_customer(
    body: CustomerRequest,
    stores: Stores = Depends(get_stores),
) -> CustomerOut:
    """Add a customer registered right now with no purchases.

    Any registrationDate in the body is ignored; use /register for that.
    Raises 400 if name or email is blank.
    """
    name, email = _require_contact(body)
    created = stores.customers.create(
        CustomerDraft(
            name=name,
            email=email,
            registration_date=None,
            total_purchases=0,
        )
    )
    out = CustomerOut.model_validate(created)
    _log_created("customer created", out)
    return out


# ── POST /api/customer/register ───────────────────────────────────────────────


@router.post("/register", status_code=201, response_model=CustomerOut)
def register_customer(
    body: CustomerRequest,
    stores: Stores = Depends(get_stores),
) -> CustomerOut:
    """Register a customer at the given registrationDate (default now).

    Total purchases always start at 0.
    Raises 400 if name or email is blank.
    """
    name, email = _require_contact(body)
    created = stores.customers.create(
        CustomerDraft(
            name=name,
            email=email,
            registration_date=body.registration_date,
            total_purchases=0,
        )
    )
    out = CustomerOut.model_validate(created)
    _log_created("customer registered", out)
    return out


# ── GET /api/customer/loyal ───────────────────────────────────────────────────


@router.get("/loyal", response_model=list[CustomerOut])
def loyal_customers(
    date: datetime | None = None,
    stores: Stores = Depends(get_stores),
) -> list[CustomerOut]:
    """Customers registered on or before *date* with more than 10 purchases."""
    return [CustomerOut.model_validate(c) for c in stores.customers.loyal_customers(date)]


# ── GET /api/customer/{id} ────────────────────────────────────────────────────


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(
    customer_id: int = Path(..., description="Customer ID"),
    stores: Stores = Depends(get_stores),
) -> CustomerOut:
    customer = stores.customers.get(customer_id)
    if customer is None:
        raise HTTPException(
            status_code=404, detail=f"Customer with ID {customer_id} not found"
        )
    return CustomerOut.model_validate(customer)


# ── PUT /api/customer/{id} ────────────────────────────────────────────────────


@router.put("/{customer_id}", response_model=CustomerOut)
def update_customer(
    body: UpdateCustomerRequest,
    customer_id: int = Path(..., description="Customer ID"),
    stores: Stores = Depends(get_stores),
) -> CustomerOut:
    """Replace name, email and total purchases. Registration date is kept.

    Raises 400 if name or email is blank, 404 if the customer does not exist.
    """
    name, email = _require_contact(body)
    try:
        updated = stores.customers.update(
            customer_id,
            CustomerUpdate(
                name=name,
                email=email,
                total_purchases=body.total_purchases,
            ),
        )
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return CustomerOut.model_validate(updated)


# ── DELETE /api/customer/{id} ─────────────────────────────────────────────────


@router.delete("/{customer_id}", status_code=204)
def delete_customer(
    customer_id: int = Path(..., description="Customer ID"),
    stores: Stores = Depends(get_stores),
) -> Response:
    """Delete a customer. Visitations pointing at it are left in place."""
    if not stores.customers.delete(customer_id):
        raise HTTPException(
            status_code=404, detail=f"Customer with ID {customer_id} not found"
        )
    logger.info(
        "customer deleted",
        extra={"extra_fields": {"customer_id": customer_id}},
    )
    return Response(status_code=204)
