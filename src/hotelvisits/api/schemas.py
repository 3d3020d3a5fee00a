"""Request and response bodies.

JSON field names are camelCase, the shape the dashboard reads and posts.
snake_case names are accepted on input as well.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ── Responses ─────────────────────────────────────────────────────────────────


class CustomerOut(_CamelModel):
    id: int
    name: str
    email: str
    registration_date: datetime
    total_purchases: int


class HotelOut(_CamelModel):
    id: int
    name: str
    address: str
    city: str
    country: str
    star_rating: int


class VisitationDetailOut(_CamelModel):
    id: int
    customer_id: int
    customer_name: str
    hotel_id: int
    hotel_name: str
    visit_date: datetime


# ── Requests ──────────────────────────────────────────────────────────────────


class CustomerRequest(_CamelModel):
    # The dashboard posts its whole form state (id, totalPurchases, ...)
    model_config = ConfigDict(extra="ignore")

    # null name/email is a blank field (400), not a schema error (422)
    name: str | None = ""
    email: str | None = ""
    registration_date: datetime | None = None


class UpdateCustomerRequest(_CamelModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = ""
    email: str | None = ""
    total_purchases: int = Field(default=0, ge=0)


class HotelRequest(_CamelModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = ""
    address: str = ""
    city: str = ""
    country: str = ""
    star_rating: int = 0


class VisitationRequest(_CamelModel):
    model_config = ConfigDict(extra="ignore")

    customer_id: int
    hotel_id: int
    visit_date: datetime | None = None
