"""Record types held by the in-memory stores.

Stored records carry an ``id`` assigned by their store. Drafts are what callers
hand to ``create``/``update``; they never carry an id.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Customer:
    id: int
    name: str
    email: str
    registration_date: datetime
    total_purchases: int = 0


@dataclass
class Hotel:
    id: int
    name: str
    address: str = ""
    city: str = ""
    country: str = ""
    star_rating: int = 0


@dataclass
class Visitation:
    id: int
    customer_id: int
    hotel_id: int
    visit_date: datetime


@dataclass(frozen=True)
class CustomerDraft:
    """New customer. ``registration_date=None`` means "now"."""

    name: str
    email: str
    registration_date: datetime | None = None
    total_purchases: int = 0


@dataclass(frozen=True)
class CustomerUpdate:
    """Mutable customer fields; registration date is fixed at creation."""

    name: str
    email: str
    total_purchases: int


@dataclass(frozen=True)
class HotelDraft:
    name: str
    address: str = ""
    city: str = ""
    country: str = ""
    star_rating: int = 0


@dataclass(frozen=True)
class VisitationDraft:
    """New or replacement visitation. ``visit_date=None`` means "now" on create
    and "keep the current date" on update."""

    customer_id: int
    hotel_id: int
    visit_date: datetime | None = None


@dataclass(frozen=True)
class VisitationDetail:
    """Visitation annotated with resolved customer and hotel names."""

    id: int
    customer_id: int
    customer_name: str
    hotel_id: int
    hotel_name: str
    visit_date: datetime
