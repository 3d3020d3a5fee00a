"""Shared test helper functions for hotelvisits tests.

Regular functions (not fixtures) importable by conftest.py and test modules.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from hotelvisits.domain.models import CustomerDraft, HotelDraft, VisitationDraft


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def customer_draft(
    name: str = "Ana",
    email: str = "a@x.com",
    registration_date: datetime | None = None,
    total_purchases: int = 0,
) -> CustomerDraft:
    return CustomerDraft(
        name=name,
        email=email,
        registration_date=registration_date,
        total_purchases=total_purchases,
    )


def hotel_draft(name: str = "Grand", city: str = "Rome", **kwargs) -> HotelDraft:
    return HotelDraft(name=name, city=city, **kwargs)


def visitation_draft(
    customer_id: int = 1,
    hotel_id: int = 1,
    visit_date: datetime | None = None,
) -> VisitationDraft:
    return VisitationDraft(customer_id=customer_id, hotel_id=hotel_id, visit_date=visit_date)


def write_seed(data_dir: Path, filename: str, document) -> Path:
    """Write a seed document (dict, or raw text) into data_dir."""
    path = data_dir / filename
    if isinstance(document, str):
        path.write_text(document, encoding="utf-8")
    else:
        path.write_text(json.dumps(document), encoding="utf-8")
    return path
