"""Seed snapshot loading.

Each entity has one JSON document shaped like::

    {"Customers": [{"id": 1, "name": "...", "registrationDate": "..."}, ...]}

Keys are matched case-insensitively and without underscores, so
``RegistrationDate``, ``registrationDate`` and ``registration_date`` are the
same field. A missing or malformed file yields an empty list; the problem is
logged, never raised.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ValidationError

from hotelvisits.domain.models import Customer, Hotel, Visitation
from hotelvisits.infra.time import Clock, ensure_utc, utc_now
from hotelvisits.observability.logging import get_logger
from hotelvisits.observability.redaction import redact_string

logger = get_logger(__name__)

T = TypeVar("T")

CUSTOMERS_FILE = "customers.json"
HOTELS_FILE = "hotels.json"
VISITATIONS_FILE = "visitations.json"


# ── Seed schemas ──────────────────────────────────────────────────────────────


class _CustomerSeed(BaseModel):
    id: int
    name: str = ""
    email: str = ""
    registration_date: datetime | None = None
    total_purchases: int = 0


class _HotelSeed(BaseModel):
    id: int
    name: str = ""
    address: str = ""
    city: str = ""
    country: str = ""
    star_rating: int = 0


class _VisitationSeed(BaseModel):
    id: int
    customer_id: int
    hotel_id: int
    visit_date: datetime | None = None


# ── Helpers ───────────────────────────────────────────────────────────────────


def _fold(key: str) -> str:
    return key.replace("_", "").lower()


def _normalise_keys(item: Any, model: type[BaseModel]) -> Any:
    """Rename an object's keys to the schema's field names when they fold equal."""
    if not isinstance(item, dict):
        return item
    by_fold = {_fold(name): name for name in model.model_fields}
    return {by_fold.get(_fold(k), k): v for k, v in item.items()}


def _read_items(path: Path, root_key: str) -> list[Any]:
    with path.open(encoding="utf-8") as fh:
        document = json.load(fh)
    if not isinstance(document, dict):
        raise ValueError("seed document is not an object")
    for key, value in document.items():
        if _fold(key) == _fold(root_key):
            if not isinstance(value, list):
                raise ValueError(f"{root_key} is not a list")
            return value
    return []


def load_seed(
    path: Path,
    root_key: str,
    model: type[BaseModel],
    convert: Callable[[Any], T],
) -> list[T]:
    """Load one seed document. Returns [] on any read or shape problem."""
    if not path.exists():
        logger.warning(
            "seed file missing",
            extra={"extra_fields": {"path": str(path), "root_key": root_key}},
        )
        return []

    try:
        items = _read_items(path, root_key)
        records = [convert(model.model_validate(_normalise_keys(i, model))) for i in items]
    except (OSError, ValueError, ValidationError) as exc:
        logger.warning(
            "seed file unreadable, starting empty",
            extra={
                "extra_fields": {
                    "path": str(path),
                    "root_key": root_key,
                    "error": type(exc).__name__,
                    "detail": redact_string(str(exc)),
                }
            },
        )
        return []

    logger.info(
        "seed loaded",
        extra={"extra_fields": {"path": str(path), "count": len(records)}},
    )
    return records


# ── Per-entity loaders ────────────────────────────────────────────────────────


def load_customers(data_dir: Path, clock: Clock = utc_now) -> list[Customer]:
    def convert(seed: _CustomerSeed) -> Customer:
        registered = seed.registration_date
        return Customer(
            id=seed.id,
            name=seed.name,
            email=seed.email,
            registration_date=ensure_utc(registered) if registered else clock(),
            total_purchases=seed.total_purchases,
        )

    return load_seed(data_dir / CUSTOMERS_FILE, "Customers", _CustomerSeed, convert)


def load_hotels(data_dir: Path) -> list[Hotel]:
    return load_seed(
        data_dir / HOTELS_FILE,
        "Hotels",
        _HotelSeed,
        lambda seed: Hotel(**seed.model_dump()),
    )


def load_visitations(data_dir: Path, clock: Clock = utc_now) -> list[Visitation]:
    def convert(seed: _VisitationSeed) -> Visitation:
        visited = seed.visit_date
        return Visitation(
            id=seed.id,
            customer_id=seed.customer_id,
            hotel_id=seed.hotel_id,
            visit_date=ensure_utc(visited) if visited else clock(),
        )

    return load_seed(
        data_dir / VISITATIONS_FILE, "Visitations", _VisitationSeed, convert
    )
