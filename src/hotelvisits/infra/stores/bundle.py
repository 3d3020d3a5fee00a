"""The three stores, built once at startup and passed to whoever needs them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from hotelvisits.infra.seed import load_customers, load_hotels, load_visitations
from hotelvisits.infra.time import Clock, utc_now

from .customers import CustomerStore
from .hotels import HotelStore
from .visitations import VisitationStore


@dataclass(frozen=True)
class Stores:
    customers: CustomerStore
    hotels: HotelStore
    visitations: VisitationStore


def empty_stores(clock: Clock = utc_now) -> Stores:
    return Stores(
        customers=CustomerStore(clock=clock),
        hotels=HotelStore(clock=clock),
        visitations=VisitationStore(clock=clock),
    )


def load_stores(data_dir: Path, clock: Clock = utc_now) -> Stores:
    """Seed each store from its JSON snapshot in *data_dir*.

    Runs once; a missing or broken snapshot leaves that store empty.
    """
    return Stores(
        customers=CustomerStore(load_customers(data_dir, clock), clock=clock),
        hotels=HotelStore(load_hotels(data_dir), clock=clock),
        visitations=VisitationStore(load_visitations(data_dir, clock), clock=clock),
    )
