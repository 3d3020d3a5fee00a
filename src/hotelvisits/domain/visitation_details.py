"""Visitation detail join.

Resolves a visitation's customer and hotel ids into display names. Dangling
references are expected (deletes are not cascaded) and fall back to fixed
placeholder names instead of failing.
"""

from __future__ import annotations

from typing import Iterable

from hotelvisits.domain.models import Customer, Hotel, Visitation, VisitationDetail
from hotelvisits.infra.stores.customers import CustomerStore
from hotelvisits.infra.stores.hotels import HotelStore

UNKNOWN_CUSTOMER = "Unknown Customer"
UNKNOWN_HOTEL = "Unknown Hotel"


def build_detail(
    visitation: Visitation,
    customer: Customer | None,
    hotel: Hotel | None,
) -> VisitationDetail:
    return VisitationDetail(
        id=visitation.id,
        customer_id=visitation.customer_id,
        customer_name=customer.name if customer is not None else UNKNOWN_CUSTOMER,
        hotel_id=visitation.hotel_id,
        hotel_name=hotel.name if hotel is not None else UNKNOWN_HOTEL,
        visit_date=visitation.visit_date,
    )


def build_details(
    visitations: Iterable[Visitation],
    customers: Iterable[Customer],
    hotels: Iterable[Hotel],
) -> list[VisitationDetail]:
    """Join many visitations against pre-fetched customer and hotel lists.

    Both lists are indexed once. With duplicate ids the first record wins.
    """
    customers_by_id: dict[int, Customer] = {}
    for c in customers:
        customers_by_id.setdefault(c.id, c)
    hotels_by_id: dict[int, Hotel] = {}
    for h in hotels:
        hotels_by_id.setdefault(h.id, h)

    return [
        build_detail(v, customers_by_id.get(v.customer_id), hotels_by_id.get(v.hotel_id))
        for v in visitations
    ]


def detail_for(
    visitation: Visitation,
    customers: CustomerStore,
    hotels: HotelStore,
) -> VisitationDetail:
    """Join a single visitation with point lookups into the stores."""
    return build_detail(
        visitation,
        customers.get(visitation.customer_id),
        hotels.get(visitation.hotel_id),
    )
