"""Visitation store with per-customer, per-hotel and date-range queries.

Customer and hotel ids are not checked here. Callers validate them before
inserting, and reads never re-check them.
"""

from __future__ import annotations

from datetime import datetime

from hotelvisits.domain.models import Visitation, VisitationDraft
from hotelvisits.infra.time import ensure_utc

from .base import RecordStore


class VisitationStore(RecordStore[Visitation]):
    entity = "Visitation"

    def create(self, draft: VisitationDraft) -> Visitation:
        """Store a new visitation; an unset visit date becomes "now"."""
        visited = (
            ensure_utc(draft.visit_date) if draft.visit_date is not None else self._clock()
        )
        return self._insert(
            lambda new_id: Visitation(
                id=new_id,
                customer_id=draft.customer_id,
                hotel_id=draft.hotel_id,
                visit_date=visited,
            )
        )

    def update(self, visitation_id: int, patch: VisitationDraft) -> Visitation:
        """Overwrite customer and hotel ids, and the visit date when given.

        Raises:
            RecordNotFoundError: No visitation with that id.
        """
        visited = ensure_utc(patch.visit_date) if patch.visit_date is not None else None

        def apply(visitation: Visitation) -> None:
            visitation.customer_id = patch.customer_id
            visitation.hotel_id = patch.hotel_id
            if visited is not None:
                visitation.visit_date = visited

        return self._modify(visitation_id, apply)

    def by_customer(self, customer_id: int) -> list[Visitation]:
        return self._select(lambda v: v.customer_id == customer_id)

    def by_hotel(self, hotel_id: int) -> list[Visitation]:
        return self._select(lambda v: v.hotel_id == hotel_id)

    def by_date_range(self, start: datetime, end: datetime) -> list[Visitation]:
        """Visitations with ``start <= visit_date <= end``.

        No ordering check: an inverted range simply matches nothing.
        """
        lo, hi = ensure_utc(start), ensure_utc(end)
        return self._select(lambda v: lo <= v.visit_date <= hi)
