"""Customer store with the loyalty query."""

from __future__ import annotations

from datetime import datetime

from hotelvisits.domain.models import Customer, CustomerDraft, CustomerUpdate
from hotelvisits.infra.time import ensure_utc

from .base import RecordStore

# A customer is loyal with strictly more purchases than this
LOYALTY_PURCHASE_THRESHOLD = 10


class CustomerStore(RecordStore[Customer]):
    entity = "Customer"

    def create(self, draft: CustomerDraft) -> Customer:
        """Store a new customer.

        An unset registration date becomes the store clock's "now";
        total purchases are taken from the draft (0 unless supplied).
        """
        registered = (
            ensure_utc(draft.registration_date)
            if draft.registration_date is not None
            else self._clock()
        )
        return self._insert(
            lambda new_id: Customer(
                id=new_id,
                name=draft.name,
                email=draft.email,
                registration_date=registered,
                total_purchases=draft.total_purchases,
            )
        )

    def update(self, customer_id: int, patch: CustomerUpdate) -> Customer:
        """Overwrite name, e-mail and total purchases.

        Raises:
            RecordNotFoundError: No customer with that id.
        """

        def apply(customer: Customer) -> None:
            customer.name = patch.name
            customer.email = patch.email
            customer.total_purchases = patch.total_purchases

        return self._modify(customer_id, apply)

    def loyal_customers(self, as_of: datetime | None = None) -> list[Customer]:
        """Customers registered on or before *as_of* with more than
        LOYALTY_PURCHASE_THRESHOLD purchases. *as_of* defaults to now."""
        cutoff = ensure_utc(as_of) if as_of is not None else self._clock()
        return self._select(
            lambda c: c.registration_date <= cutoff
            and c.total_purchases > LOYALTY_PURCHASE_THRESHOLD
        )
