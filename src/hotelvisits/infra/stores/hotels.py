"""Hotel store."""

from __future__ import annotations

from hotelvisits.domain.models import Hotel, HotelDraft

from .base import RecordStore


class HotelStore(RecordStore[Hotel]):
    entity = "Hotel"

    def create(self, draft: HotelDraft) -> Hotel:
        return self._insert(
            lambda new_id: Hotel(
                id=new_id,
                name=draft.name,
                address=draft.address,
                city=draft.city,
                country=draft.country,
                star_rating=draft.star_rating,
            )
        )

    def update(self, hotel_id: int, patch: HotelDraft) -> Hotel:
        """Overwrite every field but the id.

        Raises:
            RecordNotFoundError: No hotel with that id.
        """

        def apply(hotel: Hotel) -> None:
            hotel.name = patch.name
            hotel.address = patch.address
            hotel.city = patch.city
            hotel.country = patch.country
            hotel.star_rating = patch.star_rating

        return self._modify(hotel_id, apply)
