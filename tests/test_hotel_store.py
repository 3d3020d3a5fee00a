"""Tests for HotelStore."""

import pytest
from helpers import hotel_draft

from hotelvisits.domain.models import Hotel, HotelDraft
from hotelvisits.infra.stores.base import RecordNotFoundError
from hotelvisits.infra.stores.hotels import HotelStore


class TestHotelStore:
    """CRUD behaviour of HotelStore."""

    def test_create_assigns_ids_from_one(self):
        store = HotelStore()
        assert store.create(hotel_draft("A")).id == 1
        assert store.create(hotel_draft("B")).id == 2

    def test_create_copies_all_fields(self):
        store = HotelStore()
        created = store.create(
            HotelDraft(name="Grand", address="1 Main", city="Rome", country="Italy", star_rating=5)
        )
        assert created == Hotel(
            id=1, name="Grand", address="1 Main", city="Rome", country="Italy", star_rating=5
        )

    def test_update_overwrites_everything_but_id(self):
        store = HotelStore([Hotel(id=3, name="Old", city="Paris", star_rating=2)])
        updated = store.update(
            3, HotelDraft(name="New", address="2 Side", city="Nice", country="France", star_rating=4)
        )
        assert updated == Hotel(
            id=3, name="New", address="2 Side", city="Nice", country="France", star_rating=4
        )
        assert store.get(3) == updated

    def test_update_missing_raises(self):
        with pytest.raises(RecordNotFoundError):
            HotelStore().update(1, hotel_draft())

    def test_delete(self):
        store = HotelStore([Hotel(id=1, name="A")])
        assert store.delete(1) is True
        assert store.delete(1) is False
        assert store.list_all() == []

    def test_seed_records_are_copied(self):
        seed = Hotel(id=1, name="A")
        store = HotelStore([seed])
        seed.name = "changed outside"
        assert store.get(1).name == "A"

    def test_len(self):
        store = HotelStore([Hotel(id=1, name="A"), Hotel(id=2, name="B")])
        assert len(store) == 2
