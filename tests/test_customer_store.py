"""Tests for CustomerStore."""

import pytest
from helpers import customer_draft, utc

from hotelvisits.domain.models import Customer, CustomerUpdate
from hotelvisits.infra.stores.base import RecordNotFoundError
from hotelvisits.infra.stores.customers import CustomerStore
from hotelvisits.infra.time import fixed_clock

NOW = utc(2024, 6, 15, 12)


@pytest.fixture
def store():
    return CustomerStore(clock=fixed_clock(NOW))


class TestCreate:
    """Tests for create()."""

    def test_first_id_is_one(self, store):
        assert store.create(customer_draft()).id == 1

    def test_ids_are_sequential(self, store):
        ids = [store.create(customer_draft(name=f"c{i}")).id for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_unset_registration_date_uses_clock(self, store):
        created = store.create(customer_draft())
        assert created.registration_date == NOW

    def test_supplied_registration_date_is_kept(self, store):
        created = store.create(customer_draft(registration_date=utc(2020, 1, 1)))
        assert created.registration_date == utc(2020, 1, 1)

    def test_naive_registration_date_treated_as_utc(self, store):
        from datetime import datetime

        created = store.create(customer_draft(registration_date=datetime(2020, 1, 1)))
        assert created.registration_date == utc(2020, 1, 1)

    def test_total_purchases_defaults_to_zero(self, store):
        assert store.create(customer_draft()).total_purchases == 0

    def test_total_purchases_supplied(self, store):
        assert store.create(customer_draft(total_purchases=7)).total_purchases == 7

    def test_id_continues_after_seed(self):
        seeded = CustomerStore(
            [Customer(id=4, name="x", email="x@x.com", registration_date=NOW)]
        )
        assert seeded.create(customer_draft()).id == 5


class TestReads:
    """Tests for list_all() and get()."""

    def test_list_preserves_insertion_order(self, store):
        for name in ("Zed", "Ana", "Bo"):
            store.create(customer_draft(name=name))
        assert [c.name for c in store.list_all()] == ["Zed", "Ana", "Bo"]

    def test_list_is_a_snapshot(self, store):
        store.create(customer_draft())
        snapshot = store.list_all()
        snapshot.clear()
        store.create(customer_draft(name="second"))
        assert len(store.list_all()) == 2
        assert snapshot == []

    def test_mutating_returned_record_does_not_touch_store(self, store):
        created = store.create(customer_draft(name="Ana"))
        created.name = "Hacked"
        store.get(created.id).name = "Hacked again"
        assert store.get(created.id).name == "Ana"

    def test_get_missing_returns_none(self, store):
        assert store.get(42) is None

    def test_get_returns_last_written_values(self, store):
        created = store.create(customer_draft())
        store.update(created.id, CustomerUpdate(name="Bea", email="b@x.com", total_purchases=3))
        fetched = store.get(created.id)
        assert (fetched.name, fetched.email, fetched.total_purchases) == ("Bea", "b@x.com", 3)


class TestUpdate:
    """Tests for update()."""

    def test_overwrites_mutable_fields_only(self, store):
        created = store.create(customer_draft(registration_date=utc(2021, 5, 5)))
        updated = store.update(
            created.id, CustomerUpdate(name="New", email="new@x.com", total_purchases=12)
        )
        assert updated.id == created.id
        assert updated.name == "New"
        assert updated.email == "new@x.com"
        assert updated.total_purchases == 12
        assert updated.registration_date == utc(2021, 5, 5)

    def test_missing_raises_not_found(self, store):
        with pytest.raises(RecordNotFoundError) as exc_info:
            store.update(9, CustomerUpdate(name="n", email="e@x.com", total_purchases=0))
        assert exc_info.value.entity == "Customer"
        assert exc_info.value.record_id == 9
        assert "Customer with ID 9 not found" in str(exc_info.value)


class TestDelete:
    """Tests for delete()."""

    def test_delete_existing(self, store):
        created = store.create(customer_draft())
        assert store.delete(created.id) is True
        assert store.get(created.id) is None

    def test_delete_missing_returns_false(self, store):
        assert store.delete(1) is False

    def test_deleting_max_id_frees_it(self, store):
        store.create(customer_draft())
        second = store.create(customer_draft())
        store.delete(second.id)
        assert store.create(customer_draft()).id == 2

    def test_emptied_store_restarts_at_one(self, store):
        only = store.create(customer_draft())
        store.delete(only.id)
        assert len(store) == 0
        assert store.create(customer_draft()).id == 1

    def test_delete_below_max_keeps_max_plus_one(self, store):
        first = store.create(customer_draft())
        store.create(customer_draft())
        store.delete(first.id)
        assert store.create(customer_draft()).id == 3


class TestLoyalCustomers:
    """Tests for loyal_customers()."""

    def test_registration_and_purchases_boundary(self, store):
        store.create(customer_draft(registration_date=utc(2024, 1, 1), total_purchases=11))
        assert [c.total_purchases for c in store.loyal_customers(utc(2024, 6, 1))] == [11]
        assert store.loyal_customers(utc(2023, 12, 1)) == []

    def test_exactly_ten_purchases_is_not_loyal(self, store):
        store.create(customer_draft(registration_date=utc(2020, 1, 1), total_purchases=10))
        assert store.loyal_customers(utc(2024, 1, 1)) == []

    def test_registered_exactly_at_cutoff_is_included(self, store):
        store.create(customer_draft(registration_date=utc(2024, 1, 1), total_purchases=20))
        assert len(store.loyal_customers(utc(2024, 1, 1))) == 1

    def test_defaults_to_clock(self, store):
        store.create(customer_draft(registration_date=utc(2024, 6, 1), total_purchases=30))
        store.create(customer_draft(registration_date=utc(2024, 7, 1), total_purchases=30))
        loyal = store.loyal_customers()
        assert [c.registration_date for c in loyal] == [utc(2024, 6, 1)]

    def test_keeps_storage_order(self, store):
        for name in ("c", "a", "b"):
            store.create(
                customer_draft(name=name, registration_date=utc(2020, 1, 1), total_purchases=50)
            )
        assert [c.name for c in store.loyal_customers(utc(2024, 1, 1))] == ["c", "a", "b"]
