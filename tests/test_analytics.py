"""Tests for visitation analytics filters."""

import pytest
from helpers import utc

from hotelvisits.domain.analytics import AnalyticsQueryError, filter_details, month_bounds
from hotelvisits.domain.models import VisitationDetail


def _detail(id_: int, customer_id: int, hotel_id: int) -> VisitationDetail:
    return VisitationDetail(
        id=id_,
        customer_id=customer_id,
        customer_name="c",
        hotel_id=hotel_id,
        hotel_name="h",
        visit_date=utc(2024, 1, 1),
    )


DETAILS = [_detail(1, 1, 1), _detail(2, 2, 1), _detail(3, 1, 2), _detail(4, 3, 3)]


class TestMonthBounds:
    """Tests for month_bounds()."""

    def test_regular_month(self):
        assert month_bounds("2024-03") == (utc(2024, 3, 1), utc(2024, 3, 31, 23, 59).replace(second=59))

    def test_leap_february(self):
        _, end = month_bounds("2024-02")
        assert end.day == 29

    def test_december(self):
        start, end = month_bounds("2023-12")
        assert start == utc(2023, 12, 1)
        assert end.month == 12 and end.day == 31

    @pytest.mark.parametrize("bad", ["2024-13", "2024-00", "2024/03", "March", "", "24-03"])
    def test_invalid(self, bad):
        with pytest.raises(AnalyticsQueryError):
            month_bounds(bad)


class TestFilterDetails:
    """Tests for filter_details()."""

    def test_no_filters_keeps_everything(self):
        assert filter_details(DETAILS) == DETAILS

    def test_hotel_filter(self):
        assert [d.id for d in filter_details(DETAILS, hotel_ids={1})] == [1, 2]

    def test_customer_filter(self):
        assert [d.id for d in filter_details(DETAILS, customer_ids={1, 3})] == [1, 3, 4]

    def test_both_filters(self):
        assert [d.id for d in filter_details(DETAILS, hotel_ids={1, 2}, customer_ids={1})] == [1, 3]

    def test_empty_customer_set_matches_nothing(self):
        assert filter_details(DETAILS, customer_ids=set()) == []
