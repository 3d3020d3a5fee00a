"""Visitation analytics filters used by the dashboard.

Narrows joined visitation details by calendar month, by a set of hotels and
by a set of customers (typically the loyal ones as of the month's start).
"""

from __future__ import annotations

import calendar
import re
from datetime import datetime, timezone
from typing import Collection, Iterable

from hotelvisits.domain.models import VisitationDetail

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


class AnalyticsQueryError(ValueError):
    """Raised for a malformed analytics filter."""


def month_bounds(month: str) -> tuple[datetime, datetime]:
    """Return the closed UTC range covering a ``YYYY-MM`` month.

    The range runs from the first instant of the month to 23:59:59 on its
    last day.

    Raises:
        AnalyticsQueryError: *month* is not a valid ``YYYY-MM`` value.
    """
    match = _MONTH_PATTERN.match(month.strip())
    if not match:
        raise AnalyticsQueryError(f"Invalid month {month!r}, expected YYYY-MM")
    year, mon = int(match.group(1)), int(match.group(2))
    if not 1 <= mon <= 12 or year < 1:
        raise AnalyticsQueryError(f"Invalid month {month!r}, expected YYYY-MM")

    last_day = calendar.monthrange(year, mon)[1]
    start = datetime(year, mon, 1, tzinfo=timezone.utc)
    end = datetime(year, mon, last_day, 23, 59, 59, tzinfo=timezone.utc)
    return start, end


def filter_details(
    details: Iterable[VisitationDetail],
    *,
    hotel_ids: Collection[int] | None = None,
    customer_ids: Collection[int] | None = None,
) -> list[VisitationDetail]:
    """Keep details matching every filter that was given.

    ``None`` disables a filter; an empty collection matches nothing.
    """
    result = []
    for d in details:
        if hotel_ids is not None and d.hotel_id not in hotel_ids:
            continue
        if customer_ids is not None and d.customer_id not in customer_ids:
            continue
        result.append(d)
    return result
