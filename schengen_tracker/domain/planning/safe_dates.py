"""Safe travel date search."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Sequence
from typing import Optional, Protocol

from schengen_tracker.domain.calculator.normalizer import normalize_visits, to_date
from schengen_tracker.domain.constants import REPRESENTATIVE_SCHENGEN_COUNTRY, SAFE_SEARCH_HORIZON_DAYS
from schengen_tracker.domain.membership import MembershipCheck
from schengen_tracker.domain.models import CountryVisit, DateLike, ProcessedVisit, SafeTravelDates
from schengen_tracker.domain.planning.trip_validator import validate_schengen_trip


class SafeDateSearch(Protocol):
    def find(
        self,
        visits: Sequence[ProcessedVisit],
        desired_duration: int,
        earliest_date: dt.date,
        horizon_days: int,
    ) -> Optional[SafeTravelDates]:
        ...


class LinearScanSearch:
    """Try each start date in turn; cost is O(horizon x visits)."""

    def find(
        self,
        visits: Sequence[ProcessedVisit],
        desired_duration: int,
        earliest_date: dt.date,
        horizon_days: int,
    ) -> Optional[SafeTravelDates]:
        if desired_duration < 1:
            return None
        existing = list(visits)
        length = dt.timedelta(days=desired_duration - 1)
        for offset in range(horizon_days):
            start = earliest_date + dt.timedelta(days=offset)
            end = start + length
            validation = validate_schengen_trip(existing, start, end, REPRESENTATIVE_SCHENGEN_COUNTRY)
            if validation.can_travel and not validation.violates_rule:
                return SafeTravelDates(start_date=start, end_date=end)
        return None


def find_safe_travel_dates(
    visits: Iterable[CountryVisit],
    desired_duration: int,
    earliest_date: Optional[DateLike] = None,
    *,
    membership: MembershipCheck,
    horizon_days: int = SAFE_SEARCH_HORIZON_DAYS,
    strategy: Optional[SafeDateSearch] = None,
) -> Optional[SafeTravelDates]:
    """Earliest window of ``desired_duration`` days that keeps the traveler compliant.

    Returns None when nothing fits within ``horizon_days`` of ``earliest_date``.
    """
    start = to_date(earliest_date) if earliest_date is not None else dt.date.today()
    search = strategy or LinearScanSearch()
    return search.find(normalize_visits(visits, membership), desired_duration, start, horizon_days)


__all__ = ["LinearScanSearch", "SafeDateSearch", "find_safe_travel_dates"]
