"""Visit normalizer: raw visit records to typed date intervals."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from typing import Optional

from schengen_tracker.domain.membership import MembershipCheck
from schengen_tracker.domain.models import CountryVisit, DateLike, ProcessedVisit, TripRecord


def to_date(value: DateLike) -> dt.date:
    # datetime is a date subclass; drop the time part before comparing days.
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value).strip()[:10])


def to_optional_date(value: Optional[DateLike]) -> Optional[dt.date]:
    if value is None or value == "":
        return None
    return to_date(value)


def normalize_visits(visits: Iterable[CountryVisit], membership: MembershipCheck) -> list[ProcessedVisit]:
    return [
        ProcessedVisit(
            country=visit.country,
            entry_date=to_date(visit.entry_date),
            exit_date=to_optional_date(visit.exit_date),
            is_schengen=bool(membership(visit.country)),
        )
        for visit in visits
    ]


def normalize_trip_records(trips: Iterable[TripRecord]) -> list[ProcessedVisit]:
    return [
        ProcessedVisit(
            country="",
            entry_date=to_date(trip.entry_date),
            exit_date=to_optional_date(trip.exit_date),
            is_schengen=trip.is_schengen,
        )
        for trip in trips
    ]


__all__ = ["normalize_trip_records", "normalize_visits", "to_date", "to_optional_date"]
