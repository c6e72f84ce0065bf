"""Input validator: reject malformed visits and trips before calculation."""

from __future__ import annotations

import datetime as dt
from collections.abc import Collection, Iterable
from typing import Optional

from schengen_tracker.domain.enums import ValidationFailureKind
from schengen_tracker.domain.exceptions import ValidationFailure
from schengen_tracker.domain.models import CountryVisit, DateLike


def parse_iso_date(value: Optional[DateLike], *, field: str) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    raw = str(value or "").strip()
    try:
        return dt.date.fromisoformat(raw)
    except ValueError:
        raise ValidationFailure(
            ValidationFailureKind.BAD_DATE,
            f"{field} must be a YYYY-MM-DD date, got {raw!r}",
            field=field,
        ) from None


def _check_order(entry: dt.date, exit_: dt.date, *, field: str) -> None:
    if entry > exit_:
        raise ValidationFailure(
            ValidationFailureKind.ENTRY_AFTER_EXIT,
            f"entry date {entry.isoformat()} is after exit date {exit_.isoformat()}",
            field=field,
        )


def _check_country(country: str, known_countries: Optional[Collection[str]], *, field: str) -> None:
    if known_countries is not None and country not in known_countries:
        raise ValidationFailure(
            ValidationFailureKind.UNKNOWN_COUNTRY,
            f"unknown country {country!r}",
            field=field,
        )


def validate_visit(
    visit: CountryVisit,
    *,
    known_countries: Optional[Collection[str]] = None,
    index: int = 0,
) -> CountryVisit:
    """Return a copy of ``visit`` with parsed dates, or raise ValidationFailure."""
    prefix = f"visits[{index}]"
    entry = parse_iso_date(visit.entry_date, field=f"{prefix}.entry_date")
    exit_ = None
    if visit.exit_date is not None and visit.exit_date != "":
        exit_ = parse_iso_date(visit.exit_date, field=f"{prefix}.exit_date")
        _check_order(entry, exit_, field=prefix)
    _check_country(visit.country, known_countries, field=f"{prefix}.country")
    return visit.model_copy(update={"entry_date": entry, "exit_date": exit_})


def validate_visits(
    visits: Iterable[CountryVisit],
    *,
    known_countries: Optional[Collection[str]] = None,
) -> list[CountryVisit]:
    return [
        validate_visit(visit, known_countries=known_countries, index=index)
        for index, visit in enumerate(visits)
    ]


def validate_planned_trip(
    planned_entry: DateLike,
    planned_exit: DateLike,
    planned_country: str,
    *,
    known_countries: Optional[Collection[str]] = None,
) -> tuple[dt.date, dt.date]:
    entry = parse_iso_date(planned_entry, field="planned_entry")
    exit_ = parse_iso_date(planned_exit, field="planned_exit")
    _check_order(entry, exit_, field="planned_exit")
    _check_country(planned_country, known_countries, field="planned_country")
    return entry, exit_


def validate_duration(days: int, *, field: str = "desired_duration") -> int:
    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise ValidationFailure(
            ValidationFailureKind.BAD_DURATION,
            f"{field} must be a positive number of days, got {days!r}",
            field=field,
        )
    return days
