"""Future trip validator.

Simulates the status twice: on the planned entry date without the trip, and on
the planned exit date with the trip inserted. Warnings are evaluated
independently, so one plan can trigger several at once.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable

from schengen_tracker.domain.calculator.accounting import inclusive_days
from schengen_tracker.domain.calculator.normalizer import normalize_visits, to_date
from schengen_tracker.domain.calculator.status import status_from_processed
from schengen_tracker.domain.constants import MAX_STAY_DAYS, NON_SCHENGEN_MAX_STAY_DAYS
from schengen_tracker.domain.membership import MembershipCheck
from schengen_tracker.domain.models import CountryVisit, DateLike, FutureTripValidation, ProcessedVisit
from schengen_tracker.nlg import messages


def validate_future_trip(
    visits: Iterable[CountryVisit],
    planned_entry: DateLike,
    planned_exit: DateLike,
    planned_country: str,
    *,
    membership: MembershipCheck,
) -> FutureTripValidation:
    if not membership(planned_country):
        return FutureTripValidation(
            can_travel=True,
            warnings=[],
            suggestions=[messages.rule_not_applicable(planned_country)],
            max_stay_days=NON_SCHENGEN_MAX_STAY_DAYS,
            violates_rule=False,
            days_used_after_trip=0,
            remaining_days_after_trip=MAX_STAY_DAYS,
        )
    return validate_schengen_trip(
        normalize_visits(visits, membership),
        to_date(planned_entry),
        to_date(planned_exit),
        planned_country,
    )


def validate_schengen_trip(
    existing: list[ProcessedVisit],
    planned_entry: dt.date,
    planned_exit: dt.date,
    planned_country: str,
) -> FutureTripValidation:
    """Validate a trip already known to be a Schengen stay."""
    planned_days = inclusive_days(planned_entry, planned_exit)
    planned = ProcessedVisit(
        country=planned_country,
        entry_date=planned_entry,
        exit_date=planned_exit,
        is_schengen=True,
    )

    status_on_entry = status_from_processed(existing, planned_entry)
    status_after_trip = status_from_processed([*existing, planned], planned_exit)
    available = status_on_entry.remaining_days

    warnings: list[str] = []
    suggestions: list[str] = []

    if available == 0:
        warnings.append(messages.TRIP_AT_LIMIT_ON_ENTRY)
        suggestions.append(messages.enter_after(status_on_entry.next_reset_date))

    if planned_days > available:
        warnings.append(messages.trip_exceeds_available(planned_days, available))
        suggestions.append(messages.stay_at_most(available))

    if not status_after_trip.is_compliant:
        warnings.append(messages.TRIP_VIOLATES_RULE)
        if available > 0:
            safe_exit = planned_entry + dt.timedelta(days=available - 1)
            suggestions.append(messages.safe_stay_window(planned_entry, safe_exit, available))

    if not warnings:
        suggestions.append(messages.TRIP_COMPLIANT)
        suggestions.append(messages.remaining_after_trip(status_after_trip.remaining_days))

    return FutureTripValidation(
        can_travel=not warnings,
        warnings=warnings,
        suggestions=suggestions,
        max_stay_days=available,
        violates_rule=not status_after_trip.is_compliant,
        days_used_after_trip=status_after_trip.used_days,
        remaining_days_after_trip=status_after_trip.remaining_days,
    )


__all__ = ["validate_future_trip", "validate_schengen_trip"]
