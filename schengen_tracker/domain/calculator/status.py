"""Status calculator: the 90/180-day rule as of a reference date.

Every function here is pure. ``reference_date`` defaults to today, and the
Schengen membership check is always passed in by the caller.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Sequence
from typing import Optional

from schengen_tracker.domain.calculator.accounting import count_used_days
from schengen_tracker.domain.calculator.normalizer import normalize_trip_records, normalize_visits
from schengen_tracker.domain.calculator.reset import next_reset_date
from schengen_tracker.domain.calculator.violations import detect_violations
from schengen_tracker.domain.calculator.window import relevant_visits
from schengen_tracker.domain.constants import (
    COMFORTABLE_REMAINING_DAYS,
    LOW_REMAINING_DAYS_THRESHOLD,
    MAX_STAY_DAYS,
    PLAN_DEPARTURE_THRESHOLD_DAYS,
)
from schengen_tracker.domain.membership import MembershipCheck
from schengen_tracker.domain.models import (
    CountryVisit,
    ProcessedVisit,
    SchengenCalculationResult,
    SchengenStatus,
    TripRecord,
)
from schengen_tracker.nlg import messages


def _resolve_reference(reference_date: Optional[dt.date]) -> dt.date:
    return reference_date if reference_date is not None else dt.date.today()


def status_from_processed(visits: Sequence[ProcessedVisit], reference_date: dt.date) -> SchengenStatus:
    relevant = relevant_visits(visits, reference_date)
    used_days = count_used_days(relevant, reference_date)
    violations = detect_violations(used_days, reference_date)
    return SchengenStatus(
        used_days=used_days,
        remaining_days=max(0, MAX_STAY_DAYS - used_days),
        next_reset_date=next_reset_date(relevant, reference_date),
        is_compliant=not violations,
        violations=violations,
    )


def calculate_schengen_status(
    visits: Iterable[CountryVisit],
    reference_date: Optional[dt.date] = None,
    *,
    membership: MembershipCheck,
) -> SchengenStatus:
    reference = _resolve_reference(reference_date)
    return status_from_processed(normalize_visits(visits, membership), reference)


def generate_warnings(status: SchengenStatus) -> list[str]:
    warnings: list[str] = []
    if not status.is_compliant:
        warnings.append(messages.STATUS_VIOLATION)
    if 0 < status.remaining_days <= LOW_REMAINING_DAYS_THRESHOLD:
        warnings.append(messages.low_remaining_days(status.remaining_days))
    if status.remaining_days == 0 and status.is_compliant:
        warnings.append(messages.STATUS_LIMIT_REACHED)
    return warnings


def generate_recommendations(status: SchengenStatus) -> list[str]:
    recommendations: list[str] = []
    if 0 < status.remaining_days <= PLAN_DEPARTURE_THRESHOLD_DAYS:
        recommendations.append(messages.RECOMMEND_PLAN_DEPARTURE)
    if status.remaining_days > COMFORTABLE_REMAINING_DAYS:
        recommendations.append(messages.RECOMMEND_COMFORTABLE)
    if not status.is_compliant:
        recommendations.append(messages.RECOMMEND_LEAVE_NOW)
    return recommendations


def calculate_max_stay_days(status: SchengenStatus) -> int:
    if not status.is_compliant:
        return 0
    return status.remaining_days


def get_next_entry_date(
    visits: Iterable[CountryVisit],
    reference_date: Optional[dt.date] = None,
    *,
    membership: MembershipCheck,
) -> dt.date:
    """Reference date when entry is possible right away, else the next reset date."""
    reference = _resolve_reference(reference_date)
    status = calculate_schengen_status(visits, reference, membership=membership)
    if status.is_compliant and status.remaining_days > 0:
        return reference
    return status.next_reset_date


def count_schengen_days(trips: Iterable[TripRecord], reference_date: Optional[dt.date] = None) -> int:
    reference = _resolve_reference(reference_date)
    return status_from_processed(normalize_trip_records(trips), reference).used_days


def calculate_comprehensive_status(
    visits: Iterable[CountryVisit],
    reference_date: Optional[dt.date] = None,
    *,
    membership: MembershipCheck,
) -> SchengenCalculationResult:
    status = calculate_schengen_status(visits, reference_date, membership=membership)
    return SchengenCalculationResult(
        status=status,
        warnings=generate_warnings(status),
        recommendations=generate_recommendations(status),
        next_allowed_entry=None if status.is_compliant else status.next_reset_date,
        max_stay_days=status.remaining_days,
    )


__all__ = [
    "calculate_comprehensive_status",
    "calculate_max_stay_days",
    "calculate_schengen_status",
    "count_schengen_days",
    "generate_recommendations",
    "generate_warnings",
    "get_next_entry_date",
    "status_from_processed",
]
