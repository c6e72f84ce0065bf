"""Violation detector."""

from __future__ import annotations

import datetime as dt

from schengen_tracker.domain.constants import MAX_STAY_DAYS
from schengen_tracker.domain.models import SchengenViolation
from schengen_tracker.nlg.messages import violation_description


def detect_violations(used_days: int, reference_date: dt.date) -> list[SchengenViolation]:
    """One aggregate violation for the calculation, or none."""
    if used_days <= MAX_STAY_DAYS:
        return []
    return [
        SchengenViolation(
            date=reference_date,
            days_over_limit=used_days - MAX_STAY_DAYS,
            description=violation_description(used_days),
        )
    ]


__all__ = ["detect_violations"]
