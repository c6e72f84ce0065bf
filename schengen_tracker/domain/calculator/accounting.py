"""Day accountant: inclusive day counts clipped to the window."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable

from schengen_tracker.domain.calculator.window import window_start
from schengen_tracker.domain.models import ProcessedVisit


def inclusive_days(start: dt.date, end: dt.date) -> int:
    """Days from ``start`` to ``end`` counting both border-crossing days."""
    return (end - start).days + 1


def clipped_span(visit: ProcessedVisit, reference_date: dt.date) -> tuple[dt.date, dt.date]:
    start = max(visit.entry_date, window_start(reference_date))
    end = min(visit.effective_exit(reference_date), reference_date)
    return start, end


def count_used_days(visits: Iterable[ProcessedVisit], reference_date: dt.date) -> int:
    # Overlapping records are summed as-is, duplicates included.
    total = 0
    for visit in visits:
        start, end = clipped_span(visit, reference_date)
        if start <= end:
            total += inclusive_days(start, end)
    return total


__all__ = ["clipped_span", "count_used_days", "inclusive_days"]
