"""Rolling 180-day window filter."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable

from schengen_tracker.domain.constants import WINDOW_DAYS
from schengen_tracker.domain.models import ProcessedVisit


def window_start(reference_date: dt.date) -> dt.date:
    return reference_date - dt.timedelta(days=WINDOW_DAYS)


def intersects_window(visit: ProcessedVisit, reference_date: dt.date) -> bool:
    start = window_start(reference_date)
    return visit.effective_exit(reference_date) >= start and visit.entry_date <= reference_date


def relevant_visits(visits: Iterable[ProcessedVisit], reference_date: dt.date) -> list[ProcessedVisit]:
    """Schengen visits whose span touches ``[R - 180 days, R]``."""
    return [visit for visit in visits if visit.is_schengen and intersects_window(visit, reference_date)]


__all__ = ["intersects_window", "relevant_visits", "window_start"]
