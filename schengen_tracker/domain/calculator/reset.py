"""Reset date calculator.

The returned date is when the oldest counted visit starts leaving the window,
i.e. when the used-day count begins to decrease if no new visits happen. It is
not a reset-to-zero date.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence

from schengen_tracker.domain.calculator.window import window_start
from schengen_tracker.domain.constants import WINDOW_DAYS
from schengen_tracker.domain.models import ProcessedVisit


def next_reset_date(visits: Sequence[ProcessedVisit], reference_date: dt.date) -> dt.date:
    period = dt.timedelta(days=WINDOW_DAYS)
    start = window_start(reference_date)
    entries = [visit.entry_date for visit in visits if visit.entry_date >= start]
    if not entries:
        return reference_date + period
    return min(entries) + period


__all__ = ["next_reset_date"]
