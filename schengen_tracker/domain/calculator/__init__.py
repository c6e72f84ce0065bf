"""Rolling-window day accounting for the 90/180-day rule."""

from schengen_tracker.domain.calculator.accounting import count_used_days, inclusive_days
from schengen_tracker.domain.calculator.normalizer import normalize_visits, to_date
from schengen_tracker.domain.calculator.reset import next_reset_date
from schengen_tracker.domain.calculator.status import (
    calculate_comprehensive_status,
    calculate_max_stay_days,
    calculate_schengen_status,
    count_schengen_days,
    generate_recommendations,
    generate_warnings,
    get_next_entry_date,
)
from schengen_tracker.domain.calculator.violations import detect_violations
from schengen_tracker.domain.calculator.window import relevant_visits, window_start

__all__ = [
    "calculate_comprehensive_status",
    "calculate_max_stay_days",
    "calculate_schengen_status",
    "count_schengen_days",
    "count_used_days",
    "detect_violations",
    "generate_recommendations",
    "generate_warnings",
    "get_next_entry_date",
    "inclusive_days",
    "next_reset_date",
    "normalize_visits",
    "relevant_visits",
    "to_date",
    "window_start",
]
