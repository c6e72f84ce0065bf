"""User-facing warning, suggestion and recommendation texts."""

from __future__ import annotations

import datetime as dt

from schengen_tracker.domain.constants import MAX_STAY_DAYS, WINDOW_DAYS

# ── status ────────────────────────────────────────────

STATUS_VIOLATION = f"⚠️ Schengen violation: the {MAX_STAY_DAYS}/{WINDOW_DAYS}-day rule has been exceeded."
STATUS_LIMIT_REACHED = "⚠️ Schengen stay limit reached. No further stay is possible right now."

RECOMMEND_PLAN_DEPARTURE = "Plan your departure or review options for extending your stay."
RECOMMEND_COMFORTABLE = "Your current stay status is comfortably within the limit."
RECOMMEND_LEAVE_NOW = "Leave the Schengen Area immediately or contact the relevant authorities."


def violation_description(used_days: int) -> str:
    return f"{used_days} days used in current {WINDOW_DAYS}-day period (limit: {MAX_STAY_DAYS} days)"


def low_remaining_days(remaining_days: int) -> str:
    return f"⚠️ Caution: only {remaining_days} Schengen days remaining."


# ── future trip ───────────────────────────────────────


def rule_not_applicable(country: str) -> str:
    return f"{country} is not in the Schengen Area, so the {MAX_STAY_DAYS}/{WINDOW_DAYS}-day rule does not apply."


TRIP_AT_LIMIT_ON_ENTRY = f"⚠️ The {MAX_STAY_DAYS}-day limit is already reached on the planned entry date."
TRIP_VIOLATES_RULE = f"🚫 This trip would violate the Schengen {MAX_STAY_DAYS}/{WINDOW_DAYS}-day rule."
TRIP_COMPLIANT = "✅ The planned trip complies with the Schengen rules."


def enter_after(reset_date: dt.date) -> str:
    return f"Entry possible after: {reset_date.isoformat()}"


def trip_exceeds_available(planned_days: int, remaining_days: int) -> str:
    return f"⚠️ The planned {planned_days}-day stay exceeds the {remaining_days} days available."


def stay_at_most(remaining_days: int) -> str:
    return f"You can stay at most {remaining_days} days."


def safe_stay_window(start: dt.date, end: dt.date, days: int) -> str:
    return f"Safe stay: from {start.isoformat()} to {end.isoformat()} ({days} days)"


def remaining_after_trip(remaining_days: int) -> str:
    return f"Days remaining after the trip: {remaining_days}"


__all__ = [
    "RECOMMEND_COMFORTABLE",
    "RECOMMEND_LEAVE_NOW",
    "RECOMMEND_PLAN_DEPARTURE",
    "STATUS_LIMIT_REACHED",
    "STATUS_VIOLATION",
    "TRIP_AT_LIMIT_ON_ENTRY",
    "TRIP_COMPLIANT",
    "TRIP_VIOLATES_RULE",
    "enter_after",
    "low_remaining_days",
    "remaining_after_trip",
    "rule_not_applicable",
    "safe_stay_window",
    "stay_at_most",
    "trip_exceeds_available",
    "violation_description",
]
