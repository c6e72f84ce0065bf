"""Validation boundary in front of the pure calculator."""

from schengen_tracker.validators.input_validator import (
    parse_iso_date,
    validate_duration,
    validate_planned_trip,
    validate_visit,
    validate_visits,
)

__all__ = [
    "parse_iso_date",
    "validate_duration",
    "validate_planned_trip",
    "validate_visit",
    "validate_visits",
]
