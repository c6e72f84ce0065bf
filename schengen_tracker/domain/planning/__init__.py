"""Future trip planning on top of the status calculator."""

from schengen_tracker.domain.planning.safe_dates import LinearScanSearch, SafeDateSearch, find_safe_travel_dates
from schengen_tracker.domain.planning.trip_validator import validate_future_trip

__all__ = [
    "LinearScanSearch",
    "SafeDateSearch",
    "find_safe_travel_dates",
    "validate_future_trip",
]
