"""Application services."""

from schengen_tracker.services.context import ServiceContext, make_service_context
from schengen_tracker.services.schengen_service import (
    execute_safe_date_search,
    execute_status,
    execute_trip_check,
)

__all__ = [
    "ServiceContext",
    "execute_safe_date_search",
    "execute_status",
    "execute_trip_check",
    "make_service_context",
]
