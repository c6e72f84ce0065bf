"""Domain package exports."""

from schengen_tracker.domain.constants import (
    MAX_STAY_DAYS,
    SAFE_SEARCH_HORIZON_DAYS,
    WINDOW_DAYS,
)
from schengen_tracker.domain.enums import ValidationFailureKind
from schengen_tracker.domain.exceptions import ConfigurationError, DomainError, ValidationFailure
from schengen_tracker.domain.membership import MembershipCheck, SchengenMembership
from schengen_tracker.domain.models import (
    CountryVisit,
    ErrorResponse,
    FutureTripValidation,
    ProcessedVisit,
    SafeTravelDates,
    SchengenCalculationResult,
    SchengenStatus,
    SchengenViolation,
    TripRecord,
)

__all__ = [
    "ConfigurationError",
    "CountryVisit",
    "DomainError",
    "ErrorResponse",
    "FutureTripValidation",
    "MembershipCheck",
    "ProcessedVisit",
    "SafeTravelDates",
    "SchengenCalculationResult",
    "SchengenMembership",
    "SchengenStatus",
    "SchengenViolation",
    "TripRecord",
    "ValidationFailure",
    "ValidationFailureKind",
    "MAX_STAY_DAYS",
    "SAFE_SEARCH_HORIZON_DAYS",
    "WINDOW_DAYS",
]
