"""Domain enums."""

from enum import Enum


class ValidationFailureKind(str, Enum):
    BAD_DATE = "bad_date"
    ENTRY_AFTER_EXIT = "entry_after_exit"
    UNKNOWN_COUNTRY = "unknown_country"
    BAD_DURATION = "bad_duration"
