"""Domain semantic exceptions."""

from __future__ import annotations

from typing import Optional

from schengen_tracker.domain.enums import ValidationFailureKind


class DomainError(Exception):
    """Base domain exception."""


class ValidationFailure(DomainError):
    """Raised by the input boundary when a visit or planned trip is malformed."""

    def __init__(self, kind: ValidationFailureKind, message: str, *, field: Optional[str] = None):
        self.kind = kind
        self.field = field
        super().__init__(message)


class ConfigurationError(DomainError):
    """Raised when settings cannot be turned into a usable configuration."""
