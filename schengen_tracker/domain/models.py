"""Pydantic domain models."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from schengen_tracker.domain.constants import MAX_STAY_DAYS

DateLike = Union[dt.date, str]


def _drop_time(value):
    # pydantic refuses datetimes with a time part for date fields; keep the day.
    if isinstance(value, dt.datetime):
        return value.date()
    return value


class CountryVisit(BaseModel):
    """A recorded stay in one country. ``exit_date=None`` means still there."""

    country: str
    entry_date: DateLike
    exit_date: Optional[DateLike] = None
    visa_type: str = "tourist"
    max_days: int = MAX_STAY_DAYS
    notes: str = ""

    @field_validator("entry_date", "exit_date", mode="before")
    @classmethod
    def drop_time_of_day(cls, v):
        return _drop_time(v)


class TripRecord(BaseModel):
    """A stay whose Schengen membership was already resolved upstream."""

    entry_date: DateLike
    exit_date: Optional[DateLike] = None
    is_schengen: bool = True

    @field_validator("entry_date", "exit_date", mode="before")
    @classmethod
    def drop_time_of_day(cls, v):
        return _drop_time(v)


@dataclass(frozen=True)
class ProcessedVisit:
    country: str
    entry_date: dt.date
    exit_date: Optional[dt.date]
    is_schengen: bool

    def effective_exit(self, reference_date: dt.date) -> dt.date:
        return self.exit_date if self.exit_date is not None else reference_date


class SchengenViolation(BaseModel):
    date: dt.date
    days_over_limit: int = Field(gt=0)
    description: str = ""


class SchengenStatus(BaseModel):
    used_days: int = Field(default=0, ge=0)
    remaining_days: int = Field(default=MAX_STAY_DAYS, ge=0)
    next_reset_date: dt.date
    is_compliant: bool = True
    violations: list[SchengenViolation] = Field(default_factory=list)


class FutureTripValidation(BaseModel):
    can_travel: bool
    warnings: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    max_stay_days: int = 0
    violates_rule: bool = False
    days_used_after_trip: int = 0
    remaining_days_after_trip: int = MAX_STAY_DAYS


class SafeTravelDates(BaseModel):
    start_date: dt.date
    end_date: dt.date


class SchengenCalculationResult(BaseModel):
    status: SchengenStatus
    warnings: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    next_allowed_entry: Optional[dt.date] = None
    max_stay_days: int = 0


class ErrorResponse(BaseModel):
    error: bool = True
    code: str = "UNKNOWN"
    message: str = ""
    details: list[str] = Field(default_factory=list)
