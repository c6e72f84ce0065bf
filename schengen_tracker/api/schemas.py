"""API request/response models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from schengen_tracker.domain.models import CountryVisit, SafeTravelDates


class StatusRequest(BaseModel):
    visits: list[CountryVisit] = Field(default_factory=list, max_length=5000)
    reference_date: Optional[str] = Field(default=None, description="YYYY-MM-DD, defaults to today")


class TripCheckRequest(BaseModel):
    visits: list[CountryVisit] = Field(default_factory=list, max_length=5000)
    planned_entry: str = Field(description="YYYY-MM-DD")
    planned_exit: str = Field(description="YYYY-MM-DD")
    planned_country: str = Field(min_length=1, max_length=100)


class SafeDatesRequest(BaseModel):
    visits: list[CountryVisit] = Field(default_factory=list, max_length=5000)
    desired_duration: int = Field(description="Trip length in days")
    earliest_date: Optional[str] = Field(default=None, description="YYYY-MM-DD, defaults to today")


class SafeDatesResponse(BaseModel):
    found: bool
    dates: Optional[SafeTravelDates] = None


class HealthResponse(BaseModel):
    status: str = "ok"
