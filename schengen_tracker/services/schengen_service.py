"""Application service for Schengen status and trip planning use-cases."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from typing import Optional

from schengen_tracker.domain.calculator.status import calculate_comprehensive_status
from schengen_tracker.domain.models import (
    CountryVisit,
    DateLike,
    FutureTripValidation,
    SafeTravelDates,
    SchengenCalculationResult,
)
from schengen_tracker.domain.planning.safe_dates import find_safe_travel_dates
from schengen_tracker.domain.planning.trip_validator import validate_future_trip
from schengen_tracker.services.context import ServiceContext
from schengen_tracker.validators import (
    parse_iso_date,
    validate_duration,
    validate_planned_trip,
    validate_visits,
)


def _optional_date(value: Optional[DateLike], *, field: str) -> Optional[dt.date]:
    if value is None or value == "":
        return None
    return parse_iso_date(value, field=field)


def execute_status(
    *,
    ctx: ServiceContext,
    visits: Iterable[CountryVisit],
    reference_date: Optional[DateLike] = None,
) -> SchengenCalculationResult:
    logger = ctx.request_logger()
    logger.start("status")
    checked = validate_visits(visits, known_countries=ctx.known_countries)
    reference = _optional_date(reference_date, field="reference_date")
    result = calculate_comprehensive_status(checked, reference, membership=ctx.membership)
    logger.event(
        "status_calculated",
        operation="status",
        visits=len(checked),
        used_days=result.status.used_days,
        is_compliant=result.status.is_compliant,
    )
    return result


def execute_trip_check(
    *,
    ctx: ServiceContext,
    visits: Iterable[CountryVisit],
    planned_entry: DateLike,
    planned_exit: DateLike,
    planned_country: str,
) -> FutureTripValidation:
    logger = ctx.request_logger()
    logger.start("validate_trip")
    checked = validate_visits(visits, known_countries=ctx.known_countries)
    entry, exit_ = validate_planned_trip(
        planned_entry,
        planned_exit,
        planned_country,
        known_countries=ctx.known_countries,
    )
    validation = validate_future_trip(checked, entry, exit_, planned_country, membership=ctx.membership)
    logger.event(
        "trip_validated",
        operation="validate_trip",
        country=planned_country,
        can_travel=validation.can_travel,
        violates_rule=validation.violates_rule,
        warnings=len(validation.warnings),
    )
    return validation


def execute_safe_date_search(
    *,
    ctx: ServiceContext,
    visits: Iterable[CountryVisit],
    desired_duration: int,
    earliest_date: Optional[DateLike] = None,
) -> Optional[SafeTravelDates]:
    logger = ctx.request_logger()
    logger.start("safe_dates")
    checked = validate_visits(visits, known_countries=ctx.known_countries)
    duration = validate_duration(desired_duration)
    earliest = _optional_date(earliest_date, field="earliest_date")
    horizon = ctx.settings.safe_search_horizon_days
    dates = find_safe_travel_dates(
        checked,
        duration,
        earliest,
        membership=ctx.membership,
        horizon_days=horizon,
    )
    logger.event(
        "safe_dates_searched",
        operation="safe_dates",
        desired_duration=duration,
        horizon_days=horizon,
        found=dates is not None,
    )
    if dates is None:
        logger.warning("safe_dates", f"no {duration}-day window found within {horizon} days")
    return dates


__all__ = ["execute_safe_date_search", "execute_status", "execute_trip_check"]
