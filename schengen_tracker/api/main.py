"""FastAPI application exposing the Schengen calculator."""

from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from schengen_tracker.api.schemas import (
    HealthResponse,
    SafeDatesRequest,
    SafeDatesResponse,
    StatusRequest,
    TripCheckRequest,
)
from schengen_tracker.config.settings import resolve_settings
from schengen_tracker.domain.exceptions import ValidationFailure
from schengen_tracker.domain.models import ErrorResponse, FutureTripValidation, SchengenCalculationResult
from schengen_tracker.services import (
    ServiceContext,
    execute_safe_date_search,
    execute_status,
    execute_trip_check,
    make_service_context,
)

_api_logger = logging.getLogger("schengen-tracker.api")

load_dotenv()

_settings = resolve_settings()

app = FastAPI(
    title="schengen-tracker",
    version="1.0.0",
    docs_url="/docs" if _settings.enable_docs else None,
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

_context: Optional[ServiceContext] = None


def get_service_context() -> ServiceContext:
    global _context
    if _context is None:
        _context = make_service_context(_settings)
    return _context


@app.exception_handler(ValidationFailure)
async def _validation_failure_handler(_request: Request, exc: ValidationFailure) -> JSONResponse:
    _api_logger.info("rejected input: %s (%s)", exc, exc.kind.value)
    body = ErrorResponse(
        code=exc.kind.value,
        message=str(exc),
        details=[exc.field] if exc.field else [],
    )
    return JSONResponse(status_code=400, content=body.model_dump())


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@app.post("/schengen/status", response_model=SchengenCalculationResult)
def schengen_status(req: StatusRequest, ctx: ServiceContext = Depends(get_service_context)):
    return execute_status(ctx=ctx, visits=req.visits, reference_date=req.reference_date)


@app.post("/schengen/validate-trip", response_model=FutureTripValidation)
def validate_trip(req: TripCheckRequest, ctx: ServiceContext = Depends(get_service_context)):
    return execute_trip_check(
        ctx=ctx,
        visits=req.visits,
        planned_entry=req.planned_entry,
        planned_exit=req.planned_exit,
        planned_country=req.planned_country,
    )


@app.post("/schengen/safe-dates", response_model=SafeDatesResponse)
def safe_dates(req: SafeDatesRequest, ctx: ServiceContext = Depends(get_service_context)):
    dates = execute_safe_date_search(
        ctx=ctx,
        visits=req.visits,
        desired_duration=req.desired_duration,
        earliest_date=req.earliest_date,
    )
    return SafeDatesResponse(found=dates is not None, dates=dates)
