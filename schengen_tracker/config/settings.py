"""Runtime settings resolved from the environment."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field

from schengen_tracker.domain.constants import SAFE_SEARCH_HORIZON_DAYS
from schengen_tracker.domain.exceptions import ConfigurationError
from schengen_tracker.domain.membership import SchengenMembership

_TRUTHY = {"1", "true", "yes", "on"}


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def _split_names(raw: str | None) -> list[str]:
    return [name.strip() for name in str(raw or "").split(",") if name.strip()]


def _load_countries_file(path: str) -> list[str]:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"cannot read SCHENGEN_COUNTRIES_FILE {path!r}: {exc}") from exc
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise ConfigurationError(f"SCHENGEN_COUNTRIES_FILE {path!r} must hold a JSON array of names")
    return [item.strip() for item in data if item.strip()]


def resolve_schengen_countries() -> list[str]:
    path = str(os.getenv("SCHENGEN_COUNTRIES_FILE") or "").strip()
    if path:
        return _load_countries_file(path)
    return _split_names(os.getenv("SCHENGEN_COUNTRIES"))


def resolve_search_horizon() -> int:
    raw = str(os.getenv("SAFE_SEARCH_HORIZON_DAYS") or "").strip()
    if not raw:
        return SAFE_SEARCH_HORIZON_DAYS
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"SAFE_SEARCH_HORIZON_DAYS must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigurationError("SAFE_SEARCH_HORIZON_DAYS must be at least 1")
    return value


class Settings(BaseModel):
    schengen_countries: list[str] = Field(default_factory=list)
    known_countries: list[str] = Field(default_factory=list)
    safe_search_horizon_days: int = Field(default=SAFE_SEARCH_HORIZON_DAYS, ge=1)
    enable_docs: bool = Field(default=False)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


def resolve_settings() -> Settings:
    return Settings(
        schengen_countries=resolve_schengen_countries(),
        known_countries=_split_names(os.getenv("KNOWN_COUNTRIES")),
        safe_search_horizon_days=resolve_search_horizon(),
        enable_docs=_is_enabled(os.getenv("ENABLE_DOCS")),
        cors_origins=_split_names(os.getenv("CORS_ORIGINS")) or ["*"],
    )


def build_membership(settings: Settings) -> SchengenMembership:
    return SchengenMembership(settings.schengen_countries)


__all__ = [
    "Settings",
    "build_membership",
    "resolve_schengen_countries",
    "resolve_search_horizon",
    "resolve_settings",
]
