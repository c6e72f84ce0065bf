"""Service context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from schengen_tracker.config.settings import Settings, build_membership, resolve_settings
from schengen_tracker.domain.membership import MembershipCheck
from schengen_tracker.infrastructure.logging import StructuredLogger, get_logger


@dataclass
class ServiceContext:
    membership: MembershipCheck
    settings: Settings = field(default_factory=Settings)
    known_countries: Optional[frozenset[str]] = None
    log_output: Any = None

    def request_logger(self, trace_id: Optional[str] = None) -> StructuredLogger:
        """Fresh logger per call; timers must not be shared across threads."""
        return StructuredLogger(trace_id=trace_id, output=self.log_output)


def make_service_context(settings: Optional[Settings] = None) -> ServiceContext:
    resolved = settings or resolve_settings()
    if not resolved.schengen_countries:
        get_logger().warning(
            "service_context",
            "no Schengen countries configured; every destination is treated as non-Schengen",
        )
    known = None
    if resolved.known_countries:
        known = frozenset(resolved.known_countries) | frozenset(resolved.schengen_countries)
    return ServiceContext(
        membership=build_membership(resolved),
        settings=resolved,
        known_countries=known,
    )


__all__ = ["ServiceContext", "make_service_context"]
