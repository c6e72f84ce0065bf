"""Infrastructure services and cross-cutting utilities."""

from schengen_tracker.infrastructure.logging import StructuredLogger, get_logger

__all__ = ["StructuredLogger", "get_logger"]
