"""Structured logging: one JSON object per line."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional


class StructuredLogger:
    """Writes JSON-line events tagged with a trace id."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(line + "\n")
            self._output.flush()
        except (OSError, TypeError, ValueError) as exc:
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "timestamp": time.time(),
                "error": str(exc),
            }
            sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
            sys.stderr.flush()

    def start(self, operation: str, **extra: Any) -> None:
        self._timers[operation] = time.time()
        self._emit({"event": "operation_start", "operation": operation, **extra})

    def event(self, name: str, *, operation: Optional[str] = None, **extra: Any) -> None:
        data: dict[str, Any] = {"event": name, **extra}
        if operation is not None:
            start = self._timers.pop(operation, time.time())
            data["operation"] = operation
            data["duration_ms"] = round((time.time() - start) * 1000, 1)
        self._emit(data)

    def warning(self, operation: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "operation": operation, "message": message, **extra})

    def error(self, operation: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "operation": operation, "error": error, **extra})


_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        _logger = StructuredLogger(trace_id=trace_id)
    return _logger


__all__ = ["StructuredLogger", "get_logger"]
