"""Telemetry helpers and metrics."""

from .metrics import (
    ERROR_COUNTER,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    WISHES_CREATED,
    WISHES_DELETED,
    increment_wishes_created,
    increment_wishes_deleted,
    observe_request,
)

__all__ = [
    "ERROR_COUNTER",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "WISHES_CREATED",
    "WISHES_DELETED",
    "increment_wishes_created",
    "increment_wishes_deleted",
    "observe_request",
]
