"""Utility functions for otel_xray."""

from otel_xray.utils.helpers import (
    ns_to_timestamp,
    span_id_to_bytes,
    trace_id_to_bytes,
)

__all__ = [
    "ns_to_timestamp",
    "span_id_to_bytes",
    "trace_id_to_bytes",
]
