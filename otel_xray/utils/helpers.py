"""Helper functions for OpenTelemetry compatibility."""

from __future__ import annotations

from otel_xray.model.span_record import Timestamp

TRACE_ID_BYTES = 16
SPAN_ID_BYTES = 8


def trace_id_to_bytes(trace_id: int) -> bytes:
    """
    Convert an OTel trace_id to its wire bytes.

    Args:
        trace_id: OTel trace_id as a 128-bit int

    Returns:
        16 big-endian bytes
    """
    return int(trace_id).to_bytes(TRACE_ID_BYTES, "big")


def span_id_to_bytes(span_id: int) -> bytes:
    """
    Convert an OTel span_id to its wire bytes.

    Args:
        span_id: OTel span_id as a 64-bit int

    Returns:
        8 big-endian bytes
    """
    return int(span_id).to_bytes(SPAN_ID_BYTES, "big")


def ns_to_timestamp(epoch_ns: int) -> Timestamp:
    """Convert OpenTelemetry epoch nanoseconds to a Timestamp."""
    return Timestamp.from_nanos(epoch_ns)
