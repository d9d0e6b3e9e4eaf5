"""Timestamp conversion to X-Ray epoch seconds."""

from __future__ import annotations

from otel_xray.model.span_record import Timestamp

_NANOS_PER_MILLI = 1_000_000


def to_epoch_seconds(timestamp: Timestamp, millisecond_precision: bool = False) -> float:
    """
    Convert a timestamp to fractional epoch seconds.

    With ``millisecond_precision`` the nanoseconds are truncated to whole
    milliseconds first.
    """
    if millisecond_precision:
        return timestamp.seconds + (timestamp.nanos // _NANOS_PER_MILLI) / 1000.0
    return timestamp.seconds + timestamp.nanos / 1_000_000_000
