"""Trace and span identifier encoding for X-Ray segment documents."""

from __future__ import annotations

import logging

from otel_xray.errors import InvalidIdentifierError

logger = logging.getLogger(__name__)

TRACE_ID_VERSION = "1"
MAX_AGE_SECONDS = 60 * 60 * 24 * 28  # 28 days
MAX_SKEW_SECONDS = 60 * 5  # 5 minutes

_SPAN_ID_LENGTH = 8
_TRACE_ID_LENGTH = 16
_EPOCH_LENGTH = 4


def _check_identifier(value: bytes, expected: int, kind: str) -> bytes:
    if value is None or len(value) != expected:
        raise InvalidIdentifierError(
            f"{kind} must be exactly {expected} bytes",
            kind,
            0 if value is None else len(value),
        )
    if not any(value):
        raise InvalidIdentifierError(
            f"{kind} is the all-zero invalid identifier",
            kind,
            len(value),
        )
    return bytes(value)


def is_valid_span_id(span_id) -> bool:
    """True for an 8-byte, non-zero span identifier."""
    return span_id is not None and len(span_id) == _SPAN_ID_LENGTH and any(span_id)


def encode_span_id(span_id: bytes) -> str:
    """
    Encode a span id as the X-Ray segment id.

    Args:
        span_id: 8-byte span identifier

    Returns:
        16 lowercase hex characters

    Raises:
        InvalidIdentifierError: If the id is not 8 bytes or is all zero
    """
    return _check_identifier(span_id, _SPAN_ID_LENGTH, "span_id").hex()


def encode_trace_id(
    trace_id: bytes,
    now: float,
    max_age: int = MAX_AGE_SECONDS,
    max_skew: int = MAX_SKEW_SECONDS,
) -> str:
    """
    Encode a trace id in the X-Ray ``1-<epoch>-<unique>`` format.

    The first four bytes of the id are read as a big-endian unsigned epoch.
    When that epoch is older than ``max_age`` or more than ``max_skew`` in
    the future relative to ``now``, ``now`` is used instead. The remaining
    12 bytes are always carried over verbatim, so the substituted epoch
    never changes the unique part of the id.

    Args:
        trace_id: 16-byte trace identifier
        now: Current epoch seconds
        max_age: Oldest accepted embedded epoch, in seconds before ``now``
        max_skew: Furthest accepted embedded epoch, in seconds after ``now``

    Returns:
        Trace id string, e.g. ``1-5759e988-bd862e3fe1be46a994272793``

    Raises:
        InvalidIdentifierError: If the id is not 16 bytes or is all zero
    """
    raw = _check_identifier(trace_id, _TRACE_ID_LENGTH, "trace_id")
    epoch_now = int(now)
    epoch = int.from_bytes(raw[:_EPOCH_LENGTH], "big")

    delta = epoch_now - epoch
    if delta > max_age or delta < -max_skew:
        logger.debug(
            "trace id epoch %d outside freshness window (delta=%ds), using %d",
            epoch,
            delta,
            epoch_now,
        )
        epoch = epoch_now

    epoch_hex = format(epoch & 0xFFFFFFFF, "08x")
    return f"{TRACE_ID_VERSION}-{epoch_hex}-{raw[_EPOCH_LENGTH:].hex()}"
