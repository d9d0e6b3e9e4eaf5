"""Status classification into X-Ray error and throttle flags."""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Optional

from otel_xray.model.segment import Cause, ExceptionDetail
from otel_xray.model.span_record import Status, StatusCode


class Outcome(Enum):
    NONE = "none"
    ERROR = "error"
    THROTTLE = "throttle"


def classify(status: Optional[Status]) -> Outcome:
    """
    Map a span status onto the X-Ray flag it sets.

    Args:
        status: Span status, or None when unset

    Returns:
        THROTTLE for RESOURCE_EXHAUSTED, ERROR for any other non-OK code,
        NONE otherwise
    """
    if status is None or status.is_ok:
        return Outcome.NONE
    if status.code == StatusCode.RESOURCE_EXHAUSTED:
        return Outcome.THROTTLE
    return Outcome.ERROR


def exception_id(span_id: bytes, message: str) -> str:
    """Stable 16-hex-char exception id for a message raised by a span."""
    digest = hashlib.sha1(bytes(span_id) + message.encode("utf-8")).digest()
    return digest[:8].hex()


def build_cause(status: Optional[Status], span_id: bytes) -> Optional[Cause]:
    """
    Build the ``cause`` block for a failed span.

    A non-OK status with a message yields a single exception entry carrying
    that message. Anything else has no cause.
    """
    if classify(status) is Outcome.NONE or not status.message:
        return None
    detail = ExceptionDetail(id=exception_id(span_id, status.message), message=status.message)
    return Cause(exceptions=(detail,))
