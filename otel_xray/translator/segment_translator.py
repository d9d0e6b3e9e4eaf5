"""Span record to X-Ray segment document translation."""

from __future__ import annotations

import re
import time
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Optional

from otel_xray.model.segment import SegmentDocument
from otel_xray.model.span_record import SpanRecord
from otel_xray.translator.attributes import convert
from otel_xray.translator.ids import encode_span_id, encode_trace_id, is_valid_span_id
from otel_xray.translator.names import sanitize
from otel_xray.translator.status import Outcome, build_cause, classify
from otel_xray.translator.timestamps import to_epoch_seconds

if TYPE_CHECKING:
    from otel_xray.config import XRayConfig

REMOTE_NAMESPACE = "remote"


def _default_config() -> "XRayConfig":
    # config imports translator constants, so it is loaded lazily here
    from otel_xray.config import XRayConfig

    return XRayConfig()


def _remote_namespace(span: SpanRecord, legacy: bool) -> Optional[str]:
    if legacy:
        return REMOTE_NAMESPACE if span.has_remote_parent is not None else None
    return REMOTE_NAMESPACE if span.has_remote_parent else None


def translate(
    span: SpanRecord,
    now: float,
    name_override: Optional[str] = None,
    config: Optional["XRayConfig"] = None,
) -> SegmentDocument:
    """
    Translate one span into a segment document.

    Args:
        span: Finished (or still open) span snapshot
        now: Current epoch seconds, used for trace id freshness
        name_override: Segment name to use instead of the span name
        config: Translation settings, defaults when None

    Returns:
        Fully populated SegmentDocument

    Raises:
        InvalidIdentifierError: If the trace or span id is malformed
    """
    config = config or _default_config()
    naming = config.naming
    options = config.translation

    name = sanitize(
        name_override or span.name,
        pattern=re.compile(naming.invalid_characters),
        max_length=naming.max_length,
        default_name=naming.default_name,
    )

    segment_id = encode_span_id(span.span_id)
    trace_id = encode_trace_id(
        span.trace_id,
        now,
        max_age=config.identifiers.max_age_seconds,
        max_skew=config.identifiers.max_skew_seconds,
    )
    parent_id = encode_span_id(span.parent_span_id) if is_valid_span_id(span.parent_span_id) else None

    start_time = to_epoch_seconds(span.start, options.millisecond_precision)
    if span.end is None:
        end_time, in_progress = None, True
    else:
        end_time, in_progress = to_epoch_seconds(span.end, options.millisecond_precision), None

    outcome = classify(span.status)
    cause = build_cause(span.status, span.span_id) if outcome is not Outcome.NONE else None

    annotations = convert(span.attributes, options.unknown_attributes)

    return SegmentDocument(
        name=name,
        id=segment_id,
        trace_id=trace_id,
        start_time=start_time,
        end_time=end_time,
        in_progress=in_progress,
        parent_id=parent_id,
        namespace=_remote_namespace(span, options.legacy_remote_namespace),
        error=True if outcome is Outcome.ERROR else None,
        throttle=True if outcome is Outcome.THROTTLE else None,
        annotations=MappingProxyType(annotations) if annotations is not None else None,
        cause=cause,
    )


class SegmentTranslator:
    """
    Translator bound to a configuration and a clock.

    The clock is read once per translate() call.
    """

    def __init__(
        self,
        config: Optional["XRayConfig"] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config or _default_config()
        self.clock = clock

    def translate(self, span: SpanRecord, name_override: Optional[str] = None) -> SegmentDocument:
        return translate(span, self.clock(), name_override=name_override, config=self.config)
