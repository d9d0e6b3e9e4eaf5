"""Span to segment translation components."""

from otel_xray.translator.attributes import UnknownAttributePolicy, convert
from otel_xray.translator.ids import encode_span_id, encode_trace_id, is_valid_span_id
from otel_xray.translator.names import sanitize
from otel_xray.translator.segment_translator import SegmentTranslator, translate
from otel_xray.translator.status import Outcome, build_cause, classify
from otel_xray.translator.timestamps import to_epoch_seconds

__all__ = [
    "Outcome",
    "SegmentTranslator",
    "UnknownAttributePolicy",
    "build_cause",
    "classify",
    "convert",
    "encode_span_id",
    "encode_trace_id",
    "is_valid_span_id",
    "sanitize",
    "to_epoch_seconds",
    "translate",
]
