"""Span input and segment document output models."""

from otel_xray.model.segment import AnnotationValue, Cause, ExceptionDetail, SegmentDocument
from otel_xray.model.span_record import (
    AttributeKind,
    AttributeValue,
    SpanRecord,
    Status,
    StatusCode,
    Timestamp,
)

__all__ = [
    "AnnotationValue",
    "AttributeKind",
    "AttributeValue",
    "Cause",
    "ExceptionDetail",
    "SegmentDocument",
    "SpanRecord",
    "Status",
    "StatusCode",
    "Timestamp",
]
