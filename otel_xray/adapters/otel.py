"""Build SpanRecords from OpenTelemetry SDK spans."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.trace import StatusCode as OTelStatusCode

from otel_xray.errors import InvalidIdentifierError
from otel_xray.model.span_record import AttributeValue, SpanRecord, Status, StatusCode
from otel_xray.utils.helpers import ns_to_timestamp, span_id_to_bytes, trace_id_to_bytes

# Attributes that mark an errored span as rejected for lack of capacity
_HTTP_STATUS_KEYS = ("http.status_code", "http.response.status_code")
_GRPC_STATUS_KEY = "rpc.grpc.status_code"
_HTTP_TOO_MANY_REQUESTS = 429


def _is_resource_exhausted(attributes: Mapping[str, Any]) -> bool:
    for key in _HTTP_STATUS_KEYS:
        if attributes.get(key) == _HTTP_TOO_MANY_REQUESTS:
            return True
    return attributes.get(_GRPC_STATUS_KEY) == int(StatusCode.RESOURCE_EXHAUSTED)


def status_from_otel(span: ReadableSpan) -> Optional[Status]:
    """
    Map an OTel status onto a canonical Status.

    UNSET maps to None. ERROR maps to RESOURCE_EXHAUSTED when the span
    recorded HTTP 429 or gRPC code 8, otherwise UNKNOWN.
    """
    otel_status = span.status
    if otel_status is None or otel_status.status_code is OTelStatusCode.UNSET:
        return None
    if otel_status.status_code is OTelStatusCode.OK:
        return Status(StatusCode.OK)

    code = StatusCode.RESOURCE_EXHAUSTED if _is_resource_exhausted(span.attributes or {}) else StatusCode.UNKNOWN
    return Status(code, otel_status.description or None)


def span_record_from_readable(span: ReadableSpan) -> SpanRecord:
    """
    Snapshot an OTel ReadableSpan as a SpanRecord.

    Args:
        span: Span handed to a SpanExporter

    Returns:
        SpanRecord with byte identifiers, typed attributes and canonical status

    Raises:
        InvalidIdentifierError: If the span carries no span context
    """
    context = span.context
    if context is None:
        raise InvalidIdentifierError("span has no span context", "span_context", 0)
    parent = span.parent

    parent_span_id = None
    has_remote_parent = None
    if parent is not None:
        has_remote_parent = bool(parent.is_remote)
        if parent.is_valid:
            parent_span_id = span_id_to_bytes(parent.span_id)

    attributes = {key: AttributeValue.of(value) for key, value in (span.attributes or {}).items()}

    return SpanRecord(
        trace_id=trace_id_to_bytes(context.trace_id),
        span_id=span_id_to_bytes(context.span_id),
        name=span.name,
        start=ns_to_timestamp(span.start_time or 0),
        end=ns_to_timestamp(span.end_time) if span.end_time is not None else None,
        parent_span_id=parent_span_id,
        has_remote_parent=has_remote_parent,
        status=status_from_otel(span),
        attributes=attributes,
    )
