"""Adapters from tracing SDK span types to SpanRecord."""

from otel_xray.adapters.otel import span_record_from_readable, status_from_otel

__all__ = ["span_record_from_readable", "status_from_otel"]
