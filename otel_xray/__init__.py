"""otel_xray: translate finished tracing spans into AWS X-Ray segment documents."""

__version__ = "0.1.0"

from otel_xray.config import XRayConfig, load_config
from otel_xray.errors import ConfigError, InvalidIdentifierError, XRayTranslationError
from otel_xray.exporter import SegmentExporter
from otel_xray.model import (
    AttributeKind,
    AttributeValue,
    Cause,
    ExceptionDetail,
    SegmentDocument,
    SpanRecord,
    Status,
    StatusCode,
    Timestamp,
)
from otel_xray.translator import SegmentTranslator, UnknownAttributePolicy, translate

__all__ = [
    "__version__",
    "AttributeKind",
    "AttributeValue",
    "Cause",
    "ConfigError",
    "ExceptionDetail",
    "InvalidIdentifierError",
    "SegmentDocument",
    "SegmentExporter",
    "SegmentTranslator",
    "SpanRecord",
    "Status",
    "StatusCode",
    "Timestamp",
    "UnknownAttributePolicy",
    "XRayConfig",
    "XRayTranslationError",
    "load_config",
    "translate",
]
