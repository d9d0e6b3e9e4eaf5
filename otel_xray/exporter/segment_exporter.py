"""Span exporter that hands each finished span to a sink as a segment document."""

from __future__ import annotations

import logging
import sys
import time
from typing import Callable, Optional, Sequence, TextIO

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult

from otel_xray.adapters.otel import span_record_from_readable
from otel_xray.config import XRayConfig
from otel_xray.errors import InvalidIdentifierError
from otel_xray.translator.segment_translator import SegmentTranslator

logger = logging.getLogger(__name__)


class SegmentExporter(SpanExporter):
    """
    OpenTelemetry exporter producing X-Ray segment documents.

    Each span is translated once and its JSON text passed to ``sink``.
    Without a sink, documents are written one per line to ``stream``
    (stdout by default). Delivery to X-Ray is the sink's job.
    """

    def __init__(
        self,
        sink: Optional[Callable[[str], None]] = None,
        stream: Optional[TextIO] = None,
        config: Optional[XRayConfig] = None,
        name_override: Optional[str] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize the exporter.

        Args:
            sink: Callable receiving one serialized segment document
            stream: Text stream used when no sink is given
            config: Translation settings
            name_override: Segment name used for every span instead of its own
            clock: Source of current epoch seconds
        """
        self.stream = stream or sys.stdout
        self.sink = sink or self._write_line
        self.name_override = name_override
        self.translator = SegmentTranslator(config=config, clock=clock)
        self._shutdown = False

        if self.translator.config.logging.debug:
            logging.getLogger("otel_xray").setLevel(logging.DEBUG)

    def _write_line(self, document: str) -> None:
        print(document, file=self.stream)

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        if self._shutdown:
            logger.warning("export called after shutdown, dropping %d spans", len(spans))
            return SpanExportResult.FAILURE

        for span in spans:
            try:
                record = span_record_from_readable(span)
                document = self.translator.translate(record, name_override=self.name_override)
            except InvalidIdentifierError as exc:
                logger.warning("Skipping span '%s': %s", span.name, exc)
                continue

            try:
                self.sink(document.to_json())
            except Exception as exc:
                logger.error("Segment sink failed for span '%s': %s", span.name, exc, exc_info=True)
                return SpanExportResult.FAILURE

        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        self._shutdown = True

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return True
