"""Exporters for delivering segment documents."""

from otel_xray.exporter.segment_exporter import SegmentExporter

__all__ = ["SegmentExporter"]
