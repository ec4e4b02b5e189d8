"""Report delivery: console, files and pull-request comments."""

from docs_quality.output.base import ReportSink, ReportSinkError
from docs_quality.output.sinks import ConsoleSink, FileSink, emit_report

__all__ = ["ConsoleSink", "FileSink", "ReportSink", "ReportSinkError", "emit_report"]
