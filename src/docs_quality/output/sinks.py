"""Local report sinks and fan-out delivery."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from docs_quality.output.base import ReportSink, ReportSinkError
from docs_quality.utils.logging import get_logger

logger = get_logger(__name__)


class ConsoleSink:
    """Writes the report to a text stream, stdout unless told otherwise."""

    sink_name = "console"

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, markdown: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(markdown)
        if not markdown.endswith("\n"):
            stream.write("\n")
        stream.flush()


class FileSink:
    """Writes the report to a file, e.g. a comment body picked up by a later CI step."""

    sink_name = "file"

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def write(self, markdown: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(markdown, encoding="utf-8")
        except OSError as e:
            raise ReportSinkError(f"Could not write report to {self._path}: {e}") from e
        logger.info("report_written", path=str(self._path))


def emit_report(markdown: str, sinks: Iterable[ReportSink]) -> list[ReportSinkError]:
    """Deliver the report to every sink in order.

    A failing sink does not stop the others; its error is logged and returned.
    """
    failures: list[ReportSinkError] = []
    for sink in sinks:
        try:
            sink.write(markdown)
        except ReportSinkError as e:
            logger.warning("sink_failed", sink=sink.sink_name, error=str(e))
            failures.append(e)
    return failures
