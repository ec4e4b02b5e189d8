"""Report sink Protocol and supporting types."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class ReportSinkError(Exception):
    """Base exception for a report that could not be delivered."""


@runtime_checkable
class ReportSink(Protocol):
    """Destination for a rendered report: a stream, a file, a PR comment.

    Sinks are handed to the pipeline explicitly, so nothing downstream of the
    CLI reads output locations from the environment.
    """

    @property
    def sink_name(self) -> str:
        """Short identifier used in logs, e.g. 'console', 'file'."""
        ...

    def write(self, markdown: str) -> None:
        """Deliver the rendered report. Raises ReportSinkError on failure."""
        ...
