"""Data models for quality check results."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

PASSED_STATUS = "✅ passed"
FAILED_STATUS = "❌ failed"


@dataclass(frozen=True)
class CheckDefinition:
    """An external check and the detail messages for each of its outcomes.

    ``issues_detail`` may reference ``{count}``, the number of distinct
    issue codes found.
    """

    name: str
    command: str | tuple[str, ...]
    success_detail: str
    failure_detail: str
    issue_pattern: str | None = None
    issues_detail: str | None = None


class CheckResult(BaseModel):
    """Outcome of a single external check."""

    model_config = ConfigDict(frozen=True)

    name: str
    passed: bool
    detail: str
    issues: tuple[str, ...] = ()

    @property
    def status_text(self) -> str:
        return PASSED_STATUS if self.passed else FAILED_STATUS


class QualityReport(BaseModel):
    """Aggregated outcome of every check in a run."""

    model_config = ConfigDict(frozen=True)

    overall_passed: bool
    results: tuple[CheckResult, ...]
    action_message: str
