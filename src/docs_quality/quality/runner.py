"""Check runner: executes external tools and interprets their exit status."""

from __future__ import annotations

import re
import shlex
import subprocess
from collections.abc import Sequence
from typing import TYPE_CHECKING

from docs_quality.quality.models import CheckDefinition, CheckResult
from docs_quality.utils.logging import get_logger

if TYPE_CHECKING:
    from docs_quality.config.settings import AppSettings

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 60.0
MAX_ISSUES = 10

LAUNCH_FAILURE_DETAIL = "check failed — inspect logs"
TIMEOUT_DETAIL = "check timed out"


def build_checks(settings: AppSettings) -> list[CheckDefinition]:
    """Return the format and lint checks, in the order they must run."""
    return [
        CheckDefinition(
            name="format",
            command=settings.format.command,
            issue_pattern=settings.format.issue_pattern,
            success_detail="All files are properly formatted",
            failure_detail="Some files need formatting. Run `npm run format` to fix.",
        ),
        CheckDefinition(
            name="lint",
            command=settings.lint.command,
            issue_pattern=settings.lint.issue_pattern,
            success_detail="All markdown files follow best practices",
            failure_detail="Linting failed - check logs for details",
            issues_detail="Found markdown issues that need manual fixes",
        ),
    ]


def run_check(check: CheckDefinition, timeout: float = DEFAULT_TIMEOUT) -> CheckResult:
    """Run one external check to completion and summarise its outcome.

    Exit code 0 passes. On failure the combined output is scanned only for
    issue codes; it is never copied into the detail. Tools that cannot be
    started or that outlive ``timeout`` yield a failing result instead of
    raising.
    """
    try:
        args = _split_command(check.command)
    except ValueError as e:
        logger.error("check_launch_failed", check=check.name, error=f"unparseable command: {e}")
        return CheckResult(name=check.name, passed=False, detail=LAUNCH_FAILURE_DETAIL)
    logger.info("check_started", check=check.name, command=" ".join(args))

    if not args:
        logger.error("check_launch_failed", check=check.name, error="empty command")
        return CheckResult(name=check.name, passed=False, detail=LAUNCH_FAILURE_DETAIL)

    try:
        completed = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        logger.error("check_timed_out", check=check.name, timeout=timeout)
        return CheckResult(name=check.name, passed=False, detail=TIMEOUT_DETAIL)
    except (OSError, ValueError) as e:
        logger.error("check_launch_failed", check=check.name, error=str(e))
        return CheckResult(name=check.name, passed=False, detail=LAUNCH_FAILURE_DETAIL)

    if completed.returncode == 0:
        logger.info("check_finished", check=check.name, passed=True)
        return CheckResult(name=check.name, passed=True, detail=check.success_detail)

    issues = extract_issues(completed.stdout or "", check.issue_pattern)
    if issues and check.issues_detail:
        detail = check.issues_detail.format(count=len(issues))
    else:
        detail = check.failure_detail

    logger.warning(
        "check_finished",
        check=check.name,
        passed=False,
        returncode=completed.returncode,
        issues=list(issues),
    )
    return CheckResult(name=check.name, passed=False, detail=detail, issues=issues)


def run_all_checks(
    checks: Sequence[CheckDefinition], timeout: float = DEFAULT_TIMEOUT
) -> list[CheckResult]:
    """Run checks sequentially, preserving their order."""
    return [run_check(check, timeout=timeout) for check in checks]


def extract_issues(output: str, pattern: str | None) -> tuple[str, ...]:
    """First distinct issue codes matching ``pattern``, in order of appearance."""
    if not pattern:
        return ()

    try:
        matches = re.finditer(pattern, output)
    except re.error as e:
        logger.warning("invalid_issue_pattern", pattern=pattern, error=str(e))
        return ()

    seen: dict[str, None] = {}
    for match in matches:
        seen.setdefault(match.group(0), None)
        if len(seen) >= MAX_ISSUES:
            break
    return tuple(seen)


def _split_command(command: str | Sequence[str]) -> list[str]:
    if isinstance(command, str):
        return shlex.split(command)
    return list(command)
