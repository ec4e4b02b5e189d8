"""Shared test fixtures."""

from __future__ import annotations

import os
import shlex
import sys
from pathlib import Path

import pytest

from docs_quality.config.settings import get_settings
from docs_quality.quality.models import CheckResult

_ENV_PREFIXES = ("FORMAT_", "LINT_", "GITHUB_")
_ENV_NAMES = ("TIMEOUT_SECONDS", "REPORT_FILE", "LOG_LEVEL", "LOG_JSON")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep the runner's environment and any local config files out of tests."""
    for name in list(os.environ):
        if name.startswith(_ENV_PREFIXES) or name in _ENV_NAMES:
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _python_command(code: str) -> str:
    return shlex.join([sys.executable, "-c", code])


@pytest.fixture
def python_command():
    """Build a command line running a snippet with the current interpreter."""
    return _python_command


@pytest.fixture
def passing_command() -> str:
    return _python_command("print('ok')")


@pytest.fixture
def lint_failure_command() -> str:
    return _python_command(
        "import sys; "
        "print('docs/a.md:3 MD013/line-length Line length'); "
        "print('docs/b.md:9 MD033/no-inline-html Inline HTML', file=sys.stderr); "
        "sys.exit(1)"
    )


@pytest.fixture
def format_pass() -> CheckResult:
    return CheckResult(name="format", passed=True, detail="All files are properly formatted")


@pytest.fixture
def lint_pass() -> CheckResult:
    return CheckResult(
        name="lint", passed=True, detail="All markdown files follow best practices"
    )


@pytest.fixture
def lint_fail() -> CheckResult:
    return CheckResult(
        name="lint",
        passed=False,
        detail="Found markdown issues that need manual fixes",
        issues=("MD013", "MD033"),
    )
