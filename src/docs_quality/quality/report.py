"""Report aggregation and Markdown rendering.

Everything here is pure: the same results always produce the same report
and the same bytes, so rendered output can be compared verbatim.
"""

from __future__ import annotations

from collections.abc import Iterable

from docs_quality.quality.models import CheckResult, QualityReport

PASSED_TITLE = "✅ **PASSED**"
FAILED_TITLE = "❌ **FAILED**"

SUCCESS_MESSAGE = "🎉 **Great job!** Your documentation follows Elite's standards perfectly."
ACTION_MESSAGE = (
    "🔧 **Action needed:** Please run `npm run format` locally to fix formatting "
    "issues and address any remaining linting errors manually."
)

# name -> (section heading, tool label)
CHECK_LABELS = {
    "format": ("Formatting Check", "Prettier Formatting"),
    # the published lint heading carries two trailing spaces
    "lint": ("Linting Check  ", "markdownlint Validation"),
}

HELP_BLOCK = """<details>
<summary>📖 Need help?</summary>

**To fix formatting issues:**
```bash
npm run format
```

**To check your changes:**
```bash
npm run lint
```

See our [Development Environment](../README.md#development-environment) documentation for more details.
</details>"""


def evaluate(results: Iterable[CheckResult]) -> QualityReport:
    """Combine check results; an empty run counts as passed."""
    ordered = tuple(results)
    overall = all(r.passed for r in ordered)
    return QualityReport(
        overall_passed=overall,
        results=ordered,
        action_message=SUCCESS_MESSAGE if overall else ACTION_MESSAGE,
    )


def render(report: QualityReport) -> str:
    title = PASSED_TITLE if report.overall_passed else FAILED_TITLE
    parts = [f"## 📚 Documentation Quality Check {title}"]
    parts.extend(_render_result(r) for r in report.results)
    parts.append("---")
    parts.append(report.action_message)
    parts.append(HELP_BLOCK)
    return "\n\n".join(parts)


def exit_code(report: QualityReport) -> int:
    return 0 if report.overall_passed else 1


def final_status_lines(report: QualityReport) -> list[str]:
    """Closing lines printed after the report when the gate finishes."""
    if report.overall_passed:
        return [
            "✅ All documentation quality checks passed!",
            "📚 Your documentation follows Elite's standards perfectly.",
        ]
    return [
        "❌ Documentation quality checks failed!",
        "Please check the PR comment for detailed results and fix the issues.",
    ]


def check_labels(name: str) -> tuple[str, str]:
    """Section heading and tool label for a check name."""
    return CHECK_LABELS.get(name, (f"{name.title()} Check", name))


def _render_result(result: CheckResult) -> str:
    section, label = check_labels(result.name)
    return f"### {section}\n{result.status_text} **{label}**\n{result.detail}"
