"""Tests for report aggregation and rendering."""

from __future__ import annotations

from docs_quality.quality.models import CheckResult
from docs_quality.quality.report import (
    ACTION_MESSAGE,
    SUCCESS_MESSAGE,
    evaluate,
    exit_code,
    final_status_lines,
    render,
)

EXPECTED_FAILED_REPORT = """## 📚 Documentation Quality Check ❌ **FAILED**

### Formatting Check
✅ passed **Prettier Formatting**
All files are properly formatted

### Linting Check
❌ failed **markdownlint Validation**
Found markdown issues that need manual fixes

---

🔧 **Action needed:** Please run `npm run format` locally to fix formatting issues and address any remaining linting errors manually.

<details>
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
</details>""".replace(
    "### Linting Check\n", "### Linting Check  \n"
)


def test_all_passed(format_pass, lint_pass):
    report = evaluate([format_pass, lint_pass])
    assert report.overall_passed is True
    assert report.action_message == SUCCESS_MESSAGE
    assert exit_code(report) == 0
    assert "PASSED" in render(report).splitlines()[0]


def test_one_failure_fails_the_gate(format_pass, lint_fail):
    report = evaluate([format_pass, lint_fail])
    assert report.overall_passed is False
    assert report.action_message == ACTION_MESSAGE
    assert exit_code(report) == 1
    markdown = render(report)
    assert ACTION_MESSAGE in markdown
    assert SUCCESS_MESSAGE not in markdown


def test_empty_results_pass():
    report = evaluate([])
    assert report.overall_passed is True
    assert exit_code(report) == 0


def test_overall_matches_all_passed():
    flags = [
        (True, True, True),
        (True, False, True),
        (False, False, False),
        (False,),
        (True,),
    ]
    for combo in flags:
        results = [
            CheckResult(name=f"c{i}", passed=p, detail="d") for i, p in enumerate(combo)
        ]
        report = evaluate(results)
        assert report.overall_passed == all(combo)
        assert (exit_code(report) == 0) == report.overall_passed


def test_render_matches_fixed_template(format_pass, lint_fail):
    assert render(evaluate([format_pass, lint_fail])) == EXPECTED_FAILED_REPORT


def test_lint_heading_keeps_published_bytes(format_pass, lint_fail):
    markdown = render(evaluate([format_pass, lint_fail]))
    assert "\n### Linting Check  \n" in markdown
    assert "\n### Formatting Check\n" in markdown


def test_render_is_deterministic(format_pass, lint_fail):
    first = render(evaluate([format_pass, lint_fail]))
    second = render(evaluate([format_pass, lint_fail]))
    assert first == second


def test_render_lists_each_result_once_in_order():
    results = [
        CheckResult(name="lint", passed=True, detail="lint detail"),
        CheckResult(name="format", passed=False, detail="format detail"),
        CheckResult(name="spelling", passed=True, detail="spelling detail"),
    ]
    markdown = render(evaluate(results))
    sections = [line.rstrip() for line in markdown.splitlines() if line.startswith("### ")]
    assert sections == ["### Linting Check", "### Formatting Check", "### Spelling Check"]
    for r in results:
        assert markdown.count(r.detail) == 1
    assert markdown.index("lint detail") < markdown.index("format detail")


def test_render_does_not_include_issue_codes(format_pass, lint_fail):
    assert "MD013" not in render(evaluate([format_pass, lint_fail]))


def test_final_status_lines(format_pass, lint_pass, lint_fail):
    assert final_status_lines(evaluate([format_pass, lint_pass]))[0] == (
        "✅ All documentation quality checks passed!"
    )
    assert final_status_lines(evaluate([format_pass, lint_fail]))[0] == (
        "❌ Documentation quality checks failed!"
    )
