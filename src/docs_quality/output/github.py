"""GitHub pull-request comments and step outputs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx

from docs_quality.output.base import ReportSinkError
from docs_quality.utils.logging import get_logger

if TYPE_CHECKING:
    from docs_quality.config.settings import GitHubSettings
    from docs_quality.quality.models import QualityReport

logger = get_logger(__name__)


class CommentPostError(ReportSinkError):
    """The comment API rejected or never received the comment."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@runtime_checkable
class CommentPoster(Protocol):
    def post(self, body: str, issue_number: int) -> None:
        """Post ``body`` on the given issue or PR. Raises CommentPostError on failure."""
        ...


class GitHubCommentPoster:
    """Posts issue comments through the GitHub REST API."""

    def __init__(self, settings: GitHubSettings, client: httpx.Client | None = None) -> None:
        self._settings = settings
        self._client = client or httpx.Client(
            timeout=30.0,
            headers={
                "Accept": "application/vnd.github+json",
                "User-Agent": "docs-quality",
                "X-GitHub-Api-Version": "2022-11-28",
            },
        )

    def post(self, body: str, issue_number: int) -> None:
        token = self._settings.token.get_secret_value()
        if not token:
            raise CommentPostError("GitHub token is not configured (GITHUB_TOKEN)")

        repository = self._settings.repository.strip("/")
        if repository.count("/") != 1:
            raise CommentPostError(
                f"GitHub repository must look like 'owner/repo', got {repository!r}"
            )

        url = f"{self._settings.api_url.rstrip('/')}/repos/{repository}/issues/{issue_number}/comments"

        try:
            response = self._client.post(
                url,
                json={"body": body},
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            raise CommentPostError(f"Failed to post comment: {e}") from e

        if response.status_code >= 400:
            message = _error_message(response)
            raise CommentPostError(
                f"Failed to post comment: HTTP {response.status_code} {message}".rstrip(),
                status_code=response.status_code,
            )

        logger.info("comment_posted", repository=repository, issue=issue_number)

    def close(self) -> None:
        self._client.close()


class CommentSink:
    """Adapts a CommentPoster to the ReportSink protocol for one thread."""

    sink_name = "comment"

    def __init__(self, poster: CommentPoster, issue_number: int) -> None:
        self._poster = poster
        self._issue_number = issue_number

    def write(self, markdown: str) -> None:
        self._poster.post(markdown, self._issue_number)


def resolve_issue_number(settings: GitHubSettings) -> int | None:
    """PR or issue number from settings, falling back to the CI event payload."""
    if settings.issue_number is not None:
        return settings.issue_number
    if settings.event_path is None:
        return None

    try:
        payload = json.loads(Path(settings.event_path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("event_payload_unreadable", path=str(settings.event_path), error=str(e))
        return None

    if not isinstance(payload, dict):
        return None
    for source in (payload.get("issue"), payload.get("pull_request"), payload):
        if isinstance(source, dict) and isinstance(source.get("number"), int):
            return source["number"]
    return None


def write_step_outputs(report: QualityReport, path: Path) -> None:
    """Append ``<check>_status`` / ``<check>_details`` lines to a step-output file."""
    lines = []
    for result in report.results:
        lines.append(f"{result.name}_status={result.status_text}\n")
        lines.append(f"{result.name}_details={result.detail}\n")
    lines.append(f"overall_status={'passed' if report.overall_passed else 'failed'}\n")

    try:
        with path.open("a", encoding="utf-8") as fh:
            fh.writelines(lines)
    except OSError as e:
        raise ReportSinkError(f"Could not write step outputs to {path}: {e}") from e


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return ""
    if isinstance(data, dict):
        return str(data.get("message", ""))
    return ""
