"""Typed configuration models using pydantic-settings."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, TomlConfigSettingsSource


def _check_pattern(pattern: str | None) -> str | None:
    if pattern:
        try:
            re.compile(pattern)
        except re.error as e:
            raise ValueError(f"invalid issue pattern {pattern!r}: {e}") from e
    return pattern or None


class _SectionSettings(BaseSettings):
    """One table of the config file, also readable from prefixed env vars and .env.

    Keyword arguments rank below env and .env, so a '[lint]' table in
    docs-quality.toml never overrides LINT_COMMAND.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @classmethod
    def settings_customise_sources(cls, settings_cls, **kwargs):  # type: ignore[override]
        return (
            kwargs["env_settings"],
            kwargs["dotenv_settings"],
            kwargs["init_settings"],
        )


class FormatCheckSettings(_SectionSettings):
    model_config = SettingsConfigDict(env_prefix="FORMAT_")

    command: str = Field(default="npm run format:check", description="Formatter check command")
    issue_pattern: str | None = Field(
        default=None, description="Regex for issue codes in failure output"
    )

    @field_validator("issue_pattern")
    @classmethod
    def validate_issue_pattern(cls, v: str | None) -> str | None:
        return _check_pattern(v)


class LintCheckSettings(_SectionSettings):
    model_config = SettingsConfigDict(env_prefix="LINT_")

    command: str = Field(default="npm run lint:md", description="Markdown linter command")
    issue_pattern: str | None = Field(
        default=r"MD\d+", description="markdownlint rule codes"
    )

    @field_validator("issue_pattern")
    @classmethod
    def validate_issue_pattern(cls, v: str | None) -> str | None:
        return _check_pattern(v)


class GitHubSettings(_SectionSettings):
    """Comment-posting target. Field names line up with the Actions runner variables."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_")

    token: SecretStr = Field(default=SecretStr(""), description="Token allowed to comment")
    repository: str = Field(default="", description="owner/repo")
    api_url: str = Field(default="https://api.github.com")
    event_path: Path | None = Field(default=None, description="Webhook event payload file")
    output: Path | None = Field(default=None, description="Step output file")
    issue_number: int | None = Field(
        default=None, description="PR/issue to comment on; read from the event if unset"
    )


class AppSettings(BaseSettings):
    """Top-level settings composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        toml_file="docs-quality.toml",
        extra="ignore",
    )

    format: FormatCheckSettings = Field(default_factory=FormatCheckSettings)
    lint: LintCheckSettings = Field(default_factory=LintCheckSettings)
    github: GitHubSettings = Field(default_factory=GitHubSettings)
    timeout_seconds: float = Field(default=60.0, gt=0, description="Per-check time limit")
    report_file: Path | None = Field(default=None, description="Also write the report here")
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    @field_validator("format", "lint", "github", mode="before")
    @classmethod
    def build_section(cls, value: Any, info: ValidationInfo) -> Any:
        # docs-quality.toml tables arrive as dicts
        if isinstance(value, dict):
            return _SECTIONS[info.field_name](**value)
        return value

    @classmethod
    def settings_customise_sources(cls, settings_cls, **kwargs):  # type: ignore[override]
        return (
            kwargs["init_settings"],
            kwargs["env_settings"],
            kwargs["dotenv_settings"],
            TomlConfigSettingsSource(settings_cls),
        )


_SECTIONS: dict[str, type[_SectionSettings]] = {
    "format": FormatCheckSettings,
    "lint": LintCheckSettings,
    "github": GitHubSettings,
}


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Resolve settings once per process: env > .env > docs-quality.toml > defaults."""
    return AppSettings()
