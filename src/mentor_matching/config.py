"""Centralised, injectable configuration for mentor matching."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import MatchingConfigFile
from .domain.matching import DEFAULT_MAX_MATCHES

DIRECTORY_SOURCES = frozenset({"file", "api"})


class PositiveIntegerEnvVarError(ValueError):
    """Raised when an environment variable must be a positive integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive integer.")


class PositiveFloatEnvVarError(ValueError):
    """Raised when an environment variable must be a positive number."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive number.")


class DirectorySourceEnvVarError(ValueError):
    """Raised when the directory source is not a supported value."""

    def __init__(self, value: str) -> None:
        super().__init__(f"MENTOR_DIRECTORY_SOURCE must be 'file' or 'api', got {value!r}.")


@dataclass(frozen=True)
class MatchingConfig:
    """Immutable configuration for one matching run.

    Load from environment with `MatchingConfig.from_env()` or construct directly for testing.
    """

    # Ranking
    max_results: int = DEFAULT_MAX_MATCHES

    # Mentor directory
    directory_source: str = "file"
    directory_path: str = "data/mentors.json"
    api_base_url: str = ""
    http_timeout_seconds: float = 30.0

    # Mentee profiles
    profiles_path: str = "data/profiles.json"

    # Observability
    log_level: str = "info"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            MatchingConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            max_results=_parse_positive_int(
                os.getenv("MATCH_MAX_RESULTS", ""),
                env_name="MATCH_MAX_RESULTS",
                default=DEFAULT_MAX_MATCHES,
            ),
            directory_source=_parse_directory_source(os.getenv("MENTOR_DIRECTORY_SOURCE", "")),
            directory_path=os.getenv("MENTOR_DIRECTORY_PATH", "").strip() or "data/mentors.json",
            api_base_url=os.getenv("MENTOR_API_BASE_URL", "").strip(),
            http_timeout_seconds=_parse_positive_float(
                os.getenv("HTTP_TIMEOUT_SECONDS", ""),
                env_name="HTTP_TIMEOUT_SECONDS",
                default=30.0,
            ),
            profiles_path=os.getenv("MENTEE_PROFILES_PATH", "").strip() or "data/profiles.json",
            log_level=os.getenv("MATCH_LOG_LEVEL", "").strip().lower() or "info",
        )

    def with_overrides(
        self,
        *,
        max_results: int | None = None,
        directory_source: str | None = None,
        directory_path: str | None = None,
        profiles_path: str | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            max_results=self.max_results if max_results is None else max_results,
            directory_source=self.directory_source
            if directory_source is None
            else _parse_directory_source(directory_source),
            directory_path=self.directory_path
            if directory_path is None
            else directory_path.strip(),
            profiles_path=self.profiles_path if profiles_path is None else profiles_path.strip(),
        )

    def with_file_overrides(self, file_config: MatchingConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return replace(
            self,
            max_results=self.max_results
            if file_config.max_results is None
            else file_config.max_results,
            directory_source=self.directory_source
            if file_config.directory_source is None
            else file_config.directory_source,
            directory_path=self.directory_path
            if file_config.directory_path is None
            else file_config.directory_path,
            api_base_url=self.api_base_url
            if file_config.api_base_url is None
            else file_config.api_base_url,
            http_timeout_seconds=self.http_timeout_seconds
            if file_config.http_timeout_seconds is None
            else file_config.http_timeout_seconds,
            profiles_path=self.profiles_path
            if file_config.profiles_path is None
            else file_config.profiles_path,
            log_level=self.log_level if file_config.log_level is None else file_config.log_level,
        )


def _parse_positive_int(value: str, *, env_name: str, default: int) -> int:
    """Parse an optional positive integer from an environment variable."""
    text = value.strip()
    if not text:
        return default
    try:
        parsed = int(text)
    except ValueError as exc:
        raise PositiveIntegerEnvVarError(env_name) from exc
    if parsed < 1:
        raise PositiveIntegerEnvVarError(env_name)
    return parsed


def _parse_positive_float(value: str, *, env_name: str, default: float) -> float:
    """Parse an optional positive float from an environment variable."""
    text = value.strip()
    if not text:
        return default
    try:
        parsed = float(text)
    except ValueError as exc:
        raise PositiveFloatEnvVarError(env_name) from exc
    if parsed <= 0:
        raise PositiveFloatEnvVarError(env_name)
    return parsed


def _parse_directory_source(value: str) -> str:
    """Parse the directory source, defaulting to ``file``."""
    source = value.strip().lower()
    if not source:
        return "file"
    if source not in DIRECTORY_SOURCES:
        raise DirectorySourceEnvVarError(value)
    return source
