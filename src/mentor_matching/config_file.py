"""Typed parsing and validation for matching config files."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError
from .observability import parse_log_level
from .protocols import FileSystem

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class MatchingConfigFile:
    """Validated matching config values loaded from a TOML file."""

    max_results: int | None = None
    directory_source: str | None = None
    directory_path: str | None = None
    api_base_url: str | None = None
    http_timeout_seconds: float | None = None
    profiles_path: str | None = None
    log_level: str | None = None


class _MatchingSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_results: int | None = None
    directory_source: str | None = None
    directory_path: str | None = None
    api_base_url: str | None = None
    http_timeout_seconds: float | None = None
    profiles_path: str | None = None
    log_level: str | None = None

    @field_validator("directory_source")
    @classmethod
    def _validate_directory_source(cls, value: str | None) -> str | None:
        if value is None:
            return None
        source = value.strip().lower()
        if source not in {"api", "file"}:
            raise ValueError
        return source

    @field_validator("directory_path", "api_base_url", "profiles_path")
    @classmethod
    def _validate_non_empty_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        parse_log_level(value)
        return value.strip().lower()

    @field_validator("max_results")
    @classmethod
    def _validate_positive_int(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 1:
            raise ValueError
        return value

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_positive_float(cls, value: float | None) -> float | None:
        if value is None:
            return None
        if value <= 0:
            raise ValueError
        return value


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    matching: _MatchingSectionModel

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_matching_config_file(*, path: Path, fs: FileSystem) -> MatchingConfigFile:
    """Load and validate a matching TOML config file."""
    if not fs.exists(path):
        raise ConfigFileNotFoundError(str(path))

    raw_payload = fs.read_text(path)
    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), _format_validation_error(exc)) from exc

    section = model.matching
    return MatchingConfigFile(
        max_results=section.max_results,
        directory_source=section.directory_source,
        directory_path=section.directory_path,
        api_base_url=section.api_base_url,
        http_timeout_seconds=section.http_timeout_seconds,
        profiles_path=section.profiles_path,
        log_level=section.log_level,
    )
