"""Composition root for wiring CLI dependencies."""

from __future__ import annotations

from pathlib import Path

from .cli import CliDependencies, create_app
from .config import MatchingConfig
from .infrastructure import (
    HttpMentorDirectory,
    JsonFileMentorDirectory,
    JsonFileProfileStore,
    LocalFileSystem,
    RequestsHttpClient,
)
from .protocols import MentorDirectory


def build_cli_dependencies(*, config: MatchingConfig) -> CliDependencies:
    """Build concrete dependencies for CLI commands.

    Args:
        config: Matching configuration (selects the mentor directory source).
    """
    fs = LocalFileSystem()
    directory: MentorDirectory
    if config.directory_source == "api":
        directory = HttpMentorDirectory(
            base_url=config.api_base_url,
            http_client=RequestsHttpClient(timeout_seconds=config.http_timeout_seconds),
        )
    else:
        directory = JsonFileMentorDirectory(path=Path(config.directory_path), fs=fs)
    profiles = JsonFileProfileStore(path=Path(config.profiles_path), fs=fs)
    return CliDependencies(fs=fs, directory=directory, profiles=profiles)


app = create_app(build_cli_dependencies)
