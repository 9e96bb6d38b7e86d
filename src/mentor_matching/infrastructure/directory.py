"""Mentor directory and profile store implementations.

Usage example:
    from pathlib import Path

    from mentor_matching.infrastructure.directory import JsonFileMentorDirectory
    from mentor_matching.infrastructure.io.filesystem import LocalFileSystem

    directory = JsonFileMentorDirectory(path=Path("data/mentors.json"), fs=LocalFileSystem())
    mentors = directory.list_approved_mentors()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing_extensions import override

import requests

from ..domain.profiles import MenteeProfile, MentorRecord
from ..exceptions import (
    DirectoryUnavailableError,
    MentorApiBaseUrlMissingError,
    ProfileStoreError,
)
from ..observability import get_logger
from ..protocols import FileSystem, HttpClient, MentorDirectory, ProfileStore
from .io.validation import (
    IncomingDataError,
    parse_mentor_directory,
    parse_mentor_list,
    parse_profile_store,
)

logger = get_logger("mentor_matching.infrastructure.directory")

MENTORS_ENDPOINT = "/api/mentors"


@dataclass
class JsonFileMentorDirectory(MentorDirectory):
    """Approved mentors read from a ``{"mentors": [...]}`` JSON document."""

    path: Path
    fs: FileSystem

    @override
    def list_approved_mentors(self) -> list[MentorRecord]:
        source = str(self.path)
        if not self.fs.exists(self.path):
            raise DirectoryUnavailableError(source, "file not found")
        try:
            mentors = parse_mentor_directory(self.fs.read_json(self.path))
        except (OSError, UnicodeDecodeError, IncomingDataError) as exc:
            raise DirectoryUnavailableError(source, str(exc)) from exc
        logger.debug("Loaded %s approved mentors from %s", len(mentors), source)
        return mentors


@dataclass
class HttpMentorDirectory(MentorDirectory):
    """Approved mentors served by the platform's ``GET /api/mentors`` endpoint."""

    base_url: str
    http_client: HttpClient

    @property
    def url(self) -> str:
        return self.base_url.rstrip("/") + MENTORS_ENDPOINT

    @override
    def list_approved_mentors(self) -> list[MentorRecord]:
        if not self.base_url.strip():
            raise MentorApiBaseUrlMissingError()
        try:
            payload = self.http_client.get_json(self.url)
        except (requests.RequestException, IncomingDataError) as exc:
            raise DirectoryUnavailableError(self.url, str(exc)) from exc
        try:
            return parse_mentor_list(payload)
        except IncomingDataError as exc:
            raise DirectoryUnavailableError(self.url, str(exc)) from exc


def _empty_mentors() -> list[MentorRecord]:
    return []


@dataclass
class InMemoryMentorDirectory(MentorDirectory):
    """Fixed candidate set. Returns a fresh list on each call."""

    mentors: list[MentorRecord] = field(default_factory=_empty_mentors)

    @override
    def list_approved_mentors(self) -> list[MentorRecord]:
        return list(self.mentors)


@dataclass
class JsonFileProfileStore(ProfileStore):
    """Mentee profiles read from a ``{"profiles": {user_id: {...}}}`` JSON document.

    A missing file means no user has a profile yet.
    """

    path: Path
    fs: FileSystem

    @override
    def get_profile(self, user_id: str) -> MenteeProfile | None:
        if not self.fs.exists(self.path):
            return None
        try:
            profiles = parse_profile_store(self.fs.read_json(self.path))
        except (OSError, UnicodeDecodeError, IncomingDataError) as exc:
            raise ProfileStoreError(str(self.path), str(exc)) from exc
        return profiles.get(user_id)
