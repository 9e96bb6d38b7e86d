"""Concrete infrastructure implementations."""

from .directory import (
    HttpMentorDirectory,
    InMemoryMentorDirectory,
    JsonFileMentorDirectory,
    JsonFileProfileStore,
)
from .io.filesystem import LocalFileSystem
from .io.http import RequestsHttpClient

__all__ = [
    "HttpMentorDirectory",
    "InMemoryMentorDirectory",
    "JsonFileMentorDirectory",
    "JsonFileProfileStore",
    "LocalFileSystem",
    "RequestsHttpClient",
]
