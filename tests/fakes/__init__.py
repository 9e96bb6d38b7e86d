"""Exports for test fakes."""

from .directory import InMemoryProfileStore, RecordingMentorDirectory
from .filesystem import InMemoryFileSystem
from .http import FakeHttpClient

__all__ = [
    "FakeHttpClient",
    "InMemoryFileSystem",
    "InMemoryProfileStore",
    "RecordingMentorDirectory",
]
