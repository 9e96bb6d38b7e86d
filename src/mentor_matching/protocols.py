"""Protocol definitions for dependency injection.

These protocols define the abstract interfaces that matching components depend on,
enabling isolated unit testing with in-memory implementations.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .domain.profiles import MenteeProfile, MentorRecord

if TYPE_CHECKING:
    import pandas as pd


@runtime_checkable
class MentorDirectory(Protocol):
    """Source of approved mentor candidates."""

    def list_approved_mentors(self) -> list[MentorRecord]:
        """Return every approved mentor, each optionally carrying a profile.

        Raises:
            DirectoryUnavailableError: When the directory cannot be read.
        """
        ...


@runtime_checkable
class ProfileStore(Protocol):
    """Lookup of mentee profiles by requesting user."""

    def get_profile(self, user_id: str) -> MenteeProfile | None:
        """Return the user's profile, or None when they have not created one."""
        ...


@runtime_checkable
class HttpClient(Protocol):
    """Abstract HTTP client for JSON API requests."""

    def get_json(self, url: str) -> object:
        """Fetch and decode a JSON document.

        Raises:
            requests.RequestException: On network or HTTP errors.
            IncomingDataError: When the body is not valid JSON.
        """
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Abstract filesystem for reading inputs and writing outputs."""

    def read_json(self, path: Path) -> object:
        """Read and decode a JSON file."""
        ...

    def write_json(self, data: object, path: Path) -> None:
        """Write a JSON file."""
        ...

    def read_text(self, path: Path) -> str:
        """Read text file."""
        ...

    def write_text(self, content: str, path: Path) -> None:
        """Write text file."""
        ...

    def write_csv(self, df: pd.DataFrame, path: Path) -> None:
        """Write DataFrame to CSV file."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if path exists."""
        ...

    def mkdir(self, path: Path, parents: bool = True) -> None:
        """Create directory."""
        ...
