"""Pytest fixtures shared across the test suite.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import socket

import pytest

from mentor_matching.domain.profiles import Industry, MenteeProfile
from tests.fakes import InMemoryFileSystem, RecordingMentorDirectory
from tests.support.errors import NetworkIsolationError
from tests.support.mentors import make_mentor


def _blocked_socket_connect(self: socket.socket, *args: object, **kwargs: object) -> None:
    """Raise an error if any test tries to make a real network connection."""
    raise NetworkIsolationError(str(args))


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch: pytest.MonkeyPatch) -> None:
    """Block all network access in tests.

    Tests that need HTTP should use FakeHttpClient.
    """
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)


@pytest.fixture
def in_memory_fs() -> InMemoryFileSystem:
    """Provide an in-memory filesystem for tests."""
    return InMemoryFileSystem()


@pytest.fixture
def sample_mentee() -> MenteeProfile:
    """Mentee used by the worked example in the scoring rules."""
    return MenteeProfile(
        industries=(Industry.TECHNOLOGY,),
        skills=("React", "SQL"),
        languages=("English",),
    )


@pytest.fixture
def sample_directory() -> RecordingMentorDirectory:
    """Three approved mentors: a strong match, a bare profile and no profile."""
    return RecordingMentorDirectory(
        mentors=[
            make_mentor(
                "mentor-a",
                industries=(Industry.TECHNOLOGY, Industry.FINANCE),
                skills=("react", "node"),
                languages=("English", "Spanish"),
                availability="Weekdays 9-5",
            ),
            make_mentor("mentor-b", skills=("Accounting",)),
            make_mentor("mentor-c", with_profile=False),
        ]
    )
