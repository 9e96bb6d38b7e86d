"""Custom exceptions for the mentor matching engine.

Messages are built in the constructors so callers raise with context only.
"""

from __future__ import annotations


class MatchingError(Exception):
    """Base exception for all mentor matching errors."""

    pass


class ProfileMissingError(MatchingError):
    """Raised when the requesting user has no mentee profile.

    Callers must resolve a profile before asking for matches.
    """

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__("Profile not found. Please complete your profile first.")


class DirectoryUnavailableError(MatchingError):
    """Raised when the mentor directory cannot be read.

    The engine does not retry or fall back to stale data.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Mentor directory unavailable ({source}): {reason}")


class ConfigFileNotFoundError(MatchingError):
    """Raised when a config file path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(MatchingError):
    """Raised when a config file is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} is not valid TOML: {detail}")


class ConfigFileValidationError(MatchingError):
    """Raised when a config file fails schema validation."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} is invalid: {detail}")


class MentorApiBaseUrlMissingError(MatchingError):
    """Raised when the API directory source is selected without a base URL."""

    def __init__(self) -> None:
        super().__init__(
            "MENTOR_API_BASE_URL must be set when MENTOR_DIRECTORY_SOURCE is 'api'."
        )


class ProfileStoreError(MatchingError):
    """Raised when the mentee profile store cannot be read."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Profile store unreadable ({source}): {reason}")
