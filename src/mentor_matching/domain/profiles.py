"""Domain records for mentees and mentors.

Usage example:
    from mentor_matching.domain.profiles import (
        Industry,
        MenteeProfile,
        MentorIdentity,
        MentorProfile,
        MentorRecord,
    )

    mentee = MenteeProfile(
        industries=(Industry.TECHNOLOGY,),
        skills=("React", "SQL"),
        languages=("English",),
    )
    mentor = MentorRecord(
        identity=MentorIdentity(id="m-1", first_name="Ada", last_name="Lovelace"),
        profile=MentorProfile(skills=("react",), availability="Weekdays 9-5"),
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Industry(StrEnum):
    """Closed set of industry tags shared by mentor and mentee profiles."""

    TECHNOLOGY = "TECHNOLOGY"
    FINANCE = "FINANCE"
    HEALTHCARE = "HEALTHCARE"
    MARKETING = "MARKETING"
    SALES = "SALES"
    EDUCATION = "EDUCATION"
    CONSULTING = "CONSULTING"
    LEGAL = "LEGAL"
    ENGINEERING = "ENGINEERING"
    DESIGN = "DESIGN"
    OTHER = "OTHER"


@dataclass(frozen=True)
class MenteeProfile:
    """Query side of a match. Absent collections are empty tuples."""

    industries: tuple[Industry, ...] = ()
    skills: tuple[str, ...] = ()  # order and duplicates preserved
    languages: tuple[str, ...] = ()


@dataclass(frozen=True)
class MentorProfile:
    """Scorable part of a mentor record."""

    industries: tuple[Industry, ...] = ()
    skills: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    availability: str | None = None

    @property
    def has_availability(self) -> bool:
        """True when an availability note is filled in (content is not inspected)."""
        return bool(self.availability)


@dataclass(frozen=True)
class MentorIdentity:
    """Display fields carried through matching unscored."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    email: str | None = None
    avg_rating: float = 0.0

    @property
    def display_name(self) -> str:
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) if parts else self.id


@dataclass(frozen=True)
class MentorRecord:
    """A candidate mentor. ``profile`` is None when the mentor has not filled one in."""

    identity: MentorIdentity
    profile: MentorProfile | None = None
