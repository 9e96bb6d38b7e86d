"""Mentor search filters.

Filters narrow the approved mentor list for browsing; they do not score.
"""

from __future__ import annotations

from dataclasses import dataclass

from .matching import skills_overlap
from .profiles import Industry, MentorRecord


@dataclass(frozen=True)
class MentorSearchFilters:
    """Optional browse filters. Empty filters accept every mentor."""

    industries: tuple[Industry, ...] = ()
    skills: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    rating_min: float | None = None

    @property
    def needs_profile(self) -> bool:
        return bool(self.industries or self.skills or self.languages)


def matches_filters(mentor: MentorRecord, filters: MentorSearchFilters) -> bool:
    """Return True when the mentor satisfies every populated filter."""
    if filters.rating_min is not None and mentor.identity.avg_rating < filters.rating_min:
        return False
    if not filters.needs_profile:
        return True

    profile = mentor.profile
    if profile is None:
        return False
    if filters.industries and not any(i in profile.industries for i in filters.industries):
        return False
    if filters.skills and not any(
        skills_overlap(wanted, skill) for wanted in filters.skills for skill in profile.skills
    ):
        return False
    if filters.languages and not any(
        language in profile.languages for language in filters.languages
    ):
        return False
    return True


def filter_mentors(
    mentors: list[MentorRecord], filters: MentorSearchFilters
) -> list[MentorRecord]:
    """Keep mentors that pass ``filters``, preserving order."""
    return [mentor for mentor in mentors if matches_filters(mentor, filters)]
