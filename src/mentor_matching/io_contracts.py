"""Boundary-neutral IO contracts for mentor and match payloads.

Field names follow the platform's JSON API (camelCase).

Usage example:
    from mentor_matching.io_contracts import MentorMatchIO

    match: MentorMatchIO = {
        "mentor": {
            "id": "m-1",
            "firstName": "Ada",
            "lastName": "Lovelace",
            "profileImageUrl": None,
            "email": None,
            "avgRating": 4.5,
            "profile": None,
        },
        "score": 0,
        "scoreBreakdown": {
            "industryMatches": 0,
            "skillMatches": 0,
            "languageMatches": 0,
            "availabilityBonus": 0,
        },
    }
"""

from __future__ import annotations

from typing import TypedDict


class MentorProfileIO(TypedDict):
    """Mentor profile payload shape."""

    industries: list[str]
    skills: list[str]
    languages: list[str]
    availability: str | None


class MentorIO(TypedDict):
    """Mentor payload shape (identity plus optional profile)."""

    id: str
    firstName: str | None
    lastName: str | None
    profileImageUrl: str | None
    email: str | None
    avgRating: float
    profile: MentorProfileIO | None


class ScoreBreakdownIO(TypedDict):
    """Score breakdown payload shape."""

    industryMatches: int
    skillMatches: int
    languageMatches: int
    availabilityBonus: int


class MentorMatchIO(TypedDict):
    """One entry of the ranked match array."""

    mentor: MentorIO
    score: int
    scoreBreakdown: ScoreBreakdownIO
