"""Serialise ranked matches for JSON transport and CSV explainability output."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from ..domain.matching import MentorMatch, ScoreBreakdown
from ..domain.profiles import MentorProfile, MentorRecord
from ..io_contracts import MentorIO, MentorMatchIO, MentorProfileIO, ScoreBreakdownIO

MATCH_EXPLAIN_COLUMNS = (
    "rank",
    "mentor_id",
    "mentor_name",
    "score",
    "industry_matches",
    "skill_matches",
    "language_matches",
    "availability_bonus",
)


def _profile_io(profile: MentorProfile) -> MentorProfileIO:
    return {
        "industries": [str(industry) for industry in profile.industries],
        "skills": list(profile.skills),
        "languages": list(profile.languages),
        "availability": profile.availability,
    }


def mentor_to_io(mentor: MentorRecord) -> MentorIO:
    """Convert a mentor record to its API payload."""
    identity = mentor.identity
    return {
        "id": identity.id,
        "firstName": identity.first_name,
        "lastName": identity.last_name,
        "profileImageUrl": identity.profile_image_url,
        "email": identity.email,
        "avgRating": identity.avg_rating,
        "profile": None if mentor.profile is None else _profile_io(mentor.profile),
    }


def breakdown_to_io(breakdown: ScoreBreakdown) -> ScoreBreakdownIO:
    return {
        "industryMatches": breakdown.industry_matches,
        "skillMatches": breakdown.skill_matches,
        "languageMatches": breakdown.language_matches,
        "availabilityBonus": breakdown.availability_bonus,
    }


def serialise_matches(matches: Sequence[MentorMatch]) -> list[MentorMatchIO]:
    """Build the JSON-serialisable ``[{mentor, score, scoreBreakdown}]`` array."""
    return [
        {
            "mentor": mentor_to_io(match.mentor),
            "score": match.score,
            "scoreBreakdown": breakdown_to_io(match.score_breakdown),
        }
        for match in matches
    ]


def matches_to_frame(matches: Sequence[MentorMatch]) -> pd.DataFrame:
    """Flatten ranked matches into one explainability row per mentor."""
    rows = [
        {
            "rank": rank,
            "mentor_id": match.mentor.identity.id,
            "mentor_name": match.mentor.identity.display_name,
            "score": match.score,
            "industry_matches": match.score_breakdown.industry_matches,
            "skill_matches": match.score_breakdown.skill_matches,
            "language_matches": match.score_breakdown.language_matches,
            "availability_bonus": match.score_breakdown.availability_bonus,
        }
        for rank, match in enumerate(matches, start=1)
    ]
    return pd.DataFrame(rows, columns=list(MATCH_EXPLAIN_COLUMNS))
