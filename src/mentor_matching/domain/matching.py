"""Domain scoring rules for mentor recommendations.

Each mentor is scored independently against one mentee profile with four
additive components: industry overlap, skill overlap, language overlap and an
availability bonus. Ranking is a stable sort by total score, truncated to the
top results.

Usage example:
    from mentor_matching.domain.matching import rank_matches, score_mentor

    matches = [score_mentor(mentee, mentor) for mentor in mentors]
    top = rank_matches(matches)
    assert len(top) <= 5
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .profiles import MenteeProfile, MentorProfile, MentorRecord

INDUSTRY_POINTS = 3
SKILL_POINTS = 2
LANGUAGE_POINTS = 1
AVAILABILITY_BONUS_POINTS = 2
DEFAULT_MAX_MATCHES = 5


@dataclass(frozen=True)
class MatchWeights:
    """Points awarded per matching entry for each component."""

    industry: int = INDUSTRY_POINTS
    skill: int = SKILL_POINTS
    language: int = LANGUAGE_POINTS
    availability: int = AVAILABILITY_BONUS_POINTS


DEFAULT_WEIGHTS = MatchWeights()


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-component points for one mentor."""

    industry_matches: int
    skill_matches: int
    language_matches: int
    availability_bonus: int

    @property
    def total(self) -> int:
        return (
            self.industry_matches
            + self.skill_matches
            + self.language_matches
            + self.availability_bonus
        )


EMPTY_BREAKDOWN = ScoreBreakdown(
    industry_matches=0,
    skill_matches=0,
    language_matches=0,
    availability_bonus=0,
)


@dataclass(frozen=True)
class MentorMatch:
    """A scored mentor. The mentor record is carried through unmodified."""

    mentor: MentorRecord
    score_breakdown: ScoreBreakdown

    @property
    def score(self) -> int:
        return self.score_breakdown.total


def skills_overlap(mentee_skill: str, mentor_skill: str) -> bool:
    """Case-insensitive substring test in either direction.

    "Java" matches "JavaScript" and "JavaScript" matches "Java".
    """
    a = mentee_skill.lower()
    b = mentor_skill.lower()
    return a in b or b in a


def count_industry_matches(mentee: MenteeProfile, mentor: MentorProfile) -> int:
    """Count mentee industry entries present in the mentor's industries."""
    return sum(1 for industry in mentee.industries if industry in mentor.industries)


def count_skill_matches(mentee: MenteeProfile, mentor: MentorProfile) -> int:
    """Count mentee skill entries that overlap at least one mentor skill.

    Each mentee entry counts once however many mentor skills it overlaps;
    duplicate mentee entries count separately.
    """
    return sum(
        1
        for skill in mentee.skills
        if any(skills_overlap(skill, mentor_skill) for mentor_skill in mentor.skills)
    )


def count_language_matches(mentee: MenteeProfile, mentor: MentorProfile) -> int:
    """Count mentee language entries present (exact match) in the mentor's languages."""
    return sum(1 for language in mentee.languages if language in mentor.languages)


def score_profile(
    mentee: MenteeProfile,
    mentor: MentorProfile,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> ScoreBreakdown:
    """Score a mentor profile against a mentee profile."""
    return ScoreBreakdown(
        industry_matches=weights.industry * count_industry_matches(mentee, mentor),
        skill_matches=weights.skill * count_skill_matches(mentee, mentor),
        language_matches=weights.language * count_language_matches(mentee, mentor),
        availability_bonus=weights.availability if mentor.has_availability else 0,
    )


def score_mentor(
    mentee: MenteeProfile,
    mentor: MentorRecord,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> MentorMatch:
    """Score one mentor record. A mentor without a profile scores zero everywhere."""
    if mentor.profile is None:
        return MentorMatch(mentor=mentor, score_breakdown=EMPTY_BREAKDOWN)
    return MentorMatch(mentor=mentor, score_breakdown=score_profile(mentee, mentor.profile, weights))


def rank_matches(
    matches: Iterable[MentorMatch],
    limit: int = DEFAULT_MAX_MATCHES,
) -> list[MentorMatch]:
    """Order by score descending and keep the first ``limit`` entries.

    ``sorted`` is stable, so mentors with equal scores keep their input order.
    """
    ranked = sorted(matches, key=lambda match: match.score, reverse=True)
    return ranked[:limit]
