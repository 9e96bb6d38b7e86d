"""Domain modules for mentor matching."""

from .matching import MentorMatch, ScoreBreakdown, rank_matches, score_mentor
from .profiles import Industry, MenteeProfile, MentorIdentity, MentorProfile, MentorRecord

__all__ = [
    "Industry",
    "MenteeProfile",
    "MentorIdentity",
    "MentorMatch",
    "MentorProfile",
    "MentorRecord",
    "ScoreBreakdown",
    "rank_matches",
    "score_mentor",
]
