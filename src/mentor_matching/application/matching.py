"""Match mentors: rank approved mentors for one mentee profile.

Usage example:
    >>> from mentor_matching.application.matching import match_mentors
    >>> from mentor_matching.config import MatchingConfig
    >>> directory = ...  # Injected MentorDirectory from the CLI/composition root
    >>> matches = match_mentors(mentee_profile, directory=directory, config=MatchingConfig())
    >>> [match.score for match in matches]
    [8, 5, 2]
"""

from __future__ import annotations

from ..config import MatchingConfig
from ..domain.matching import DEFAULT_WEIGHTS, MatchWeights, MentorMatch, rank_matches, score_mentor
from ..domain.profiles import MenteeProfile
from ..exceptions import ProfileMissingError
from ..observability import get_logger
from ..protocols import MentorDirectory, ProfileStore

logger = get_logger("mentor_matching.match")


def match_mentors(
    mentee_profile: MenteeProfile,
    *,
    directory: MentorDirectory,
    config: MatchingConfig | None = None,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> list[MentorMatch]:
    """Score every approved mentor against ``mentee_profile`` and return the top matches.

    The directory is read once. Any error it raises propagates unchanged; there
    is no retry and no partial result.

    Args:
        mentee_profile: Resolved profile of the requesting mentee.
        directory: Source of approved mentors.
        config: Matching configuration (defaults to five results).
        weights: Points per matching entry for each component.

    Returns:
        Up to ``config.max_results`` matches, highest score first, ties in
        directory order.
    """
    limit = (config or MatchingConfig()).max_results

    mentors = directory.list_approved_mentors()
    logger.info("Scoring %s approved mentors", len(mentors))

    scored = [score_mentor(mentee_profile, mentor, weights) for mentor in mentors]
    ranked = rank_matches(scored, limit=limit)
    logger.info(
        "Returning %s matches (top score %s)",
        len(ranked),
        ranked[0].score if ranked else 0,
    )
    return ranked


def match_mentors_for_user(
    user_id: str,
    *,
    profiles: ProfileStore,
    directory: MentorDirectory,
    config: MatchingConfig | None = None,
) -> list[MentorMatch]:
    """Resolve the user's mentee profile, then match.

    Raises:
        ProfileMissingError: The user has no profile; the directory is not read.
    """
    profile = profiles.get_profile(user_id)
    if profile is None:
        logger.info("No mentee profile for user %s", user_id)
        raise ProfileMissingError(user_id)
    return match_mentors(profile, directory=directory, config=config)
