"""Search approved mentors with browse filters.

Usage example:
    >>> from mentor_matching.application.search import search_mentors
    >>> from mentor_matching.domain.search import MentorSearchFilters
    >>> directory = ...  # Injected MentorDirectory
    >>> search_mentors(directory=directory, filters=MentorSearchFilters(languages=("Spanish",)))
"""

from __future__ import annotations

from ..domain.profiles import MentorRecord
from ..domain.search import MentorSearchFilters, filter_mentors
from ..observability import get_logger
from ..protocols import MentorDirectory

logger = get_logger("mentor_matching.search")


def search_mentors(
    *,
    directory: MentorDirectory,
    filters: MentorSearchFilters | None = None,
) -> list[MentorRecord]:
    """Return approved mentors passing ``filters``, in directory order."""
    mentors = directory.list_approved_mentors()
    if filters is None:
        return mentors
    found = filter_mentors(mentors, filters)
    logger.info("Search: %s of %s mentors match", len(found), len(mentors))
    return found
