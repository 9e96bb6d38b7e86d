"""Tests for match serialisation."""

import json

from mentor_matching.application.matching import match_mentors
from mentor_matching.application.serialisation import (
    MATCH_EXPLAIN_COLUMNS,
    matches_to_frame,
    serialise_matches,
)
from mentor_matching.domain.profiles import MenteeProfile
from tests.fakes import RecordingMentorDirectory


def test_serialise_matches_uses_api_field_names(
    sample_mentee: MenteeProfile, sample_directory: RecordingMentorDirectory
) -> None:
    matches = match_mentors(sample_mentee, directory=sample_directory)

    payload = serialise_matches(matches)

    first = payload[0]
    assert set(first) == {"mentor", "score", "scoreBreakdown"}
    assert first["score"] == 8
    assert first["scoreBreakdown"] == {
        "industryMatches": 3,
        "skillMatches": 2,
        "languageMatches": 1,
        "availabilityBonus": 2,
    }
    assert first["mentor"]["id"] == "mentor-a"
    assert first["mentor"]["profile"] == {
        "industries": ["TECHNOLOGY", "FINANCE"],
        "skills": ["react", "node"],
        "languages": ["English", "Spanish"],
        "availability": "Weekdays 9-5",
    }


def test_serialise_matches_keeps_absent_profile_as_null(
    sample_mentee: MenteeProfile, sample_directory: RecordingMentorDirectory
) -> None:
    payload = serialise_matches(match_mentors(sample_mentee, directory=sample_directory))

    assert payload[2]["mentor"]["profile"] is None
    assert json.loads(json.dumps(payload)) == payload


def test_serialise_matches_empty() -> None:
    assert serialise_matches([]) == []


def test_matches_to_frame_has_rank_and_breakdown(
    sample_mentee: MenteeProfile, sample_directory: RecordingMentorDirectory
) -> None:
    frame = matches_to_frame(match_mentors(sample_mentee, directory=sample_directory))

    assert tuple(frame.columns) == MATCH_EXPLAIN_COLUMNS
    assert frame["rank"].tolist() == [1, 2, 3]
    assert frame.loc[0, "mentor_name"] == "Mentor mentor-a"
    assert frame.loc[0, "score"] == 8
    assert frame.loc[0, "availability_bonus"] == 2


def test_matches_to_frame_empty_keeps_columns() -> None:
    frame = matches_to_frame([])

    assert frame.empty
    assert tuple(frame.columns) == MATCH_EXPLAIN_COLUMNS
