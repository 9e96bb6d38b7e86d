"""Tests for domain profile records."""

from mentor_matching.domain.profiles import Industry, MentorIdentity, MentorProfile


def test_industry_compares_equal_to_tag_string() -> None:
    assert Industry.TECHNOLOGY == "TECHNOLOGY"
    assert "FINANCE" in (Industry.FINANCE,)


def test_has_availability_is_presence_check() -> None:
    assert MentorProfile(availability="Weekends").has_availability
    assert not MentorProfile(availability="").has_availability
    assert not MentorProfile().has_availability


def test_display_name_falls_back_to_id() -> None:
    assert MentorIdentity(id="m-1", first_name="Ada", last_name="Lovelace").display_name == (
        "Ada Lovelace"
    )
    assert MentorIdentity(id="m-2", first_name="Grace").display_name == "Grace"
    assert MentorIdentity(id="m-3").display_name == "m-3"
