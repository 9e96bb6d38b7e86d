"""Pydantic-based validation helpers for inbound mentor and profile payloads."""

from __future__ import annotations

from typing import TypeVar

from typing_extensions import Required, TypedDict

from pydantic import JsonValue, TypeAdapter, ValidationError

from ...domain.profiles import Industry, MenteeProfile, MentorIdentity, MentorProfile, MentorRecord

SchemaT = TypeVar("SchemaT")
ItemT = TypeVar("ItemT")


class IncomingDataError(ValueError):
    """Raised when inbound data fails validation."""


class MenteeProfileInput(TypedDict, total=False):
    industries: list[Industry] | None
    skills: list[str] | None
    languages: list[str] | None


class MentorProfileInput(TypedDict, total=False):
    industries: list[Industry] | None
    skills: list[str] | None
    languages: list[str] | None
    availability: str | None
    isMentorApproved: bool | None


class MentorInput(TypedDict, total=False):
    id: Required[str]
    firstName: str | None
    lastName: str | None
    profileImageUrl: str | None
    email: str | None
    avgRating: float | None
    isMentorApproved: bool | None
    profile: MentorProfileInput | None


class MentorDirectoryInput(TypedDict):
    mentors: list[MentorInput]


class ProfileStoreInput(TypedDict):
    profiles: dict[str, MenteeProfileInput]


def validate_as(schema: type[SchemaT], payload: object) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_python(payload)
    except ValidationError as exc:
        message = f"Invalid payload for {schema}."
        raise IncomingDataError(message) from exc


def validate_json_as(schema: type[SchemaT], payload: str | bytes | bytearray) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_json(payload)
    except ValidationError as exc:
        message = f"Invalid JSON payload for {schema}."
        raise IncomingDataError(message) from exc


def parse_json_document(payload: str | bytes | bytearray) -> JsonValue:
    """Decode a JSON document of any shape, raising IncomingDataError on bad input."""
    return validate_json_as(JsonValue, payload)


def _as_tuple(items: list[ItemT] | None) -> tuple[ItemT, ...]:
    return tuple(items) if items else ()


def _mentee_profile(raw: MenteeProfileInput) -> MenteeProfile:
    return MenteeProfile(
        industries=_as_tuple(raw.get("industries")),
        skills=_as_tuple(raw.get("skills")),
        languages=_as_tuple(raw.get("languages")),
    )


def _mentor_record(raw: MentorInput) -> MentorRecord:
    identity = MentorIdentity(
        id=raw["id"],
        first_name=raw.get("firstName"),
        last_name=raw.get("lastName"),
        profile_image_url=raw.get("profileImageUrl"),
        email=raw.get("email"),
        avg_rating=raw.get("avgRating") or 0.0,
    )
    raw_profile = raw.get("profile")
    if raw_profile is None:
        return MentorRecord(identity=identity, profile=None)
    profile = MentorProfile(
        industries=_as_tuple(raw_profile.get("industries")),
        skills=_as_tuple(raw_profile.get("skills")),
        languages=_as_tuple(raw_profile.get("languages")),
        availability=raw_profile.get("availability"),
    )
    return MentorRecord(identity=identity, profile=profile)


def _is_approved(raw: MentorInput) -> bool:
    if raw.get("isMentorApproved"):
        return True
    raw_profile = raw.get("profile")
    return bool(raw_profile and raw_profile.get("isMentorApproved"))


def parse_mentee_profile(payload: object) -> MenteeProfile:
    """Validate a single mentee profile object."""
    return _mentee_profile(validate_as(MenteeProfileInput, payload))


def parse_mentor_list(payload: object) -> list[MentorRecord]:
    """Validate a JSON array of mentors as served by the platform API."""
    entries = validate_as(list[MentorInput], payload)
    return [_mentor_record(entry) for entry in entries]


def parse_mentor_directory(payload: object, *, approved_only: bool = True) -> list[MentorRecord]:
    """Validate a ``{"mentors": [...]}`` document, keeping file order.

    With ``approved_only`` set, entries without an approval flag (top level or
    on the profile) are dropped.
    """
    document = validate_as(MentorDirectoryInput, payload)
    entries = document["mentors"]
    if approved_only:
        entries = [entry for entry in entries if _is_approved(entry)]
    return [_mentor_record(entry) for entry in entries]


def parse_profile_store(payload: object) -> dict[str, MenteeProfile]:
    """Validate a ``{"profiles": {user_id: {...}}}`` document."""
    document = validate_as(ProfileStoreInput, payload)
    return {user_id: _mentee_profile(raw) for user_id, raw in document["profiles"].items()}
