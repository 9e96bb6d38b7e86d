"""Tests for CLI wiring, output formats and exit codes."""

import json
import logging
import re
from dataclasses import replace
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from mentor_matching import cli, composition
from mentor_matching.cli import CliDependencies
from mentor_matching.config import MatchingConfig
from mentor_matching.domain.profiles import Industry
from mentor_matching.exceptions import DirectoryUnavailableError
from mentor_matching.infrastructure import HttpMentorDirectory
from mentor_matching.observability import set_log_level
from tests.fakes import InMemoryFileSystem, InMemoryProfileStore, RecordingMentorDirectory
from tests.support.mentors import make_mentee, make_mentor

runner = CliRunner()
_ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

PROFILE_PATH = Path("mentee.json")
MENTEE_PAYLOAD = {
    "industries": ["TECHNOLOGY"],
    "skills": ["React", "SQL"],
    "languages": ["English"],
}


def _strip_ansi(text: str) -> str:
    return _ANSI_ESCAPE_RE.sub("", text)


@pytest.fixture(autouse=True)
def default_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_from_env(cls: type[MatchingConfig], dotenv_path: str | None = None) -> MatchingConfig:
        _ = (cls, dotenv_path)
        return MatchingConfig()

    monkeypatch.setattr(cli.MatchingConfig, "from_env", classmethod(fake_from_env))


@pytest.fixture
def deps(sample_directory: RecordingMentorDirectory) -> CliDependencies:
    fs = InMemoryFileSystem()
    fs.write_json(MENTEE_PAYLOAD, PROFILE_PATH)
    return CliDependencies(
        fs=fs,
        directory=sample_directory,
        profiles=InMemoryProfileStore(
            profiles={"user-1": make_mentee(industries=(Industry.TECHNOLOGY,))}
        ),
    )


def _build_app(deps: CliDependencies, captured: list[MatchingConfig] | None = None) -> typer.Typer:
    def build_with_shared_deps(*, config: MatchingConfig) -> CliDependencies:
        if captured is not None:
            captured.append(config)
        return deps

    return cli.create_app(build_with_shared_deps)


def test_cli_version_option_prints_package_version(
    monkeypatch: pytest.MonkeyPatch, deps: CliDependencies
) -> None:
    monkeypatch.setattr(cli, "__version__", "9.9.9", raising=False)

    result = runner.invoke(_build_app(deps), ["--version"])

    assert result.exit_code == 0
    assert "9.9.9" in _strip_ansi(result.output)


def test_match_profile_prints_json_array(deps: CliDependencies) -> None:
    result = runner.invoke(_build_app(deps), ["match", "--profile", str(PROFILE_PATH), "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [item["mentor"]["id"] for item in payload] == ["mentor-a", "mentor-b", "mentor-c"]
    assert payload[0]["score"] == 8
    assert payload[0]["scoreBreakdown"] == {
        "industryMatches": 3,
        "skillMatches": 2,
        "languageMatches": 1,
        "availabilityBonus": 2,
    }
    assert payload[2]["mentor"]["profile"] is None


def test_match_prints_table_by_default(deps: CliDependencies) -> None:
    result = runner.invoke(_build_app(deps), ["match", "--profile", str(PROFILE_PATH)])

    assert result.exit_code == 0
    assert "Recommended mentors" in _strip_ansi(result.output)


def test_match_user_id_uses_profile_store(deps: CliDependencies) -> None:
    result = runner.invoke(_build_app(deps), ["match", "--user-id", "user-1", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload[0]["mentor"]["id"] == "mentor-a"
    assert payload[0]["score"] == 5


def test_match_unknown_user_exits_with_profile_missing(deps: CliDependencies) -> None:
    result = runner.invoke(_build_app(deps), ["match", "--user-id", "nobody"])

    assert result.exit_code == cli.PROFILE_MISSING_EXIT_CODE
    assert "Profile not found. Please complete your profile first." in _strip_ansi(result.output)
    assert isinstance(deps.directory, RecordingMentorDirectory)
    assert deps.directory.calls == 0


def test_match_directory_failure_exits_non_zero(deps: CliDependencies) -> None:
    assert isinstance(deps.directory, RecordingMentorDirectory)
    deps.directory.error = DirectoryUnavailableError("data/mentors.json", "file not found")

    result = runner.invoke(_build_app(deps), ["match", "--profile", str(PROFILE_PATH)])

    assert result.exit_code == cli.MATCH_FAILED_EXIT_CODE
    assert "Failed to match mentors" in _strip_ansi(result.output)


def test_match_empty_directory_prints_notice(deps: CliDependencies) -> None:
    empty = CliDependencies(fs=deps.fs, directory=RecordingMentorDirectory(), profiles=deps.profiles)

    result = runner.invoke(_build_app(empty), ["match", "--profile", str(PROFILE_PATH)])

    assert result.exit_code == 0
    assert "No approved mentors to match." in _strip_ansi(result.output)


@pytest.mark.parametrize(
    "args",
    [
        ["match"],
        ["match", "--profile", "mentee.json", "--user-id", "user-1"],
    ],
)
def test_match_requires_exactly_one_mentee_source(
    deps: CliDependencies, args: list[str]
) -> None:
    result = runner.invoke(_build_app(deps), args)

    assert result.exit_code == 2


def test_match_invalid_profile_file_is_usage_error(deps: CliDependencies) -> None:
    deps.fs.write_json({"industries": ["SPACE"]}, Path("bad.json"))

    result = runner.invoke(_build_app(deps), ["match", "--profile", "bad.json"])

    assert result.exit_code == 2


def test_match_overrides_limit_and_directory(deps: CliDependencies) -> None:
    captured: list[MatchingConfig] = []

    result = runner.invoke(
        _build_app(deps, captured),
        [
            "match",
            "--profile",
            str(PROFILE_PATH),
            "--limit",
            "1",
            "--directory",
            "fixtures/mentors.json",
            "--json",
        ],
    )

    assert result.exit_code == 0
    assert len(json.loads(result.stdout)) == 1
    config = captured[-1]
    assert config.max_results == 1
    assert config.directory_source == "file"
    assert config.directory_path == "fixtures/mentors.json"


def test_match_writes_explainability_csv(deps: CliDependencies) -> None:
    assert isinstance(deps.fs, InMemoryFileSystem)

    result = runner.invoke(
        _build_app(deps),
        ["match", "--profile", str(PROFILE_PATH), "--output", "out/matches.csv"],
    )

    assert result.exit_code == 0
    frame = deps.fs.read_csv(Path("out/matches.csv"))
    assert list(frame["mentor_id"]) == ["mentor-a", "mentor-b", "mentor-c"]
    assert list(frame["rank"]) == [1, 2, 3]
    assert list(frame["score"]) == [8, 0, 0]
    assert "Explainability" in _strip_ansi(result.output)


def test_global_config_file_overrides_env(deps: CliDependencies) -> None:
    deps.fs.write_text(
        """
schema_version = 1
[matching]
max_results = 2
""".strip(),
        Path("matching.toml"),
    )
    captured: list[MatchingConfig] = []

    result = runner.invoke(
        _build_app(deps, captured),
        ["--config", "matching.toml", "match", "--profile", str(PROFILE_PATH), "--json"],
    )

    assert result.exit_code == 0
    assert captured[-1].max_results == 2
    assert len(json.loads(result.stdout)) == 2


def test_missing_config_file_is_usage_error(deps: CliDependencies) -> None:
    result = runner.invoke(
        _build_app(deps),
        ["--config", "missing.toml", "match", "--profile", str(PROFILE_PATH)],
    )

    assert result.exit_code == 2


def test_unknown_log_level_is_usage_error(deps: CliDependencies) -> None:
    result = runner.invoke(
        _build_app(deps),
        ["--log-level", "verbose", "match", "--profile", str(PROFILE_PATH)],
    )

    assert result.exit_code == 2


def test_mentors_filters_by_skill_and_rating() -> None:
    directory = RecordingMentorDirectory(
        mentors=[
            make_mentor("m-java", skills=("JavaScript",), avg_rating=4.8),
            make_mentor("m-low", skills=("Java",), avg_rating=2.0),
            make_mentor("m-go", skills=("Go",), avg_rating=5.0),
            make_mentor("m-none", with_profile=False, avg_rating=5.0),
        ]
    )
    deps = CliDependencies(
        fs=InMemoryFileSystem(), directory=directory, profiles=InMemoryProfileStore()
    )

    result = runner.invoke(
        _build_app(deps),
        ["mentors", "--skill", "java", "--rating-min", "4", "--json"],
    )

    assert result.exit_code == 0
    assert [mentor["id"] for mentor in json.loads(result.stdout)] == ["m-java"]


def test_mentors_filters_by_industry(deps: CliDependencies) -> None:
    result = runner.invoke(_build_app(deps), ["mentors", "--industry", "finance", "--json"])

    assert result.exit_code == 0
    assert [mentor["id"] for mentor in json.loads(result.stdout)] == ["mentor-a"]


def test_mentors_unknown_industry_is_usage_error(deps: CliDependencies) -> None:
    result = runner.invoke(_build_app(deps), ["mentors", "--industry", "SPACE"])

    assert result.exit_code == 2


def test_mentors_directory_failure_exits_non_zero(deps: CliDependencies) -> None:
    assert isinstance(deps.directory, RecordingMentorDirectory)
    deps.directory.error = DirectoryUnavailableError("https://mentors.example.com", "timeout")

    result = runner.invoke(_build_app(deps), ["mentors"])

    assert result.exit_code == cli.MATCH_FAILED_EXIT_CODE
    assert "Failed to fetch mentors" in _strip_ansi(result.output)


def test_config_file_supplies_api_base_url_missing_from_env(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    sample_directory: RecordingMentorDirectory,
) -> None:
    def api_from_env(cls: type[MatchingConfig], dotenv_path: str | None = None) -> MatchingConfig:
        _ = (cls, dotenv_path)
        return MatchingConfig(directory_source="api")

    monkeypatch.setattr(cli.MatchingConfig, "from_env", classmethod(api_from_env))
    config_path = tmp_path / "m.toml"
    config_path.write_text(
        'schema_version = 1\n[matching]\napi_base_url = "http://mentors.example"\n',
        encoding="utf-8",
    )
    built: list[CliDependencies] = []

    def build_with_stub_directory(*, config: MatchingConfig) -> CliDependencies:
        deps = composition.build_cli_dependencies(config=config)
        built.append(deps)
        return replace(deps, directory=sample_directory)

    result = runner.invoke(
        cli.create_app(build_with_stub_directory),
        ["--config", str(config_path), "mentors", "--json"],
    )

    assert result.exit_code == 0
    directory = built[-1].directory
    assert isinstance(directory, HttpMentorDirectory)
    assert directory.url == "http://mentors.example/api/mentors"
    assert [mentor["id"] for mentor in json.loads(result.stdout)] == [
        "mentor-a",
        "mentor-b",
        "mentor-c",
    ]


def test_match_undecodable_directory_file_exits_non_zero(tmp_path: Path) -> None:
    profile_path = tmp_path / "mentee.json"
    profile_path.write_text(json.dumps(MENTEE_PAYLOAD), encoding="utf-8")
    directory_path = tmp_path / "mentors.json"
    directory_path.write_bytes(b'{"mentors": [{"id": "\xff"}]}')

    result = runner.invoke(
        cli.create_app(composition.build_cli_dependencies),
        ["match", "--profile", str(profile_path), "--directory", str(directory_path)],
    )

    assert result.exit_code == cli.MATCH_FAILED_EXIT_CODE
    assert "Failed to match mentors" in _strip_ansi(result.output)


def test_config_file_log_level_applies(deps: CliDependencies) -> None:
    deps.fs.write_text(
        'schema_version = 1\n[matching]\nlog_level = "warning"\n',
        Path("matching.toml"),
    )

    try:
        result = runner.invoke(
            _build_app(deps),
            ["--config", "matching.toml", "match", "--profile", str(PROFILE_PATH), "--json"],
        )

        assert result.exit_code == 0
        assert logging.getLogger("mentor_matching.match").level == logging.WARNING
    finally:
        set_log_level(logging.INFO)
