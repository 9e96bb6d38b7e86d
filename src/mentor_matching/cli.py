"""CLI for the mentor matching engine.

Commands:
- match: Rank approved mentors for a mentee profile (file or user id)
- mentors: Search approved mentors with browse filters
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint
from rich.table import Table

from . import __version__
from .application.matching import match_mentors, match_mentors_for_user
from .application.search import search_mentors
from .application.serialisation import matches_to_frame, mentor_to_io, serialise_matches
from .config import MatchingConfig
from .config_file import load_matching_config_file
from .domain.matching import MentorMatch
from .domain.profiles import Industry, MentorRecord
from .domain.search import MentorSearchFilters
from .exceptions import MatchingError, ProfileMissingError
from .infrastructure.io.validation import IncomingDataError, parse_mentee_profile
from .observability import parse_log_level, set_log_level
from .protocols import FileSystem, MentorDirectory, ProfileStore


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(self, *, config: MatchingConfig) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem
    directory: MentorDirectory
    profiles: ProfileStore


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: MatchingConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(self, *, config: MatchingConfig | None = None) -> CliDependencies:
        """Return dependencies using the configured builder."""
        return self.deps_builder(config=config or self.config)


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the mentor-match entry point.")


class MenteeSourceError(typer.BadParameter):
    """Raised when neither or both of --profile and --user-id are given."""

    def __init__(self) -> None:
        super().__init__("Provide exactly one of --profile or --user-id.")


class InvalidMenteeProfileError(typer.BadParameter):
    """Raised when the mentee profile file cannot be parsed."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Invalid mentee profile in {path}: {detail}")


class UnknownIndustryError(typer.BadParameter):
    """Raised when an --industry value is not a known industry tag."""

    def __init__(self, value: str) -> None:
        known = ", ".join(industry.value for industry in Industry)
        super().__init__(f"Unknown industry {value!r}. Expected one of: {known}.")


PROFILE_MISSING_EXIT_CODE = 3
MATCH_FAILED_EXIT_CODE = 1


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"mentor-match {__version__}")
        raise typer.Exit()


def _parse_industries(values: list[str] | None) -> tuple[Industry, ...]:
    industries: list[Industry] = []
    for value in values or []:
        try:
            industries.append(Industry(value.strip().upper()))
        except ValueError as exc:
            raise UnknownIndustryError(value) from exc
    return tuple(industries)


def _matches_table(matches: list[MentorMatch]) -> Table:
    table = Table(title="Recommended mentors")
    table.add_column("#", justify="right")
    table.add_column("Mentor")
    table.add_column("Score", justify="right")
    table.add_column("Industry", justify="right")
    table.add_column("Skills", justify="right")
    table.add_column("Languages", justify="right")
    table.add_column("Availability", justify="right")
    for rank, match in enumerate(matches, start=1):
        breakdown = match.score_breakdown
        table.add_row(
            str(rank),
            match.mentor.identity.display_name,
            str(match.score),
            str(breakdown.industry_matches),
            str(breakdown.skill_matches),
            str(breakdown.language_matches),
            str(breakdown.availability_bonus),
        )
    return table


def _mentors_table(mentors: list[MentorRecord]) -> Table:
    table = Table(title="Approved mentors")
    table.add_column("Mentor")
    table.add_column("Rating", justify="right")
    table.add_column("Industries")
    table.add_column("Skills")
    table.add_column("Languages")
    for mentor in mentors:
        profile = mentor.profile
        table.add_row(
            mentor.identity.display_name,
            f"{mentor.identity.avg_rating:.1f}",
            ", ".join(profile.industries) if profile else "-",
            ", ".join(profile.skills) if profile else "-",
            ", ".join(profile.languages) if profile else "-",
        )
    return table


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Mentor matching: rank approved mentors for a mentee profile",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        config_path: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="TOML config file overriding environment settings",
            ),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option(
                "--log-level",
                help="Logging level (debug, info, warning, error)",
            ),
        ] = None,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                callback=_version_callback,
                is_eager=True,
                help="Show the package version and exit",
            ),
        ] = False,
    ) -> None:
        """Initialise CLI context."""
        _ = version
        config = MatchingConfig.from_env()
        if config_path is not None:
            try:
                base_deps = deps_builder(config=config)
                file_config = load_matching_config_file(path=config_path, fs=base_deps.fs)
            except MatchingError as exc:
                raise typer.BadParameter(str(exc), param_hint="--config") from exc
            config = config.with_file_overrides(file_config)
        try:
            set_log_level(parse_log_level(log_level or config.log_level))
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
        ctx.obj = CliContext(config=config, deps_builder=deps_builder)

    @app.command()
    def match(
        ctx: typer.Context,
        profile_path: Annotated[
            Path | None,
            typer.Option(
                "--profile",
                "-p",
                help="Path to a mentee profile JSON file",
            ),
        ] = None,
        user_id: Annotated[
            str | None,
            typer.Option(
                "--user-id",
                "-u",
                help="Look up the mentee profile for this user in the profile store",
            ),
        ] = None,
        directory_path: Annotated[
            Path | None,
            typer.Option(
                "--directory",
                "-d",
                help="Mentor directory JSON file (implies the file source)",
            ),
        ] = None,
        limit: Annotated[
            int | None,
            typer.Option(
                "--limit",
                "-n",
                min=1,
                help="Maximum number of matches (default: 5)",
            ),
        ] = None,
        as_json: Annotated[
            bool,
            typer.Option(
                "--json",
                help="Print the match array as JSON",
            ),
        ] = False,
        output_path: Annotated[
            Path | None,
            typer.Option(
                "--output",
                "-o",
                help="Write a CSV explaining each match's score",
            ),
        ] = None,
    ) -> None:
        """Match: rank approved mentors for one mentee."""
        if (profile_path is None) == (user_id is None):
            raise MenteeSourceError()

        state = _get_context(ctx)
        config = state.config
        if limit is not None or directory_path is not None:
            config = config.with_overrides(
                max_results=limit,
                directory_source="file" if directory_path is not None else None,
                directory_path=str(directory_path) if directory_path is not None else None,
            )
        try:
            deps = state.build_dependencies(config=config)
            if profile_path is not None:
                try:
                    mentee = parse_mentee_profile(deps.fs.read_json(profile_path))
                except (FileNotFoundError, IncomingDataError) as exc:
                    raise InvalidMenteeProfileError(profile_path, str(exc)) from exc
                matches = match_mentors(mentee, directory=deps.directory, config=config)
            else:
                assert user_id is not None
                matches = match_mentors_for_user(
                    user_id,
                    profiles=deps.profiles,
                    directory=deps.directory,
                    config=config,
                )
        except ProfileMissingError as exc:
            rprint(f"[yellow]{exc}[/yellow]")
            raise typer.Exit(code=PROFILE_MISSING_EXIT_CODE) from exc
        except MatchingError as exc:
            rprint("[red]Failed to match mentors[/red]")
            rprint(f"  {exc}")
            raise typer.Exit(code=MATCH_FAILED_EXIT_CODE) from exc

        if output_path is not None:
            deps.fs.write_csv(matches_to_frame(matches), output_path)

        if as_json:
            typer.echo(json.dumps(serialise_matches(matches), ensure_ascii=False, indent=2))
            return

        if not matches:
            rprint("[yellow]No approved mentors to match.[/yellow]")
        else:
            rprint(_matches_table(matches))
        if output_path is not None:
            rprint(f"[green]✓ Explainability:[/green] {output_path}")

    @app.command()
    def mentors(
        ctx: typer.Context,
        industry: Annotated[
            list[str] | None,
            typer.Option(
                "--industry",
                "-i",
                help="Filter by industry (repeatable, e.g. --industry TECHNOLOGY)",
            ),
        ] = None,
        skill: Annotated[
            list[str] | None,
            typer.Option(
                "--skill",
                "-s",
                help="Filter by skill substring (repeatable)",
            ),
        ] = None,
        language: Annotated[
            list[str] | None,
            typer.Option(
                "--language",
                "-l",
                help="Filter by language (repeatable)",
            ),
        ] = None,
        rating_min: Annotated[
            float | None,
            typer.Option(
                "--rating-min",
                "-r",
                min=0.0,
                help="Minimum average review rating",
            ),
        ] = None,
        as_json: Annotated[
            bool,
            typer.Option(
                "--json",
                help="Print mentors as JSON",
            ),
        ] = False,
    ) -> None:
        """Mentors: list approved mentors matching browse filters."""
        state = _get_context(ctx)
        filters = MentorSearchFilters(
            industries=_parse_industries(industry),
            skills=tuple(skill or ()),
            languages=tuple(language or ()),
            rating_min=rating_min,
        )
        try:
            deps = state.build_dependencies()
            found = search_mentors(directory=deps.directory, filters=filters)
        except MatchingError as exc:
            rprint("[red]Failed to fetch mentors[/red]")
            rprint(f"  {exc}")
            raise typer.Exit(code=MATCH_FAILED_EXIT_CODE) from exc

        if as_json:
            payload = [mentor_to_io(mentor) for mentor in found]
            typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
            return
        rprint(_mentors_table(found))

    _ = (main, match, mentors)

    return app
