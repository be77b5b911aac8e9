"""CLI: Typer app wired to run_command."""

from __future__ import annotations

import logging
import sys
from typing import List

import typer
from rich.console import Console
from rich.markup import escape

from team_notify.application.commands import (
    Cc,
    CcMembersHeader,
    CcMentorsHeader,
    Command,
    ExportCodeowners,
    GetMaintainer,
    ListMembers,
    ListTeams,
    ShowTeams,
    cc_members_command,
    run_command,
)
from team_notify.application.ports import ChangeSource
from team_notify.application.registry import Registry
from team_notify.config import TeamsConfig, load_config
from team_notify.domain import TeamsError
from team_notify.infrastructure.telemetry import setup_telemetry
from team_notify.infrastructure.vcs import GitRepository
from team_notify.teams import default_registry

app = typer.Typer(
    help="teams: find the teams looking after changed files and cc them.",
    no_args_is_help=True,
)


def _registry() -> Registry:
    return default_registry()


def _change_source(config: TeamsConfig) -> ChangeSource:
    return GitRepository(config.repository)


def _terminal_width(config: TeamsConfig) -> int:
    console = Console()
    return console.width if console.is_terminal else config.fallback_width


def _run(command: Command) -> None:
    try:
        config = load_config()
        setup_telemetry(config)
        output = run_command(
            command,
            registry=_registry(),
            changes=_change_source(config),
            config=config,
            width=_terminal_width(config),
        )
    except TeamsError as e:
        Console(stderr=True).print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        sys.exit(1)
    if output:
        typer.echo(output)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging to stderr."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command()
def cc(
    team_names: List[str] = typer.Argument(..., help="Teams to cc."),
) -> None:
    """Print git send-email flags cc'ing the members of the given teams."""
    _run(Cc(tuple(team_names)))


@app.command("cc-members")
def cc_members(
    args: List[str] = typer.Argument(
        ..., metavar="PATCH-FILE | REV-START REV-END", help="A patch file, or a revision range."
    ),
) -> None:
    """Print git send-email flags cc'ing the teams whose files a change touches."""
    try:
        command = cc_members_command(args)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="PATCH-FILE | REV-START REV-END") from e
    _run(command)


@app.command("cc-members-header-cmd")
def cc_members_header_cmd(
    patch_file: str = typer.Argument(..., help="Patch produced by git format-patch."),
) -> None:
    """Print an X-Debbugs-Cc header for the teams a patch touches (git send-email --header-cmd)."""
    _run(CcMembersHeader(patch_file))


@app.command("cc-mentors-header-cmd")
def cc_mentors_header_cmd(
    patch_file: str = typer.Argument(..., help="Patch file (ignored)."),
) -> None:
    """Print an X-Debbugs-Cc header for the mentors team."""
    _run(CcMentorsHeader(patch_file))


@app.command("get-maintainer")
def get_maintainer(
    patch_file: str = typer.Argument(..., help="Patch produced by git format-patch."),
) -> None:
    """List the members of every team a patch touches."""
    _run(GetMaintainer(patch_file))


@app.command("list-teams")
def list_teams() -> None:
    """Describe every team."""
    _run(ListTeams())


@app.command("list-members")
def list_members(
    team_names: List[str] = typer.Argument(..., help="Teams whose members to list."),
) -> None:
    """List the members of the given teams, one per line."""
    _run(ListMembers(tuple(team_names)))


@app.command()
def show(
    team_names: List[str] = typer.Argument(..., help="Teams to describe."),
) -> None:
    """Describe the given teams."""
    _run(ShowTeams(tuple(team_names)))


@app.command()
def codeowners() -> None:
    """Print a CODEOWNERS file generated from the team scopes."""
    _run(ExportCodeowners())
