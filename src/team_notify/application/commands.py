"""Commands of the teams CLI and their handlers.

Each subcommand is a frozen dataclass parsed once at the CLI boundary.
``run_command`` dispatches on the variant and returns the complete text to
print, so a failing command never leaves partial output behind.
"""

from __future__ import annotations

import logging
import textwrap
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

from team_notify.application.members import resolve_members
from team_notify.application.ports import ChangeSource
from team_notify.application.registry import Registry
from team_notify.config import TeamsConfig
from team_notify.domain import ExactPath, Person, Team, member_to_string
from team_notify.infrastructure.telemetry import get_tracer

logger = logging.getLogger(__name__)

CODEOWNERS_HEADER = """\
# -*- conf -*-
# This file is generated by `teams codeowners'; do not edit.
# Team handles map to the scopes declared in the team registry.
"""


@dataclass(frozen=True)
class Cc:
    team_names: Tuple[str, ...]


@dataclass(frozen=True)
class CcMembersFromPatch:
    patch_file: str


@dataclass(frozen=True)
class CcMembers:
    rev_start: str
    rev_end: str


@dataclass(frozen=True)
class CcMembersHeader:
    patch_file: str


@dataclass(frozen=True)
class CcMentorsHeader:
    patch_file: str  # accepted for the hook's calling convention, never read


@dataclass(frozen=True)
class GetMaintainer:
    patch_file: str


@dataclass(frozen=True)
class ListTeams:
    pass


@dataclass(frozen=True)
class ListMembers:
    team_names: Tuple[str, ...]


@dataclass(frozen=True)
class ShowTeams:
    team_names: Tuple[str, ...]


@dataclass(frozen=True)
class ExportCodeowners:
    pass


Command = Union[
    Cc,
    CcMembersFromPatch,
    CcMembers,
    CcMembersHeader,
    CcMentorsHeader,
    GetMaintainer,
    ListTeams,
    ListMembers,
    ShowTeams,
    ExportCodeowners,
]


def cc_members_command(args: Sequence[str]) -> Union[CcMembersFromPatch, CcMembers]:
    """Build the ``cc-members`` variant from its one (patch) or two (range) arguments."""
    if len(args) == 1:
        return CcMembersFromPatch(args[0])
    if len(args) == 2:
        return CcMembers(args[0], args[1])
    raise ValueError(
        f"cc-members takes a patch file or a revision range, got {len(args)} argument(s)"
    )


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_cc_flag(members: Sequence[Person], header: str) -> str:
    """``git send-email`` flag adding HEADER with the members' emails; empty if none."""
    emails = [m.email for m in members if m.email]
    if not emails:
        return ""
    return f'--add-header="{header}: {", ".join(emails)}"'


def format_cc_header(members: Sequence[Person], header: str) -> str:
    if not members:
        return ""
    return f"{header}: {', '.join(member_to_string(m) for m in members)}"


def format_members(members: Iterable[Person]) -> List[str]:
    return [member_to_string(m) for m in members]


def _format_scope_entry(entry) -> str:
    if isinstance(entry, ExactPath):
        return f'"{entry.path}"'
    return entry.pattern


def format_team(team: Team, width: int) -> str:
    """Multi-line description of TEAM, wrapping its description to WIDTH columns."""
    label = "description: "
    if team.description:
        description = textwrap.fill(
            " ".join(team.description.split()),
            width=max(width, len(label) + 10),
            initial_indent=label,
            subsequent_indent=" " * len(label),
        )
    else:
        description = label + "<none>"
    lines = [f"id: {team.id}", f"name: {team.name}", description]
    if team.scope:
        lines.append("scope: " + " ".join(_format_scope_entry(e) for e in team.scope))
    lines.append("members:")
    lines.extend("+ " + s for s in format_members(resolve_members([team])))
    return "\n".join(lines) + "\n"


def format_codeowners(teams: Iterable[Team], handle_prefix: str) -> str:
    lines = []
    for team in teams:
        for entry in team.scope:
            lines.append(f"{entry.pattern:<50} {handle_prefix}{team.id}")
    return CODEOWNERS_HEADER + "\n" + "\n".join(lines)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _teams_by_name(registry: Registry, names: Iterable[str]) -> List[Team]:
    return [registry.find_team(name) for name in names]


def _teams_of_range(
    registry: Registry, changes: ChangeSource, rev_start: str, rev_end: str
) -> List[Team]:
    files = changes.changed_files(rev_start, rev_end)
    logger.debug("%d file(s) changed between %s and %s", len(files), rev_start, rev_end)
    return sorted(registry.teams_matching_files(files), key=lambda t: t.id)


def _teams_of_patch(registry: Registry, changes: ChangeSource, patch_file: str) -> List[Team]:
    rev_start, rev_end = changes.revisions_of_patch(patch_file)
    return _teams_of_range(registry, changes, rev_start, rev_end)


def run_command(
    command: Command,
    *,
    registry: Registry,
    changes: ChangeSource,
    config: TeamsConfig,
    width: int = 80,
) -> str:
    """Run COMMAND and return its output (empty string when there is nothing to print)."""
    tracer = get_tracer()
    with tracer.start_as_current_span("teams.run_command") as span:
        span.set_attribute("teams.command", type(command).__name__)
        return _dispatch(command, registry, changes, config, width)


def _dispatch(
    command: Command,
    registry: Registry,
    changes: ChangeSource,
    config: TeamsConfig,
    width: int,
) -> str:
    if isinstance(command, Cc):
        teams = _teams_by_name(registry, command.team_names)
        return format_cc_flag(resolve_members(teams), config.cc_header)

    elif isinstance(command, CcMembersFromPatch):
        rev_start, rev_end = changes.revisions_of_patch(command.patch_file)
        return _dispatch(CcMembers(rev_start, rev_end), registry, changes, config, width)

    elif isinstance(command, CcMembers):
        teams = _teams_of_range(registry, changes, command.rev_start, command.rev_end)
        return format_cc_flag(resolve_members(teams), config.cc_header)

    elif isinstance(command, CcMembersHeader):
        teams = _teams_of_patch(registry, changes, command.patch_file)
        return format_cc_header(resolve_members(teams), config.cc_header)

    elif isinstance(command, CcMentorsHeader):
        mentors = registry.find_team(config.mentors_team)
        return format_cc_header(resolve_members([mentors]), config.cc_header)

    elif isinstance(command, GetMaintainer):
        teams = _teams_of_patch(registry, changes, command.patch_file)
        return _dispatch(
            ListMembers(tuple(t.id for t in teams)), registry, changes, config, width
        )

    elif isinstance(command, ListTeams):
        return "\n".join(format_team(team, width) for team in registry.teams()).rstrip("\n")

    elif isinstance(command, ListMembers):
        lines: List[str] = []
        for team in _teams_by_name(registry, command.team_names):
            lines.extend(format_members(resolve_members([team])))
        return "\n".join(lines)

    elif isinstance(command, ShowTeams):
        teams = _teams_by_name(registry, command.team_names)
        return "\n".join(format_team(team, width) for team in teams).rstrip("\n")

    elif isinstance(command, ExportCodeowners):
        return format_codeowners(registry.teams(), config.codeowners_handle_prefix)

    raise TypeError(f"unhandled command: {command!r}")
