"""Membership resolution across teams."""

from __future__ import annotations

from typing import Iterable, List

from team_notify.domain import Person, Team


def resolve_members(teams: Iterable[Team]) -> List[Person]:
    """Deduplicate and sort the members of TEAMS by name.

    Duplicates are dropped on exact ``(name, email)`` equality, so one person
    listed under two addresses appears twice.  Same-name persons keep the
    order in which they were first seen.
    """
    members: List[Person] = []
    for team in teams:
        members.extend(team.members)
    unique = list(dict.fromkeys(members))
    return sorted(unique, key=lambda p: p.name)
