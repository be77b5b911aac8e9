"""Team registry: a two-phase builder and the read-only registry it produces.

Teams are defined first, then members are registered against team ids in a
second pass.  ``RegistryBuilder.build()`` freezes both into a ``Registry``;
nothing mutable escapes the builder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from team_notify.domain import (
    DuplicateTeamError,
    Person,
    ScopeMatcher,
    Team,
    UnknownTeamError,
)

logger = logging.getLogger(__name__)


@dataclass
class _TeamDraft:
    id: str
    name: str
    description: Optional[str]
    scope: tuple
    members: List[Person] = field(default_factory=list)

    def freeze(self) -> Team:
        return Team(
            id=self.id,
            name=self.name,
            description=self.description,
            scope=self.scope,
            members=tuple(self.members),
        )


class RegistryBuilder:
    """Collects team and member definitions; ``build()`` returns the registry."""

    def __init__(self) -> None:
        self._drafts: Dict[str, _TeamDraft] = {}

    def define_team(
        self,
        team_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        scope: Sequence[ScopeMatcher] = (),
    ) -> None:
        if team_id in self._drafts:
            raise DuplicateTeamError(team_id)
        self._drafts[team_id] = _TeamDraft(
            id=team_id,
            name=name or team_id,
            description=description,
            scope=tuple(scope),
        )

    def define_member(self, person: Person, *team_ids: str) -> None:
        # Validate every id first so a bad id leaves no team half-updated.
        drafts = []
        for team_id in team_ids:
            draft = self._drafts.get(team_id)
            if draft is None:
                raise UnknownTeamError(team_id)
            drafts.append(draft)
        for draft in drafts:
            draft.members.append(person)

    def build(self) -> "Registry":
        return Registry({team_id: d.freeze() for team_id, d in self._drafts.items()})


class Registry:
    """Read-only mapping from team id to ``Team``."""

    def __init__(self, teams: Mapping[str, Team]):
        self._teams = MappingProxyType(dict(teams))

    @property
    def by_id(self) -> Mapping[str, Team]:
        return self._teams

    def find_team(self, name: str) -> Team:
        """Return the team registered under NAME or raise ``UnknownTeamError``."""
        team = self._teams.get(name)
        if team is None:
            raise UnknownTeamError(name)
        return team

    def teams(self) -> List[Team]:
        """All teams, sorted by id."""
        return [self._teams[k] for k in sorted(self._teams)]

    def teams_matching_files(self, files: Iterable[str]) -> frozenset:
        """Return the teams with at least one scope entry matching one of FILES."""
        paths = set(files)
        matched = frozenset(
            team
            for team in self._teams.values()
            if any(team.covers(path) for path in paths)
        )
        logger.debug(
            "%d file(s) matched team(s): %s",
            len(paths),
            ", ".join(sorted(t.id for t in matched)) or "<none>",
        )
        return matched
