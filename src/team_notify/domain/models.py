"""Domain models: Person, Team and scope matchers. Pure data, no I/O."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Person:
    """A contact. Two persons are the same only if name *and* email match."""
    name: str
    email: Optional[str] = None


def member_to_string(person: Person) -> str:
    """Return the ``email <name>`` form of PERSON, quoting names with a comma."""
    name = f'"{person.name}"' if "," in person.name else person.name
    if not person.email:
        return name
    return f"{person.email} <{name}>"


@dataclass(frozen=True)
class ExactPath:
    """Scope entry matching a single file path literally."""
    path: str

    def matches(self, path: str) -> bool:
        return path == self.path

    @property
    def pattern(self) -> str:
        return self.path


@dataclass(frozen=True)
class PatternMatch:
    """Scope entry matching file paths against a regular expression.

    The expression is searched, not anchored; entries that mean "whole path"
    spell out ``^`` and ``$`` themselves.
    """
    regex: "re.Pattern[str]"

    def matches(self, path: str) -> bool:
        return self.regex.search(path) is not None

    @property
    def pattern(self) -> str:
        return self.regex.pattern


ScopeMatcher = Union[ExactPath, PatternMatch]


def pattern(expression: str) -> PatternMatch:
    """Compile EXPRESSION into a scope entry."""
    return PatternMatch(re.compile(expression))


@dataclass(frozen=True)
class Team:
    """A named group of people responsible for a set of file paths."""
    id: str
    name: str
    description: Optional[str] = None
    scope: Tuple[ScopeMatcher, ...] = ()
    members: Tuple[Person, ...] = field(default=())

    def covers(self, path: str) -> bool:
        return any(entry.matches(path) for entry in self.scope)
