"""Domain layer: entities and value objects. No I/O."""

from .models import (
    ExactPath,
    PatternMatch,
    Person,
    ScopeMatcher,
    Team,
    member_to_string,
    pattern,
)
from .errors import (
    ConfigError,
    DuplicateTeamError,
    InvalidPatchError,
    MissingPatchFileError,
    TeamsError,
    UnknownTeamError,
    VcsResolutionError,
)

__all__ = [
    "ExactPath",
    "PatternMatch",
    "Person",
    "ScopeMatcher",
    "Team",
    "member_to_string",
    "pattern",
    "ConfigError",
    "DuplicateTeamError",
    "InvalidPatchError",
    "MissingPatchFileError",
    "TeamsError",
    "UnknownTeamError",
    "VcsResolutionError",
]
