"""Domain errors. Every failure of a command is one of these."""


class TeamsError(Exception):
    """Base for team-notify errors."""
    pass


class UnknownTeamError(TeamsError):
    """A team id was referenced that is not in the registry."""

    def __init__(self, team_id: str):
        super().__init__(f"unknown team: {team_id}")
        self.team_id = team_id


class DuplicateTeamError(TeamsError):
    """A team id was defined twice."""

    def __init__(self, team_id: str):
        super().__init__(f"team already defined: {team_id}")
        self.team_id = team_id


class MissingPatchFileError(TeamsError):
    """The named patch file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"patch file does not exist: {path}")
        self.path = path


class InvalidPatchError(TeamsError):
    """The patch's first line does not carry a 'From <commit>' marker."""
    pass


class VcsResolutionError(TeamsError):
    """The repository or a revision could not be resolved."""
    pass


class ConfigError(TeamsError):
    """The config file named by TEAMS_CONFIG_PATH is unreadable or invalid."""
    pass
