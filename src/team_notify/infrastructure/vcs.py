"""Git adapter: files changed between revisions, via pygit2 (libgit2)."""

from __future__ import annotations

import logging
import os
from typing import List, Optional, Tuple

import pygit2

from team_notify.domain import VcsResolutionError
from team_notify.infrastructure import patch
from team_notify.infrastructure.telemetry import get_tracer

logger = logging.getLogger(__name__)


class GitRepository:
    """``ChangeSource`` backed by the git repository containing ``path``.

    The repository is opened on first use, so constructing the adapter outside
    a repository is harmless for commands that never diff.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or os.getcwd()
        self._repo: Optional[pygit2.Repository] = None

    def _open(self) -> pygit2.Repository:
        if self._repo is None:
            try:
                git_dir = pygit2.discover_repository(self.path)
            except KeyError:  # raised instead of returning None by older pygit2
                git_dir = None
            if git_dir is None:
                raise VcsResolutionError(f"not a git repository: {self.path}")
            try:
                self._repo = pygit2.Repository(git_dir)
            except pygit2.GitError as e:
                raise VcsResolutionError(f"cannot open repository {git_dir}: {e}") from e
            logger.debug("Opened repository %s", git_dir)
        return self._repo

    def _commit(self, rev: str) -> pygit2.Commit:
        repo = self._open()
        try:
            return repo.revparse_single(rev).peel(pygit2.Commit)
        except (KeyError, ValueError, pygit2.GitError) as e:
            raise VcsResolutionError(f"cannot resolve revision {rev!r}: {e}") from e

    def changed_files(self, rev_start: str, rev_end: str) -> List[str]:
        """Paths of the entries that differ between the trees of two revisions.

        Each entry reports its old-side path; an entry without one (a file
        added in ``rev_end``) reports its new-side path instead.
        """
        with get_tracer().start_as_current_span("teams.diff_revisions") as span:
            span.set_attribute("teams.rev_start", rev_start)
            span.set_attribute("teams.rev_end", rev_end)
            start = self._commit(rev_start)
            end = self._commit(rev_end)
            try:
                diff = self._open().diff(start.tree, end.tree)
            except pygit2.GitError as e:
                raise VcsResolutionError(f"cannot diff {rev_start}..{rev_end}: {e}") from e
            files = [d.old_file.path or d.new_file.path for d in diff.deltas]
            span.set_attribute("teams.changed_files", len(files))
        logger.debug("%s..%s changed %d file(s)", rev_start, rev_end, len(files))
        return files

    def revisions_of_patch(self, patch_file: str) -> Tuple[str, str]:
        return patch.revisions_of_patch(patch_file)
