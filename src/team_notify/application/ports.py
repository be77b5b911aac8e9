"""Ports (abstract interfaces) used by the application layer.

Each port is a ``Protocol`` so the application depends only on the *shape* of the
collaborator.  Infrastructure adapters must satisfy these shapes; the
application never imports from infrastructure.
"""

from __future__ import annotations

from typing import List, Protocol, Tuple


class ChangeSource(Protocol):
    """Where changed file paths come from (a git repository in production)."""

    def changed_files(self, rev_start: str, rev_end: str) -> List[str]:
        """Paths changed between two revisions."""
        ...

    def revisions_of_patch(self, patch_file: str) -> Tuple[str, str]:
        """``(rev_start, rev_end)`` bounding the commit a patch file was made from."""
        ...
