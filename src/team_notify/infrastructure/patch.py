"""Reading the originating commit out of ``git format-patch`` files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Tuple

from team_notify.domain import InvalidPatchError, MissingPatchFileError

_FROM_LINE = re.compile(r"^From ([0-9a-f]{40})")


def commit_id_of_patch(patch_file: str) -> str:
    """Return the commit id on the first line of PATCH_FILE (``From <40 hex> ...``)."""
    path = Path(patch_file)
    if not path.is_file():
        raise MissingPatchFileError(patch_file)
    try:
        with path.open(encoding="utf-8", errors="replace") as f:
            first_line = f.readline()
    except FileNotFoundError as e:
        raise MissingPatchFileError(patch_file) from e
    except OSError as e:
        raise InvalidPatchError(f"cannot read patch {patch_file}: {e}") from e
    m = _FROM_LINE.match(first_line)
    if m is None:
        raise InvalidPatchError(f"could not find 'From <commit>' line in patch: {patch_file}")
    return m.group(1)


def revisions_of_patch(patch_file: str) -> Tuple[str, str]:
    """Revision range covering the single commit PATCH_FILE was generated from."""
    commit_id = commit_id_of_patch(patch_file)
    return f"{commit_id}^", commit_id
