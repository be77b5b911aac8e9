"""Pytest fixtures and helpers for team-notify tests."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import pytest

from team_notify.application.registry import Registry, RegistryBuilder
from team_notify.config import loader as config_loader
from team_notify.domain import ExactPath, Person, pattern
from team_notify.infrastructure.patch import revisions_of_patch

# Repo root (parent of tests/)
REPO_ROOT = Path(__file__).resolve().parent.parent

COMMIT_ID = "0123456789abcdef0123456789abcdef01234567"

ANN = Person("Ann", "a@y")
BOB = Person("Bob", "b@x")
CAROL = Person("Carol", "c@z")


def build_sample_registry() -> Registry:
    """Team A: literal foo.txt, members Bob, Ann, Ann.  Team B: ^bar/, Ann and Carol."""
    b = RegistryBuilder()
    b.define_team("A", scope=[ExactPath("foo.txt")])
    b.define_team(
        "B",
        name="Bee team",
        description="Everything under bar/, including generated files.",
        scope=[pattern(r"^bar/")],
    )
    b.define_team("empty")
    b.define_team("mentors", name="Mentors")
    b.define_member(BOB, "A", "mentors")
    b.define_member(ANN, "A", "B")
    b.define_member(ANN, "A")
    b.define_member(CAROL, "B")
    return b.build()


def write_patch(path: Path, commit_id: str = COMMIT_ID) -> Path:
    path.write_text(
        f"From {commit_id} Mon Sep 17 00:00:00 2001\n"
        "From: Ann <a@y>\n"
        "Subject: [PATCH] Touch foo.\n"
        "\n"
        "---\n",
        encoding="utf-8",
    )
    return path


class FakeChanges:
    """ChangeSource returning fixed files; patch parsing is the real one."""

    def __init__(self, files: List[str]):
        self.files = files
        self.calls: List[Tuple[str, str]] = []

    def changed_files(self, rev_start: str, rev_end: str) -> List[str]:
        self.calls.append((rev_start, rev_end))
        return list(self.files)

    def revisions_of_patch(self, patch_file: str) -> Tuple[str, str]:
        return revisions_of_patch(patch_file)


@pytest.fixture
def sample_registry() -> Registry:
    return build_sample_registry()


@pytest.fixture
def patch_file(tmp_path) -> Path:
    return write_patch(tmp_path / "0001-touch-foo.patch")


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Each test sees the default config unless it sets TEAMS_CONFIG_PATH itself."""
    monkeypatch.delenv("TEAMS_CONFIG_PATH", raising=False)
    monkeypatch.setattr(config_loader, "_env", None)
    config_loader.load_config.cache_clear()
    yield
    config_loader.load_config.cache_clear()
