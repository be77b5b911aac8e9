"""Tests for run_command(): every command variant against the sample registry."""
from __future__ import annotations

import pytest

from team_notify.application.commands import (
    CODEOWNERS_HEADER,
    Cc,
    CcMembers,
    CcMembersFromPatch,
    CcMembersHeader,
    CcMentorsHeader,
    ExportCodeowners,
    GetMaintainer,
    ListMembers,
    ListTeams,
    ShowTeams,
    cc_members_command,
    format_team,
    run_command,
)
from team_notify.config import DEFAULT_CONFIG, TeamsConfig
from team_notify.domain import (
    InvalidPatchError,
    MissingPatchFileError,
    Team,
    UnknownTeamError,
)

from conftest import COMMIT_ID, FakeChanges


def _run(command, registry, files=(), config=DEFAULT_CONFIG, width=80):
    changes = FakeChanges(list(files))
    return run_command(command, registry=registry, changes=changes, config=config, width=width), changes


# ---------------------------------------------------------------------------
# cc / list-members
# ---------------------------------------------------------------------------

def test_cc_single_team(sample_registry):
    out, _ = _run(Cc(("A",)), sample_registry)
    assert out == '--add-header="X-Debbugs-Cc: a@y, b@x"'


def test_cc_union_of_teams(sample_registry):
    out, _ = _run(Cc(("B", "A")), sample_registry)
    assert out == '--add-header="X-Debbugs-Cc: a@y, b@x, c@z"'


def test_cc_team_without_members_prints_nothing(sample_registry):
    out, _ = _run(Cc(("empty",)), sample_registry)
    assert out == ""


def test_cc_unknown_team(sample_registry):
    with pytest.raises(UnknownTeamError):
        _run(Cc(("A", "nope")), sample_registry)


def test_cc_uses_configured_header(sample_registry):
    config = TeamsConfig(cc_header="X-Cc")
    out, _ = _run(Cc(("mentors",)), sample_registry, config=config)
    assert out == '--add-header="X-Cc: b@x"'


def test_list_members_dedups_and_sorts(sample_registry):
    out, _ = _run(ListMembers(("A",)), sample_registry)
    assert out.splitlines() == ["a@y <Ann>", "b@x <Bob>"]


def test_list_members_several_teams_in_order(sample_registry):
    out, _ = _run(ListMembers(("B", "mentors")), sample_registry)
    assert out.splitlines() == ["a@y <Ann>", "c@z <Carol>", "b@x <Bob>"]


# ---------------------------------------------------------------------------
# Commands driven by changed files
# ---------------------------------------------------------------------------

def test_cc_members_range(sample_registry):
    out, changes = _run(CcMembers("r1", "r2"), sample_registry, files=["bar/baz.txt"])
    assert changes.calls == [("r1", "r2")]
    assert out == '--add-header="X-Debbugs-Cc: a@y, c@z"'


def test_cc_members_range_no_matching_team(sample_registry):
    out, _ = _run(CcMembers("r1", "r2"), sample_registry, files=["README"])
    assert out == ""


def test_cc_members_from_patch_uses_patch_range(sample_registry, patch_file):
    out, changes = _run(CcMembersFromPatch(str(patch_file)), sample_registry, files=["foo.txt"])
    assert changes.calls == [(f"{COMMIT_ID}^", COMMIT_ID)]
    assert out == '--add-header="X-Debbugs-Cc: a@y, b@x"'


def test_cc_members_missing_patch(sample_registry, tmp_path):
    with pytest.raises(MissingPatchFileError):
        _run(CcMembersFromPatch(str(tmp_path / "nope.patch")), sample_registry)


def test_cc_members_header(sample_registry, patch_file):
    out, _ = _run(
        CcMembersHeader(str(patch_file)), sample_registry, files=["foo.txt", "bar/baz.txt"]
    )
    assert out == "X-Debbugs-Cc: a@y <Ann>, b@x <Bob>, c@z <Carol>"


def test_cc_members_header_no_team(sample_registry, patch_file):
    out, _ = _run(CcMembersHeader(str(patch_file)), sample_registry, files=["README"])
    assert out == ""


def test_cc_members_header_invalid_patch(sample_registry, tmp_path):
    bad = tmp_path / "bad.patch"
    bad.write_text("Subject: nothing\n", encoding="utf-8")
    with pytest.raises(InvalidPatchError):
        _run(CcMembersHeader(str(bad)), sample_registry)


def test_cc_mentors_header_ignores_patch(sample_registry, tmp_path):
    out, changes = _run(CcMentorsHeader(str(tmp_path / "never-read.patch")), sample_registry)
    assert out == "X-Debbugs-Cc: b@x <Bob>"
    assert changes.calls == []


def test_cc_mentors_header_configured_team(sample_registry):
    config = TeamsConfig(mentors_team="B")
    out, _ = _run(CcMentorsHeader("x.patch"), sample_registry, config=config)
    assert out == "X-Debbugs-Cc: a@y <Ann>, c@z <Carol>"


def test_cc_mentors_header_empty_team_prints_nothing(sample_registry):
    config = TeamsConfig(mentors_team="empty")
    out, _ = _run(CcMentorsHeader("x.patch"), sample_registry, config=config)
    assert out == ""


def test_get_maintainer_lists_each_team(sample_registry, patch_file):
    out, _ = _run(GetMaintainer(str(patch_file)), sample_registry, files=["bar/baz.txt", "foo.txt"])
    # Team A first, then B.
    assert out.splitlines() == ["a@y <Ann>", "b@x <Bob>", "a@y <Ann>", "c@z <Carol>"]


def test_get_maintainer_nothing_matched(sample_registry, patch_file):
    out, _ = _run(GetMaintainer(str(patch_file)), sample_registry, files=["README"])
    assert out == ""


# ---------------------------------------------------------------------------
# list-teams / show / codeowners
# ---------------------------------------------------------------------------

def test_format_team_layout(sample_registry):
    assert format_team(sample_registry.find_team("A"), 80) == (
        "id: A\n"
        "name: A\n"
        "description: <none>\n"
        'scope: "foo.txt"\n'
        "members:\n"
        "+ a@y <Ann>\n"
        "+ b@x <Bob>\n"
    )


def test_format_team_pattern_scope_and_description(sample_registry):
    text = format_team(sample_registry.find_team("B"), 80)
    assert "name: Bee team\n" in text
    assert "description: Everything under bar/, including generated files.\n" in text
    assert "scope: ^bar/\n" in text


def test_format_team_without_scope_has_no_scope_line(sample_registry):
    assert "scope:" not in format_team(sample_registry.find_team("mentors"), 80)


def test_format_team_wraps_description():
    team = Team(id="t", name="t", description=" ".join(["word"] * 30))
    lines = format_team(team, 40).splitlines()
    description = [l for l in lines if l.startswith("description: ") or l.startswith(" " * 13)]
    assert len(description) > 1
    assert all(len(l) <= 40 for l in description)
    assert all(l.startswith(" " * 13 + "word") for l in description[1:])


def test_list_teams_sorted_by_id(sample_registry):
    out, _ = _run(ListTeams(), sample_registry)
    ids = [l[len("id: "):] for l in out.splitlines() if l.startswith("id: ")]
    assert ids == ["A", "B", "empty", "mentors"]
    assert not out.endswith("\n")


def test_show_named_teams(sample_registry):
    out, _ = _run(ShowTeams(("mentors",)), sample_registry)
    assert out.splitlines()[0] == "id: mentors"
    assert "+ b@x <Bob>" in out


def test_show_unknown_team(sample_registry):
    with pytest.raises(UnknownTeamError):
        _run(ShowTeams(("nope",)), sample_registry)


def test_codeowners(sample_registry):
    out, _ = _run(ExportCodeowners(), sample_registry)
    assert out.startswith(CODEOWNERS_HEADER)
    body = out[len(CODEOWNERS_HEADER):].strip().splitlines()
    assert body == [
        "foo.txt".ljust(50) + " @guix/A",
        "^bar/".ljust(50) + " @guix/B",
    ]


def test_codeowners_custom_prefix(sample_registry):
    out, _ = _run(ExportCodeowners(), sample_registry, config=TeamsConfig(codeowners_handle_prefix="@org/"))
    assert "@org/A" in out


# ---------------------------------------------------------------------------
# Command construction / dispatch
# ---------------------------------------------------------------------------

def test_cc_members_command_arity():
    assert cc_members_command(["x.patch"]) == CcMembersFromPatch("x.patch")
    assert cc_members_command(["a", "b"]) == CcMembers("a", "b")
    with pytest.raises(ValueError):
        cc_members_command([])
    with pytest.raises(ValueError):
        cc_members_command(["a", "b", "c"])


def test_unknown_command_type_raises(sample_registry):
    with pytest.raises(TypeError):
        _run(object(), sample_registry)


def test_commands_do_not_mutate_registry(sample_registry, patch_file):
    before = dict(sample_registry.by_id)
    _run(CcMembersHeader(str(patch_file)), sample_registry, files=["foo.txt"])
    _run(ListTeams(), sample_registry)
    assert dict(sample_registry.by_id) == before
