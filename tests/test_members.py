"""Tests for resolve_members(): dedup on (name, email) and name ordering."""
from __future__ import annotations

from team_notify.application.members import resolve_members
from team_notify.domain import Person, Team

from conftest import ANN, BOB, CAROL


def _team(team_id, *members):
    return Team(id=team_id, name=team_id, members=tuple(members))


def test_dedup_and_sort_by_name():
    assert resolve_members([_team("A", BOB, ANN, ANN)]) == [ANN, BOB]


def test_union_of_teams():
    teams = [_team("A", BOB, ANN), _team("B", CAROL, ANN)]
    assert resolve_members(teams) == [ANN, BOB, CAROL]


def test_team_order_does_not_change_result():
    a = _team("A", BOB, ANN)
    b = _team("B", CAROL, ANN)
    assert resolve_members([a, b]) == resolve_members([b, a])


def test_same_name_different_email_kept_twice():
    work = Person("Ann", "ann@work")
    result = resolve_members([_team("A", ANN, work)])
    assert result == [ANN, work]


def test_sort_is_plain_string_order():
    lower = Person("alice", "l@x")
    upper = Person("Zed", "z@x")
    assert resolve_members([_team("A", lower, upper)]) == [upper, lower]


def test_empty():
    assert resolve_members([]) == []
    assert resolve_members([_team("empty")]) == []
