"""Tests for summing match points per team."""

from __future__ import annotations

from league_table.calculation.aggregator import aggregate_match_points
from league_table.models.team_value import MatchPoints, TeamTotal


def test_points_are_summed_per_team() -> None:
    entries = [
        MatchPoints(name="Lions", value=1),
        MatchPoints(name="Snakes", value=1),
        MatchPoints(name="Lions", value=3),
        MatchPoints(name="Grouches", value=0),
    ]

    totals = aggregate_match_points(entries)

    assert sorted(totals, key=lambda t: t.name) == [
        TeamTotal(name="Grouches", value=0),
        TeamTotal(name="Lions", value=4),
        TeamTotal(name="Snakes", value=1),
    ]
    assert sum(t.value for t in totals) == sum(e.value for e in entries)


def test_names_are_case_sensitive() -> None:
    totals = aggregate_match_points(
        [MatchPoints(name="Lions", value=3), MatchPoints(name="lions", value=3)]
    )

    assert {t.name for t in totals} == {"Lions", "lions"}


def test_accepts_a_generator_and_empty_input() -> None:
    assert aggregate_match_points(iter([])) == []
    totals = aggregate_match_points(
        MatchPoints(name="Lions", value=3) for _ in range(3)
    )
    assert totals == [TeamTotal(name="Lions", value=9)]
