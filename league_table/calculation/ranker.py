from typing import Iterable, List, Optional, Tuple

from league_table.models.team_value import RankedEntry, TeamValue


def standings_order(teams: Iterable[TeamValue]) -> List[TeamValue]:
    """Sorts teams by value descending, ties broken by name ascending."""
    return sorted(teams, key=lambda team: (-team.value, team.name))


def rank_teams(teams: Iterable[TeamValue]) -> Tuple[RankedEntry, ...]:
    """
    Builds the standings table using competition ranking.

    Tied teams share a rank. A team after a tie takes its 1-based position in
    the table, so point groups of sizes 2, 1, 3, 1 are ranked 1, 1, 3, 4, 4, 4, 7.
    Any existing rank on the input is ignored.
    """
    ranked = []
    rank = 0
    previous_value: Optional[int] = None

    for index, team in enumerate(standings_order(teams), start=1):
        if team.value != previous_value:
            rank = index
        ranked.append(RankedEntry(name=team.name, value=team.value, rank=rank))
        previous_value = team.value

    return tuple(ranked)
