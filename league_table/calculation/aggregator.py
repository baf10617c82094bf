from typing import Dict, Iterable, List

from loguru import logger

from league_table.models.team_value import MatchPoints, TeamTotal


def aggregate_match_points(match_points: Iterable[MatchPoints]) -> List[TeamTotal]:
    """
    Sums every team's match points into a single total per team.

    Teams are grouped by exact, case-sensitive name. The result is in the order
    each team was first seen; ranking imposes the final order.
    """
    totals: Dict[str, int] = {}
    entries = 0

    for points in match_points:
        totals[points.name] = totals.get(points.name, 0) + points.value
        entries += 1

    logger.info(f"Aggregated {entries} match point entries into {len(totals)} teams.")
    return [TeamTotal(name=name, value=total) for name, total in totals.items()]
