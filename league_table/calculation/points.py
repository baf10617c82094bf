from typing import Tuple

from league_table.models.enums import MatchOutcome
from league_table.models.team_value import GoalCount, MatchPoints


def match_outcome(goals_for: int, goals_against: int) -> MatchOutcome:
    """Outcome of a match from one team's point of view."""
    if goals_for == goals_against:
        return MatchOutcome.DRAW
    if goals_for > goals_against:
        return MatchOutcome.WIN
    return MatchOutcome.LOSS


def calculate_match_points(
    team_a: GoalCount, team_b: GoalCount
) -> Tuple[MatchPoints, MatchPoints]:
    """
    Awards match points for one match: 3 for a win, 1 each for a draw,
    0 for a loss.

    Args:
        team_a: Goals of the first team listed on the results line.
        team_b: Goals of the second team.

    Returns:
        The points for team_a and team_b, in that order.
    """
    outcome_a = match_outcome(team_a.value, team_b.value)
    outcome_b = match_outcome(team_b.value, team_a.value)

    return (
        MatchPoints(name=team_a.name, value=outcome_a.points),
        MatchPoints(name=team_b.name, value=outcome_b.points),
    )
