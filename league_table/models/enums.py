from enum import Enum


class MatchOutcome(str, Enum):
    WIN = "WIN"
    DRAW = "DRAW"
    LOSS = "LOSS"

    @property
    def points(self) -> int:
        """Match points awarded for this outcome."""
        return _OUTCOME_POINTS[self]


_OUTCOME_POINTS = {
    MatchOutcome.WIN: 3,
    MatchOutcome.DRAW: 1,
    MatchOutcome.LOSS: 0,
}
