from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class TeamValue(BaseModel):
    """A team name paired with a non-negative integer.

    Concrete subclasses give the number its meaning (goals, match points,
    season total) so that values from one stage cannot be passed to another.
    """

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    name: str = Field(..., description="Team name as it appeared in the results.")
    value: int = Field(..., ge=0)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, name: str) -> str:
        if not name.strip():
            raise ValueError("team name must not be empty")
        return name


class GoalCount(TeamValue):
    """Goals scored by one team in one match."""


class MatchPoints(TeamValue):
    """Points a team earned from a single match (3 win, 1 draw, 0 loss)."""

    @field_validator("value")
    @classmethod
    def valid_award(cls, value: int) -> int:
        if value not in (0, 1, 3):
            raise ValueError(f"{value} is not a valid match point award")
        return value


class TeamTotal(TeamValue):
    """Points a team accumulated over every match in the results."""


class RankedEntry(TeamValue):
    """One row of the final standings table."""

    rank: int = Field(..., ge=1)

    @computed_field  # type: ignore[misc]
    @property
    def points_label(self) -> str:
        return "pt" if self.value == 1 else "pts"
