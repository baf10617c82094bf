import re
from typing import Optional, Pattern, Tuple, Union

from loguru import logger
from pydantic import ValidationError

from league_table.config.settings import DEFAULT_TEAM_RESULT_PATTERN
from league_table.models.team_value import GoalCount

RESULT_SEPARATOR = ", "
TEAM_RESULT_PATTERN = re.compile(DEFAULT_TEAM_RESULT_PATTERN)


class ParseError(Exception):
    """Raised when a results line does not match the expected grammar."""

    def __init__(self, line: str, reason: str, line_number: Optional[int] = None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        location = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"Cannot parse {location} {line!r}: {reason}")


def split_result_line(line: str, separator: str = RESULT_SEPARATOR) -> Tuple[str, str]:
    """Splits a results line on the first separator into its two team results."""
    first, found, second = line.partition(separator)
    if not found:
        raise ParseError(line, f"expected two results separated by {separator!r}")
    return first, second


def parse_team_result(
    segment: str, pattern: Union[str, Pattern[str]] = TEAM_RESULT_PATTERN
) -> GoalCount:
    """Parses one 'Team Name 3' segment into a GoalCount.

    The pattern's ``name`` group is greedy and must be followed by the ``goals``
    digit run, and the whole segment must match. Exactly one space separating
    the two is dropped from the name; interior spaces are kept, but a name that
    still starts or ends with whitespace is rejected.
    """
    match = re.fullmatch(pattern, segment)
    if match is None:
        raise ParseError(segment, "expected a team name followed by a goal count")

    team = match.group("name")
    if not team.endswith(" "):
        raise ParseError(segment, "expected a space between team name and goals")

    name = team[:-1]
    if not name.strip():
        raise ParseError(segment, "team name is empty")
    if name != name.strip():
        raise ParseError(segment, "team name has leading or trailing whitespace")

    try:
        return GoalCount(name=name, value=int(match.group("goals")))
    except (ValidationError, ValueError) as e:
        raise ParseError(segment, str(e)) from e


def parse_result_line(
    line: str,
    line_number: Optional[int] = None,
    *,
    separator: str = RESULT_SEPARATOR,
    pattern: Union[str, Pattern[str]] = TEAM_RESULT_PATTERN,
) -> Tuple[GoalCount, GoalCount]:
    """Parses a results line such as 'Lions 3, Snakes 3'.

    Args:
        line: The raw line; a trailing line terminator is ignored.
        line_number: 1-based position of the line in its file, for error reports.
        separator: Text between the two team results.
        pattern: Regex with ``name`` and ``goals`` groups for one team result.

    Returns:
        The two teams' goal counts, in the order they appear on the line.

    Raises:
        ParseError: If either team result is malformed. The error always
            carries the whole line, not just the failing segment.
    """
    text = line.rstrip("\r\n")
    try:
        first, second = split_result_line(text, separator)
        result = (
            parse_team_result(first, pattern),
            parse_team_result(second, pattern),
        )
    except ParseError as e:
        raise ParseError(text, e.reason, line_number) from None

    logger.debug(
        f"Parsed line {line_number}: {result[0].name} {result[0].value}, "
        f"{result[1].name} {result[1].value}"
    )
    return result
