# league_table/utils/misc_utils.py
from league_table.models.team_value import RankedEntry

TRUTHY_ANSWERS = {"y", "yes"}


def boolean_from_string(answer: str) -> bool:
    """True for 'y' or 'yes' in any case, False for anything else."""
    return answer.strip().lower() in TRUTHY_ANSWERS


def format_ranked_entry(entry: RankedEntry) -> str:
    """Formats a standings row, e.g. '1. Tarantulas, 6 pts'."""
    return f"{entry.rank}. {entry.name}, {entry.value} {entry.points_label}"
