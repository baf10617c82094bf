from os import PathLike
from typing import Iterable, List, Optional, Tuple, Union

from loguru import logger

from league_table.calculation.aggregator import aggregate_match_points
from league_table.calculation.points import calculate_match_points
from league_table.calculation.ranker import rank_teams
from league_table.config.settings import StandingsSettings
from league_table.models.team_value import MatchPoints, RankedEntry
from league_table.parsing.line_parser import ParseError, parse_result_line

Standings = Tuple[RankedEntry, ...]


class StandingsPipeline:
    """Turns a results file into a ranked standings table."""

    def __init__(self, settings: Optional[StandingsSettings] = None):
        self.settings = settings or StandingsSettings()
        self._pattern = self.settings.compiled_pattern

    def run(self, path: Union[str, PathLike]) -> Standings:
        """Reads the results file at ``path`` and returns its standings.

        Raises:
            OSError: If the file cannot be opened or read, including when its
                contents are not valid in the configured encoding.
            ParseError: If any line is malformed. No partial table is returned.
        """
        logger.info(f"Computing standings from {path}")
        try:
            with open(path, encoding=self.settings.file_encoding) as results:
                return self.process_lines(results)
        except UnicodeDecodeError as e:
            logger.error(
                f"Results file {path} is not valid {self.settings.file_encoding}: {e}"
            )
            raise OSError(
                f"{path} is not valid {self.settings.file_encoding} text: {e.reason} "
                f"at byte {e.start}"
            ) from e
        except OSError as e:
            logger.error(f"Failed to read results file {path}: {e}")
            raise

    def process_lines(self, lines: Iterable[str]) -> Standings:
        """Computes standings from any iterable of result lines, e.g. an open file."""
        all_match_points: List[MatchPoints] = []
        matches = 0
        skipped = 0

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                if self.settings.skip_blank_lines:
                    skipped += 1
                    continue
                error = ParseError(line.rstrip("\r\n"), "blank line", line_number)
                logger.error(str(error))
                raise error

            try:
                team_a, team_b = parse_result_line(
                    line,
                    line_number,
                    separator=self.settings.result_separator,
                    pattern=self._pattern,
                )
            except ParseError as e:
                logger.error(str(e))
                raise

            all_match_points.extend(calculate_match_points(team_a, team_b))
            matches += 1

        if skipped:
            logger.debug(f"Skipped {skipped} blank line(s).")
        logger.info(f"Read {matches} match result(s).")

        standings = rank_teams(aggregate_match_points(all_match_points))
        logger.success(f"Standings computed for {len(standings)} teams.")
        return standings


def run_pipeline(
    path: Union[str, PathLike], settings: Optional[StandingsSettings] = None
) -> Standings:
    """Computes the standings for the results file at ``path``."""
    return StandingsPipeline(settings).run(path)
