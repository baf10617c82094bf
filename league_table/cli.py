import argparse
import sys
from typing import List, Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape

from league_table.config.settings import load_settings
from league_table.logging.setup import setup_logging
from league_table.parsing.line_parser import ParseError
from league_table.pipeline import StandingsPipeline
from league_table.shell import StandingsShell
from league_table.utils.misc_utils import format_ranked_entry

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_IO_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="league-table",
        description="Compute a league standings table from a match results file.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Results file to process once. Omit to start the interactive shell.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured logging level.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    overrides = {"log_level": args.log_level} if args.log_level else {}
    settings = load_settings(**overrides)
    setup_logging(settings)

    console = Console()
    if args.path is None:
        StandingsShell(settings, console=console).run()
        return EXIT_OK

    try:
        standings = StandingsPipeline(settings).run(args.path)
    except ParseError as e:
        console.print(f"[red]Invalid results file:[/red] {escape(str(e))}")
        return EXIT_PARSE_ERROR
    except OSError as e:
        console.print(
            f"[red]Could not read {escape(args.path)}:[/red] {escape(str(e))}"
        )
        return EXIT_IO_ERROR

    for entry in standings:
        console.print(format_ranked_entry(entry), markup=False)
    return EXIT_OK


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
