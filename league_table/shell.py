import time
from pathlib import Path
from typing import Callable, Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from league_table.config.settings import StandingsSettings
from league_table.parsing.line_parser import ParseError
from league_table.pipeline import Standings, StandingsPipeline
from league_table.utils.misc_utils import boolean_from_string, format_ranked_entry

PromptFunc = Callable[[str], str]


class StandingsShell:
    """Interactive loop that asks for results files and prints their standings."""

    def __init__(
        self,
        settings: Optional[StandingsSettings] = None,
        console: Optional[Console] = None,
        prompt: Optional[PromptFunc] = None,
        wait: Callable[[float], None] = time.sleep,
    ):
        self.settings = settings or StandingsSettings()
        self.console = console or Console()
        self.prompt = prompt or (lambda text: Prompt.ask(text, console=self.console))
        self.wait = wait
        self.pipeline = StandingsPipeline(self.settings)

    def run(self) -> None:
        """Runs the loop until the user declines to process another file."""
        self.console.print(
            Panel("League standings calculator", subtitle="Ctrl+C to quit")
        )
        try:
            while True:
                path = self.ask_for_path()
                self.process_file(path)
                answer = self.prompt(
                    "Would you like to process another file? (yes/no)"
                )
                if not boolean_from_string(answer):
                    break
        except (KeyboardInterrupt, EOFError):
            logger.info("Shell interrupted by user.")
            self.console.print()

        self.console.print("Goodbye!")

    def ask_for_path(self) -> Path:
        """Prompts until the user names an existing file."""
        while True:
            path = Path(self.prompt("Path to the results file").strip()).expanduser()
            if path.is_file():
                return path
            self.console.print(f"[red]No file found at {escape(str(path))}[/red]")

    def process_file(self, path: Path) -> Optional[Standings]:
        """Computes and prints the standings, reporting failures to the user."""
        try:
            standings = self.pipeline.run(path)
        except ParseError as e:
            self.console.print(f"[red]Invalid results file:[/red] {escape(str(e))}")
            return None
        except OSError as e:
            self.console.print(
                f"[red]Could not read {escape(str(path))}:[/red] {escape(str(e))}"
            )
            return None

        self.print_standings(standings)
        return standings

    def print_standings(self, standings: Standings) -> None:
        if not standings:
            self.console.print("No match results found.")
            return

        for entry in standings:
            self.console.print(escape(format_ranked_entry(entry)))
            if self.settings.output_delay_seconds:
                self.wait(self.settings.output_delay_seconds)
