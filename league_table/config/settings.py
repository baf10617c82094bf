import logging
import re

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEAM_RESULT_PATTERN = r"^(?P<name>[a-zA-Z\s]+)(?P<goals>[0-9]+)$"
VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class StandingsSettings(BaseSettings):
    """Settings loaded from LEAGUE_TABLE_* environment variables or a .env file."""

    # Parsing Configuration
    result_separator: str = Field(
        ", ", min_length=1, description="Separator between the two team results."
    )
    team_result_pattern: str = Field(
        DEFAULT_TEAM_RESULT_PATTERN,
        description="Regex with 'name' and 'goals' groups matching one team result.",
    )
    file_encoding: str = Field("utf-8", description="Encoding of the results file.")
    skip_blank_lines: bool = Field(
        True, description="Skip whitespace-only lines instead of rejecting them."
    )

    # Shell Configuration
    output_delay_seconds: float = Field(
        0.0,
        ge=0,
        description="Pause after each line the interactive shell prints.",
    )

    # Logging Configuration
    log_level: str = Field(
        "WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_prefix="LEAGUE_TABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("team_result_pattern")
    @classmethod
    def pattern_has_groups(cls, pattern: str) -> str:
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise ValueError(f"invalid team result pattern: {e}") from e
        missing = {"name", "goals"} - set(compiled.groupindex)
        if missing:
            raise ValueError(
                f"team result pattern is missing group(s): {', '.join(sorted(missing))}"
            )
        return pattern

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, level: str) -> str:
        level_upper = level.upper()
        if level_upper not in VALID_LOG_LEVELS:
            logging.warning(f"Invalid LOG_LEVEL '{level}' configured. Using WARNING.")
            return "WARNING"
        return level_upper

    @property
    def compiled_pattern(self) -> re.Pattern:
        return re.compile(self.team_result_pattern)


def load_settings(**overrides) -> StandingsSettings:
    """Loads and validates application settings.

    Keyword overrides take precedence over the environment and .env file.
    """
    try:
        return StandingsSettings(**overrides)
    except ValidationError as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")
