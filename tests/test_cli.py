"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

from league_table.cli import EXIT_IO_ERROR, EXIT_OK, EXIT_PARSE_ERROR, main


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger.remove()


def test_prints_standings_for_path(
    scenario_b_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main([str(scenario_b_file)]) == EXIT_OK

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "1. Tarantulas, 6 pts",
        "2. Lions, 5 pts",
        "3. FC Awesome, 1 pt",
        "3. Snakes, 1 pt",
        "5. Grouches, 0 pts",
    ]


def test_parse_error_exit_code(
    results_file, capsys: pytest.CaptureFixture[str]
) -> None:
    path = results_file(["Lions three, Snakes 3"])

    assert main([str(path)]) == EXIT_PARSE_ERROR
    assert "Invalid results file" in capsys.readouterr().out


def test_missing_file_exit_code(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.txt"), "--log-level", "critical"]) == (
        EXIT_IO_ERROR
    )


def test_undecodable_file_exit_code(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"Lions 3, Sn\xffakes 3\n")

    assert main([str(path), "--log-level", "critical"]) == EXIT_IO_ERROR
