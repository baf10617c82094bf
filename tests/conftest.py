"""Shared fixtures for the standings tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SCENARIO_B_LINES = [
    "Lions 3, Snakes 3",
    "Tarantulas 1, FC Awesome 0",
    "Lions 1, FC Awesome 1",
    "Tarantulas 3, Snakes 1",
    "Lions 4, Grouches 0",
]


@pytest.fixture
def results_file(tmp_path: Path):
    """Writes the given lines to a results file and returns its path."""

    def _write(lines: list[str], name: str = "results.txt") -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_b_file(results_file) -> Path:
    return results_file(SCENARIO_B_LINES)
