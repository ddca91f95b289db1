"""Command-line entry point."""

from __future__ import annotations

import sys

import pytest
from loguru import logger
from typer.testing import CliRunner

from backend.models.board import Board
from frontend.cli.vanilla.app import _render_board
from main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_solves_given_tiles() -> None:
    result = runner.invoke(app, ["-t", "1,2,3,4,5,6,0,7,8"])
    assert result.exit_code == 0, result.output
    assert "Move 1: left" in result.output
    assert "Move 2: left" in result.output
    assert "Solved in 2 moves" in result.output


def test_already_solved_tiles() -> None:
    result = runner.invoke(app, ["--tiles", "1 2 3 4 5 6 7 8 0"])
    assert result.exit_code == 0, result.output
    assert "Solved in 0 moves" in result.output


def test_unsolvable_exit_code() -> None:
    result = runner.invoke(app, ["-t", "1,2,3,4,5,6,8,7,0"])
    assert result.exit_code == 1
    assert "unsolvable" in result.output


@pytest.mark.parametrize(
    "tiles",
    ["1,2,3", "1,2,3,4,5,6,7,8,8", "a,b,c,d", ""],
    ids=["not-square", "duplicate", "non-integer", "empty"],
)
def test_invalid_tiles(tiles: str) -> None:
    result = runner.invoke(app, ["-t", tiles])
    assert result.exit_code == 2


def test_requires_a_board() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 2


def test_random_board() -> None:
    result = runner.invoke(app, ["-r", "--seed", "3", "--shuffles", "15"])
    assert result.exit_code == 0, result.output
    assert "Solved in" in result.output


def test_rich_frontend() -> None:
    result = runner.invoke(app, ["-t", "1,2,3,4,5,6,0,7,8", "-f", "rich"])
    assert result.exit_code == 0, result.output
    assert "Solved in 2 moves" in result.output


def test_rich_frontend_unsolvable() -> None:
    result = runner.invoke(app, ["-t", "1,2,3,4,5,6,8,7,0", "-f", "rich"])
    assert result.exit_code == 1
    assert "unsolvable" in result.output


def test_gives_up_past_expansion_budget() -> None:
    result = runner.invoke(app, ["-t", "2,3,1,4,5,0,8,6,7", "--max-expansions", "1"])
    assert result.exit_code == 3
    assert "Search cancelled" in result.output
    assert "--max-expansions" in result.output


@pytest.mark.timeout(20)
def test_deep_four_by_four_stops_within_budget() -> None:
    result = runner.invoke(
        app, ["-r", "-s", "4", "--seed", "1", "--max-expansions", "200"]
    )
    assert result.exit_code == 3


def test_budget_large_enough_still_solves() -> None:
    result = runner.invoke(app, ["-t", "2,3,1,4,5,0,8,6,7", "--max-expansions", "100000"])
    assert result.exit_code == 0, result.output
    assert "Solved in" in result.output


def test_marks_the_moved_tile() -> None:
    board = Board([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    rendered = _render_board(board, moved=7, color=False)
    assert "[7]" in rendered
    assert " 8 " in rendered
    assert "\033" not in rendered

    result = runner.invoke(app, ["-t", "1,2,3,4,5,6,0,7,8"])
    assert "Move 1: left (tile 7, h=1)" in result.output
    assert "Move 2: left (tile 8, h=0)" in result.output
