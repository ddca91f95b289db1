#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py -t 1,2,3,4,0,6,7,5,8      # solve a given 3×3 board
    python main.py -r --seed 7 -f rich       # solve a random board, Rich output
    python main.py -r -s 4 --shuffles 40 -v  # random 4×4, debug logging
"""

import importlib
import math
import random
import sys
import time
from enum import StrEnum
from pathlib import Path
from typing import Callable, Optional

import typer
from loguru import logger

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import SearchCancelled, Solver  # noqa: E402
from backend.models.board import Board, InvalidBoard  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _format(record) -> str:
    component = record["extra"].get("component", "cli")
    return (
        "{time:HH:mm:ss} | <level>{level:<7}</level> | "
        f"<cyan>{component:<10}</cyan> | "
        "<level>{message}</level>\n{exception}"
    )


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING", format=_format)


def _parse_tiles(raw: str) -> Board:
    try:
        flat = [int(v) for v in raw.replace(" ", ",").split(",") if v]
    except ValueError:
        raise typer.BadParameter(
            f"Tiles must be comma-separated integers, got {raw!r}.",
            param_hint="'--tiles'",
        )
    size = math.isqrt(len(flat))
    try:
        return Board.from_flat(size, flat)
    except InvalidBoard as exc:
        raise typer.BadParameter(str(exc), param_hint="'--tiles'")


def _search_budget(max_expansions: int, timeout: float) -> Callable[[], bool]:
    """Return a ``should_stop`` hook that trips on either limit."""
    deadline = time.monotonic() + timeout
    polls = 0

    def should_stop() -> bool:
        nonlocal polls
        polls += 1
        return polls > max_expansions or time.monotonic() > deadline

    return should_stop


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    tiles: Optional[str] = typer.Option(
        None, "-t", "--tiles",
        help="Row-major tiles, 0 for the blank (e.g. 1,2,3,4,0,6,7,5,8).",
    ),
    random_board: bool = typer.Option(
        False, "-r", "--random",
        help="Solve a random solvable board instead of --tiles.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=5,
        help="Grid size for --random (2-5).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --random.",
    ),
    shuffles: Optional[int] = typer.Option(
        None, "--shuffles",
        min=1,
        help="Random slides for --random (default 100 × size²).",
    ),
    max_expansions: int = typer.Option(
        200_000, "--max-expansions",
        min=1,
        help="Give up after this many search steps.",
    ),
    timeout: float = typer.Option(
        30.0, "--timeout",
        min=0.0,
        help="Give up after this many seconds of search.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve a sliding puzzle with A* and print the shortest path."""
    _configure_logging(verbose)

    if random_board:
        board = GameGenerator.generate(size, shuffles, random.Random(seed))
    elif tiles is not None:
        board = _parse_tiles(tiles)
    else:
        raise typer.BadParameter(
            "Pass --tiles or --random.", param_hint="'--tiles'"
        )

    try:
        solver = Solver(board, should_stop=_search_budget(max_expansions, timeout))
    except SearchCancelled as exc:
        logger.bind(component="cli").warning("Gave up on board:\n{}", board)
        typer.echo(f"  No answer: {exc} Raise --max-expansions or --timeout.", err=True)
        raise typer.Exit(code=3)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(solver)

    if not solver.is_solvable():
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
