"""Vanilla terminal frontend — no third-party dependencies.

Prints the solver's path board by board using plain text and ANSI codes.
Each step brackets the tile that just slid into the old blank.
"""

from __future__ import annotations

from backend.engine.gamesolver import Solver
from backend.models.board import Board


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _paint(text: str, code: str, color: bool) -> str:
    return f"{code}{text}{_R}" if color else text


# -- board rendering ----------------------------------------------------------


def _moved_tile(before: Board, after: Board) -> int:
    """The tile that slid: it now sits where the blank used to be."""
    return after.get_tile(*before.blank_pos)


def _render_board(board: Board, moved: int | None = None, color: bool = True) -> str:
    """Return a boxed text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    sep = "+" + ("-" * (width + 2) + "+") * board.size

    lines: list[str] = [sep]
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(_paint(f" {'·':>{width}} ", _DIM, color))
            elif val == moved:
                cells.append(_paint(f"[{val:>{width}}]", _Y, color))
            elif board.is_tile_correct(r, c):
                cells.append(_paint(f" {val:>{width}} ", _G, color))
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- entry point --------------------------------------------------------------


def run(solver: Solver, color: bool = True) -> None:
    """Print the initial board and every step of the solution."""
    initial = solver.initial_state.board
    print(f"\n  Initial board ({initial.size}x{initial.size}):")
    print(_render_board(initial, color=color))
    print(f"  Manhattan distance: {initial.heuristic()}")

    if not solver.is_solvable():
        print("\n  No solution: the board is unsolvable.\n")
        return

    boards = solver.solution() or []
    directions = solver.directions() or []
    for i, (direction, before, after) in enumerate(
        zip(directions, boards, boards[1:]), 1
    ):
        tile = _moved_tile(before, after)
        print(f"\n  Move {i}: {direction.value} (tile {tile}, h={after.heuristic()})")
        print(_render_board(after, tile, color))

    print(
        f"\n  Solved in {solver.min_moves} moves "
        f"({solver.expanded} states expanded).\n"
    )
