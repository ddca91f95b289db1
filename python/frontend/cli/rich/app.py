"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library to show the solver's path as a strip of styled
boards, sharing the same backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import Solver
from backend.models.board import Board, Direction

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, moved: int | None = None) -> Table:
    """Return a Rich Table of the grid; *moved* is shown reversed in yellow."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif val == moved:
                cells.append(f"[bold reverse yellow]{val:>{width}}[/bold reverse yellow]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _step(index: int, direction: Direction, before: Board, after: Board) -> Group:
    tile = after.get_tile(*before.blank_pos)
    title = Text(f"{index}. {direction.value} ", style="bold cyan", justify="center")
    title.append(f"({tile})", style="yellow")
    return Group(title, _render_board(after, tile))


# -- entry point --------------------------------------------------------------


def run(solver: Solver) -> None:
    """Print the initial board and the solution path."""
    initial = solver.initial_state.board
    size = initial.size

    stats = Text()
    stats.append("  Manhattan: ", style="dim")
    stats.append(str(initial.heuristic()), style="bold yellow")
    stats.append("    Solvable: ", style="dim")
    stats.append(
        "yes" if solver.is_solvable() else "no",
        style="bold green" if solver.is_solvable() else "bold red",
    )

    panel = Panel(
        Group(Align.center(_render_board(initial)), Text(""), Align.center(stats)),
        title=f"[bold cyan]Initial board  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))

    if not solver.is_solvable():
        console.print("[red]No solution: the board is unsolvable.[/red]")
        return

    boards = solver.solution() or []
    directions = solver.directions() or []
    steps = [
        _step(i, direction, before, after)
        for i, (direction, before, after) in enumerate(
            zip(directions, boards, boards[1:]), 1
        )
    ]
    if steps:
        console.print(Columns(steps, padding=(1, 2)))

    console.print(
        f"[bold green]Solved in {solver.min_moves} moves[/bold green] "
        f"[dim]({solver.expanded} states expanded)[/dim]"
    )
