"""A* sliding puzzle solver using the Manhattan-distance heuristic."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field

from loguru import logger

from backend.models.board import Board, Direction

log = logger.bind(component="solver")


class SearchExhausted(RuntimeError):
    """The frontier emptied before reaching the goal of a solvable board."""


class SearchCancelled(RuntimeError):
    """The caller's ``should_stop`` hook asked the search to stop."""


@dataclass(frozen=True, eq=False)
class State:
    """A board reached during search, with its path cost and predecessor.

    States are equal when their boards are equal; ``moves`` and ``cost``
    are bookkeeping only.
    """

    board: Board
    moves: int
    parent: State | None = None
    cost: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cost", self.board.heuristic() + self.moves)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.board == other.board

    def __hash__(self) -> int:
        return hash(self.board)

    def path(self) -> list[Board]:
        """Boards from the root state to this one, in forward order."""
        boards: list[Board] = []
        state: State | None = self
        while state is not None:
            boards.append(state.board)
            state = state.parent
        boards.reverse()
        return boards


@dataclass(frozen=True)
class Solution:
    boards: tuple[Board, ...]
    moves: int

    @property
    def directions(self) -> list[Direction]:
        """Tile moves that replay the solution from the first board."""
        return [
            a.direction_to(b)
            for a, b in zip(self.boards, self.boards[1:])
        ]


class Solver:
    """Finds a shortest solution for one board.

    The search runs as soon as the solver is constructed; results are then
    available through :meth:`solution`, :attr:`min_moves` and friends.
    """

    def __init__(
        self,
        initial: Board,
        *,
        should_stop: Callable[[], bool] | None = None,
    ) -> None:
        self.initial_state = State(initial, 0)
        self.min_moves: int = -1
        self.expanded: int = 0
        self._should_stop = should_stop
        self._solvable: bool | None = None
        self.result: Solution | None = self._search()

    # -- queries --------------------------------------------------------------

    def is_solvable(self) -> bool:
        if self._solvable is None:
            self._solvable = self.initial_state.board.is_solvable()
        return self._solvable

    def solution(self) -> list[Board] | None:
        """Return the boards of a shortest solution, or ``None`` if unsolvable."""
        if self.result is None:
            return None
        return list(self.result.boards)

    def directions(self) -> list[Direction] | None:
        if self.result is None:
            return None
        return self.result.directions

    def hint(self) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        moves = self.directions()
        return moves[0] if moves else None

    # -- search ---------------------------------------------------------------

    def _search(self) -> Solution | None:
        root = self.initial_state
        if not self.is_solvable():
            log.info("Board is unsolvable:\n{}", root.board)
            return None
        if root.board.is_goal():
            return self._finish(root)

        log.debug("Starting A* from h={}", root.cost)

        # Heap entries are (cost, insertion order, state); the counter keeps
        # ties in FIFO order and stops heapq from comparing states.
        counter = itertools.count()
        open_heap: list[tuple[int, int, State]] = [(root.cost, next(counter), root)]
        best_cost: dict[Board, int] = {root.board: root.cost}
        closed: set[Board] = set()

        while open_heap:
            if self._should_stop is not None and self._should_stop():
                log.debug("Search cancelled after {} expansions", self.expanded)
                raise SearchCancelled(
                    f"Search cancelled after {self.expanded} expansions."
                )

            _, _, q = heapq.heappop(open_heap)
            if q.board in closed:
                continue
            self.expanded += 1

            for board in q.board.neighbors():
                u = State(board, q.moves + 1, q)
                if board.is_goal():
                    return self._finish(u)

                known = best_cost.get(board)
                if known is not None and known <= u.cost:
                    continue
                best_cost[board] = u.cost
                heapq.heappush(open_heap, (u.cost, next(counter), u))

            closed.add(q.board)

        log.error(
            "Frontier exhausted after {} expansions on a solvable board:\n{}",
            self.expanded,
            root.board,
        )
        raise SearchExhausted(
            "A* exhausted the frontier without reaching the goal of a "
            "solvable board."
        )

    def _finish(self, state: State) -> Solution:
        self.min_moves = state.moves
        log.debug(
            "Solved in {} moves ({} states expanded)", state.moves, self.expanded
        )
        return Solution(boards=tuple(state.path()), moves=state.moves)


def solve(board: Board) -> Solution | None:
    """Return a shortest solution for *board*, or ``None`` if unsolvable."""
    return Solver(board).result
