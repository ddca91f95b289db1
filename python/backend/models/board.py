"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import StrEnum


class InvalidBoard(ValueError):
    """Raised when a tile grid does not describe a valid puzzle board."""


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides into it.
# UP   → tile below the blank moves up    → blank shifts down
# DOWN → tile above the blank moves down  → blank shifts up
# LEFT → tile right of the blank moves left  → blank shifts right
# RIGHT→ tile left of the blank moves right → blank shifts left
_TILE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

# Neighbor order: blank up, down, left, right.
_NEIGHBOR_ORDER = (Direction.DOWN, Direction.UP, Direction.RIGHT, Direction.LEFT)


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


@dataclass(frozen=True)
class Board:
    """An immutable sliding puzzle configuration.

    Tiles are stored as a tuple of row tuples. 0 represents the blank.
    Boards compare and hash by their tiles, so they can key the solver's
    frontier bookkeeping directly.
    """

    tiles: tuple[tuple[int, ...], ...]
    size: int = field(init=False)
    blank_pos: tuple[int, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not _is_sequence(self.tiles) or not all(
            _is_sequence(row) for row in self.tiles
        ):
            raise InvalidBoard(f"Tiles must be a grid of rows, got {self.tiles!r}.")
        tiles = tuple(tuple(row) for row in self.tiles)
        for row in tiles:
            for v in row:
                # bool is an int subclass but never a tile value.
                if not isinstance(v, int) or isinstance(v, bool):
                    raise InvalidBoard(f"Tiles must be integers, got {v!r}.")

        size = len(tiles)
        if size < 2:
            raise InvalidBoard(f"A board needs at least 2 rows, got {size}.")
        for r, row in enumerate(tiles):
            if len(row) != size:
                raise InvalidBoard(
                    f"Row {r} has {len(row)} tiles; expected {size} for a "
                    f"{size}×{size} board."
                )

        flat = [v for row in tiles for v in row]
        if sorted(flat) != list(range(size * size)):
            raise InvalidBoard(
                f"Tiles must be a permutation of 0..{size * size - 1}, "
                f"got {flat}."
            )

        blank = flat.index(0)
        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "blank_pos", divmod(blank, size))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidBoard(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls(tuple(tuple(flat[r * size : (r + 1) * size]) for r in range(size)))

    @classmethod
    def goal(cls, size: int = 3) -> Board:
        """Return the goal board: tiles in order, blank bottom-right."""
        return cls.from_flat(size, [*range(1, size * size), 0])

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def flat(self) -> tuple[int, ...]:
        return tuple(v for row in self.tiles for v in row)

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        last = self.size - 1
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if r == last and c == last:
                    return val == 0
                if val != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return divmod(val - 1, self.size) == (row, col)

    def heuristic(self) -> int:
        """Sum of the Manhattan distances of every tile to its goal cell.

        The blank is not counted, which keeps the estimate admissible.
        Tile ``v`` belongs at ``divmod(v - 1, n)``; ``v // n`` would put the
        last tile of each row one row too low and make the goal score nonzero.
        """
        n = self.size
        total = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                goal_r, goal_c = divmod(val - 1, n)
                total += abs(goal_r - r) + abs(goal_c - c)
        return total

    def is_solvable(self) -> bool:
        """Return True if the goal can be reached by legal slides.

        Odd widths are solvable iff the inversion count is even. For even
        widths the blank's row, counted from the bottom, joins the parity.
        """
        n = self.size
        seq = [v for v in self.flat() if v != 0]
        inversions = 0
        for i, a in enumerate(seq):
            for b in seq[i + 1 :]:
                if a > b:
                    inversions += 1
        if n % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = n - 1 - self.blank_pos[0]
        return (inversions + blank_row_from_bottom) % 2 == 0

    # -- moves ----------------------------------------------------------------

    def move(self, direction: Direction) -> Board | None:
        """Slide the tile in *direction* into the blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns the resulting board, or ``None`` if no tile can move that way.
        """
        br, bc = self.blank_pos
        dr, dc = _TILE_OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None

        grid = [list(row) for row in self.tiles]
        grid[br][bc], grid[tr][tc] = grid[tr][tc], grid[br][bc]
        return Board(tuple(tuple(row) for row in grid))

    def neighbors(self) -> Iterator[Board]:
        """Yield every board one slide away (blank up, down, left, right)."""
        for direction in _NEIGHBOR_ORDER:
            board = self.move(direction)
            if board is not None:
                yield board

    def direction_to(self, other: Board) -> Direction | None:
        """Return the move that turns this board into *other*, if any."""
        for direction in _NEIGHBOR_ORDER:
            if self.move(direction) == other:
                return direction
        return None

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(
            " ".join(f"{v:>{width}}" for v in row) for row in self.tiles
        )
