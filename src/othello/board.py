"""Board model and helper functions for Othello."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterator, List, Tuple

from .config import BLUE_DISC, BOARD_SIZE, EMPTY_CELL, RED_DISC

Point = Tuple[int, int]
Snapshot = Tuple[Tuple["Color", ...], ...]


class Color(Enum):
    EMPTY = "gray"
    RED = "red"
    BLUE = "blue"

    @property
    def is_player(self) -> bool:
        return self is not Color.EMPTY

    @property
    def opponent(self) -> "Color":
        if self is Color.EMPTY:
            raise ValueError("an empty cell has no opponent")
        return Color.BLUE if self is Color.RED else Color.RED

    @property
    def label(self) -> str:
        return self.name.title()

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS: Dict[Color, str] = {
    Color.EMPTY: EMPTY_CELL,
    Color.RED: RED_DISC,
    Color.BLUE: BLUE_DISC,
}

STANDARD_START: Tuple[Tuple[Point, Color], ...] = (
    ((3, 3), Color.RED),
    ((4, 4), Color.RED),
    ((3, 4), Color.BLUE),
    ((4, 3), Color.BLUE),
)


def point_label(point: Point) -> str:
    """Return the human label of ``point``, e.g. ``(2, 3)`` -> ``C4``."""

    x, y = point
    return f"{chr(ord('A') + x)}{y + 1}"


@dataclass
class Board:
    """Fixed-size 8x8 grid of cell colors addressed by ``(x, y)`` points."""

    grid: List[List[Color]] = field(init=False)

    def __post_init__(self) -> None:
        self.grid = [[Color.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]

    @classmethod
    def standard(cls) -> "Board":
        board = cls()
        board.setup_standard()
        return board

    @classmethod
    def from_preset(cls, name: str) -> "Board":
        board = cls()
        board.apply_preset(name)
        return board

    @property
    def size(self) -> int:
        return BOARD_SIZE

    # ---------------------------------------------------------------------
    # Query helpers
    # ---------------------------------------------------------------------
    def is_within_bounds(self, point: Point) -> bool:
        """Return ``True`` if the point lies inside the board."""

        x, y = point
        return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE

    def get(self, point: Point) -> Color:
        """Return the color at ``point``.

        Raises :class:`ValueError` when ``point`` is outside the board.
        """

        self._check_bounds(point)
        x, y = point
        return self.grid[y][x]

    def is_empty(self, point: Point) -> bool:
        return self.get(point) is Color.EMPTY

    def points(self) -> Iterator[Point]:
        """Iterate over every point, row by row."""

        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                yield (x, y)

    def count(self, color: Color) -> int:
        return sum(1 for row in self.grid for cell in row if cell is color)

    def snapshot(self) -> Snapshot:
        """Return an immutable copy of the grid, suitable for comparisons."""

        return tuple(tuple(row) for row in self.grid)

    def copy(self) -> "Board":
        clone = Board()
        clone.grid = [list(row) for row in self.grid]
        return clone

    # ---------------------------------------------------------------------
    # Mutation helpers
    # ---------------------------------------------------------------------
    def set(self, point: Point, color: Color) -> None:
        """Write ``color`` at ``point``.

        Raises :class:`ValueError` for points outside the board or values that
        are not a :class:`Color`.
        """

        if not isinstance(color, Color):
            raise ValueError(f"not a cell color: {color!r}")
        self._check_bounds(point)
        x, y = point
        self.grid[y][x] = color

    def clear(self) -> None:
        """Reset every cell to empty."""

        for row in self.grid:
            for x in range(BOARD_SIZE):
                row[x] = Color.EMPTY

    def setup_standard(self) -> None:
        """Clear the board and place the four center discs."""

        self.clear()
        for point, color in STANDARD_START:
            self.set(point, color)

    def apply_preset(self, name: str) -> None:
        """Set up the standard start, then apply the named start position."""

        try:
            preset = PRESETS[name]
        except KeyError:
            known = ", ".join(sorted(PRESETS))
            raise ValueError(f"unknown start position {name!r} (known: {known})") from None
        self.setup_standard()
        preset(self)

    def _check_bounds(self, point: Point) -> None:
        if not self.is_within_bounds(point):
            raise ValueError(f"point {point} is outside the {BOARD_SIZE}x{BOARD_SIZE} board")


# -------------------------------------------------------------------------
# Start positions
# -------------------------------------------------------------------------
def _standard(board: Board) -> None:
    return None


def _endgame(board: Board) -> None:
    # One empty corner; Blue closes the whole first column with it.
    for point in board.points():
        if point == (0, 0):
            board.set(point, Color.EMPTY)
        elif point == (0, BOARD_SIZE - 1):
            board.set(point, Color.BLUE)
        else:
            board.set(point, Color.RED)


def _skipped_turn(board: Board) -> None:
    for x in range(BOARD_SIZE):
        board.set((x, 3), Color.RED)
        board.set((x, 4), Color.EMPTY)
    board.set((7, 2), Color.BLUE)


PRESETS: Dict[str, Callable[[Board], None]] = {
    "standard": _standard,
    "endgame": _endgame,
    "skipped-turn": _skipped_turn,
}
