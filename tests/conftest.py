from __future__ import annotations

from typing import Callable, Dict

import pytest

from othello.board import Board, Color, Point

BoardFactory = Callable[[Dict[Point, Color]], Board]


@pytest.fixture()
def standard_board() -> Board:
    return Board.standard()


@pytest.fixture()
def make_board() -> BoardFactory:
    """Build an otherwise empty board holding the given discs."""

    def _make(cells: Dict[Point, Color]) -> Board:
        board = Board()
        for point, color in cells.items():
            board.set(point, color)
        return board

    return _make


@pytest.fixture()
def tie_board() -> Board:
    """Full board but (0, 0); Blue taking it captures the first column for 32:32."""

    board = Board()
    for x, y in board.points():
        board.set((x, y), Color.BLUE if 1 <= x <= 3 else Color.RED)
    board.set((0, 0), Color.EMPTY)
    board.set((0, 7), Color.BLUE)
    return board
