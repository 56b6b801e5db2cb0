"""Move validation and move application for Othello."""

from __future__ import annotations

from typing import Dict, List, Tuple

from .board import Board, Color, Point

# Fixed scan order; flips are applied direction by direction in this order.
DIRECTIONS: Tuple[Point, ...] = (
    (0, 1),
    (0, -1),
    (1, 1),
    (1, 0),
    (1, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)


def captures_in_direction(board: Board, point: Point, direction: Point, player: Color) -> bool:
    """Return ``True`` if a move at ``point`` captures a run along ``direction``.

    The walk starts at the neighbouring cell. The first cell must hold an
    opponent disc; after that the walk continues over opponent discs and
    succeeds only on reaching one of ``player``'s discs. An empty cell or the
    edge of the board ends the walk without a capture.
    """

    opponent = player.opponent
    x, y = point
    d_x, d_y = direction
    seen_opponent = False
    while True:
        x += d_x
        y += d_y
        if not board.is_within_bounds((x, y)):
            return False
        cell = board.get((x, y))
        if cell is opponent:
            seen_opponent = True
            continue
        if cell is player:
            return seen_opponent
        return False


def valid_directions(board: Board, point: Point, player: Color) -> List[Point]:
    """Return every direction in which a move at ``point`` captures."""

    return [
        direction
        for direction in DIRECTIONS
        if captures_in_direction(board, point, direction, player)
    ]


def is_valid_move(board: Board, point: Point, player: Color) -> bool:
    """Return ``True`` when ``player`` may place a disc at ``point``."""

    if board.get(point) is not Color.EMPTY:
        return False
    return bool(valid_directions(board, point, player))


def valid_moves(board: Board, player: Color) -> List[Point]:
    return [point for point in board.points() if is_valid_move(board, point, player)]


def player_has_any_move(board: Board, player: Color) -> bool:
    return any(is_valid_move(board, point, player) for point in board.points())


def apply_move(board: Board, point: Point, player: Color) -> List[Point]:
    """Place ``player``'s disc at ``point`` and flip every captured run.

    The move must already have been validated with :func:`is_valid_move`; the
    flipping walk relies on each valid direction ending in ``player``'s disc.
    Returns the flipped points in the order they were recolored.
    """

    directions = valid_directions(board, point, player)
    board.set(point, player)
    flipped: List[Point] = []
    for d_x, d_y in directions:
        x, y = point[0] + d_x, point[1] + d_y
        while board.get((x, y)) is not player:
            board.set((x, y), player)
            flipped.append((x, y))
            x += d_x
            y += d_y
    return flipped


def score(board: Board) -> Dict[Color, int]:
    return {Color.RED: board.count(Color.RED), Color.BLUE: board.count(Color.BLUE)}
