"""Rendering helpers for the terminal UI."""

from __future__ import annotations

from typing import Iterable, List, Set

from ..board import Color, Point, point_label
from ..config import BOARD_SIZE
from ..controller import Controller
from ..engine import Engine
from .panels import ResultDialog, StatusBox, overlay, visible_width

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
FG_CYAN = "\033[36m"
FG_YELLOW = "\033[33m"
FG_RED = "\033[31m"
FG_MAGENTA = "\033[35m"
FG_BLUE = "\033[34m"
FG_WHITE = "\033[37m"

STATUS_BOX = StatusBox()
RESULT_DIALOG = ResultDialog()

CELL_SEP = " "
CURSOR_MARKER = "▣"
HINT_MARKER = "∙"
ROW_LABELS = [f"{y + 1:2d}" for y in range(BOARD_SIZE)]
COL_LABELS = [chr(ord("A") + x) for x in range(BOARD_SIZE)]

_DISC_COLORS = {Color.RED: FG_RED, Color.BLUE: FG_BLUE}


def render(engine: Engine, controller: Controller) -> str:
    lines: List[str] = []
    lines.extend(_render_hud(engine, controller))

    board_lines = [_render_header()] + list(_render_board(engine, controller.cursor))
    board_width = max(visible_width(line) for line in board_lines)
    log_lines = _render_action_log_panel(engine, len(board_lines))
    for board_line, log_line in zip(board_lines, log_lines):
        padding = " " * (board_width - visible_width(board_line))
        lines.append(f"{board_line}{padding}   {log_line}".rstrip())

    controls_line = _render_controls_line()
    lines.append(controls_line)

    body_width = max(visible_width(line) for line in lines)
    lines.extend(_render_status_box(engine, body_width - 2))

    outcome = engine.game.outcome
    if outcome is not None:
        dialog = RESULT_DIALOG.render(
            ["Game over", outcome.summary, "R: new game  Q: quit"],
            body_width,
            len(lines),
        )
        lines = overlay(lines, dialog)

    return "\n".join(lines)


def _render_hud(engine: Engine, controller: Controller) -> Iterable[str]:
    game = engine.game
    red = engine.board.count(Color.RED)
    blue = engine.board.count(Color.BLUE)
    status_text = (
        f"Turn: {_disc(game.current_player)} {game.current_player.label}"
        f" | {game.status_message()}"
        f" | Cursor: {point_label(controller.cursor)}"
    )
    last_move = "—"
    if game.last_move:
        last_move = (
            f"{game.last_move.player.label} {point_label(game.last_move.point)}"
            f" (+{len(game.last_move.flipped)})"
        )
    score_text = f"Red {red} : {blue} Blue | Last move: {last_move}"
    return [_color(status_text, BOLD, FG_CYAN), _color(score_text, FG_YELLOW)]


def _render_header() -> str:
    return "   " + CELL_SEP.join(COL_LABELS)


def _render_board(engine: Engine, cursor: Point) -> Iterable[str]:
    hints: Set[Point] = set(engine.game.valid_moves())
    for y in range(BOARD_SIZE):
        cells: List[str] = []
        for x in range(BOARD_SIZE):
            point = (x, y)
            color = engine.board.get(point)
            if point == cursor:
                cells.append(_render_cursor_cell(color))
            elif point in hints:
                cells.append(_color(HINT_MARKER, FG_MAGENTA, BOLD))
            else:
                cells.append(_disc(color))
        yield ROW_LABELS[y] + " " + CELL_SEP.join(cells)


def _render_action_log_panel(engine: Engine, height: int) -> List[str]:
    lines = [_color("Recent moves", BOLD, FG_MAGENTA)]
    entries = engine.game.action_log[-(height - 1):] if height > 1 else []
    if entries:
        lines.extend(_color(entry, FG_WHITE) for entry in reversed(entries))
    else:
        lines.append(_color("—", FG_WHITE, DIM))
    lines.extend([""] * (height - len(lines)))
    return lines[:height]


def _render_controls_line() -> str:
    return _color("Keys: W/A/S/D or arrows move | Space click | R new game | Q quit", FG_CYAN)


def _render_status_box(engine: Engine, width: int) -> List[str]:
    box_lines = STATUS_BOX.render([engine.text], width)
    colored: List[str] = []
    for idx, line in enumerate(box_lines):
        if idx == 0 or idx == len(box_lines) - 1:
            colored.append(_color(line, FG_WHITE, BOLD))
        else:
            colored.append(_color(line, FG_YELLOW))
    return colored


def _render_cursor_cell(color: Color) -> str:
    if color is Color.EMPTY:
        return _color(CURSOR_MARKER, FG_CYAN, BOLD)
    return _color(color.glyph, FG_CYAN, BOLD)


def _disc(color: Color) -> str:
    code = _DISC_COLORS.get(color)
    if code is None:
        return color.glyph
    return _color(color.glyph, code, BOLD)


def _color(text: str, *codes: str) -> str:
    if not codes:
        return text
    return f"{''.join(codes)}{text}{RESET}"
