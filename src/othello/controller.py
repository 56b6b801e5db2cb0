"""Controller responsible for interpreting user commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from .board import Point
from .config import BOARD_SIZE, DEFAULT_PRESET
from .engine import Engine


class Command:
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    CLICK = "click"
    RESET = "reset"


@dataclass
class Controller:
    """Translate symbolic commands into cursor moves and engine clicks."""

    engine: Engine
    preset: str = DEFAULT_PRESET
    cursor: Point = (BOARD_SIZE // 2 - 1, BOARD_SIZE // 2 - 1)

    def __post_init__(self) -> None:
        self._handlers: Dict[str, Callable[[], None]] = {
            Command.MOVE_UP: lambda: self.move_cursor(0, -1),
            Command.MOVE_DOWN: lambda: self.move_cursor(0, 1),
            Command.MOVE_LEFT: lambda: self.move_cursor(-1, 0),
            Command.MOVE_RIGHT: lambda: self.move_cursor(1, 0),
            Command.CLICK: self.click_at_cursor,
            Command.RESET: self.reset,
        }

    def handle_input(self, command: str) -> None:
        if self.engine.game.is_finished and command != Command.RESET:
            return

        handler = self._handlers.get(command)
        if handler is None:
            raise ValueError(f"unknown command: {command}")
        handler()

    def move_cursor(self, delta_x: int, delta_y: int) -> Point:
        x, y = self.cursor
        self.cursor = ((x + delta_x) % BOARD_SIZE, (y + delta_y) % BOARD_SIZE)
        return self.cursor

    def click_at_cursor(self) -> None:
        x, y = self.cursor
        self.engine.click(x, y)

    def reset(self) -> None:
        self.engine.reset(self.preset)
