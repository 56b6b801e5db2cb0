"""Keyboard input for the terminal UI."""

from __future__ import annotations

from typing import Dict, Optional

import readchar

from ..controller import Command

QUIT = "quit"

KEY_COMMANDS: Dict[str, str] = {
    "w": Command.MOVE_UP,
    "s": Command.MOVE_DOWN,
    "a": Command.MOVE_LEFT,
    "d": Command.MOVE_RIGHT,
    readchar.key.UP: Command.MOVE_UP,
    readchar.key.DOWN: Command.MOVE_DOWN,
    readchar.key.LEFT: Command.MOVE_LEFT,
    readchar.key.RIGHT: Command.MOVE_RIGHT,
    " ": Command.CLICK,
    readchar.key.ENTER: Command.CLICK,
    "r": Command.RESET,
    "q": QUIT,
}


def get_key() -> str:
    """Block until the player presses a key and return it."""

    return readchar.readkey()


def command_for_key(key: Optional[str]) -> Optional[str]:
    if not key:
        return None
    command = KEY_COMMANDS.get(key)
    if command is None and len(key) == 1:
        command = KEY_COMMANDS.get(key.lower())
    return command
