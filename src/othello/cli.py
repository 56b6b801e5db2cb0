"""Command-line entry point for the Othello TUI game."""

from __future__ import annotations

import logging
import time

from .board import PRESETS
from .config import DEFAULT_PRESET, configure_logging
from .controller import Controller
from .engine import Engine
from .ui import input as input_mod
from .ui.renderer import render

logger = logging.getLogger(__name__)


def main() -> None:  # pragma: no cover - interactive loop
    """Launch the interactive Othello game."""

    configure_logging()
    preset = _prompt_start_position()

    engine = Engine.new(preset)
    controller = Controller(engine, preset=preset)

    while True:
        # Let every pending event through before waiting on the keyboard.
        engine.run_pending()
        print("\033[H\033[J", end="")  # Clear terminal
        print(render(engine, controller))

        key = input_mod.get_key()
        command = input_mod.command_for_key(key)
        if command == input_mod.QUIT:
            return
        if command:
            try:
                controller.handle_input(command)
            except ValueError as exc:
                logger.warning("command %r failed: %s", command, exc)
                engine.send_message(str(exc))
        engine.advance()
        time.sleep(0.01)


def _prompt_start_position() -> str:  # pragma: no cover - interactive prompt
    names = list(PRESETS)
    print("Choose a start position:")
    for index, name in enumerate(names, start=1):
        print(f"  {index}. {name}")

    while True:
        try:
            choice = input(f"Number or name [{DEFAULT_PRESET}]: ").strip().lower()
        except EOFError:  # pragma: no cover - non-interactive fallback
            choice = ""
        if not choice:
            return DEFAULT_PRESET
        if choice.isdigit() and 1 <= int(choice) <= len(names):
            return names[int(choice) - 1]
        if choice in PRESETS:
            return choice
        print("Unknown start position, try again.")


if __name__ == "__main__":  # pragma: no cover
    main()
