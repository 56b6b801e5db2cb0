"""Configuration constants used across the Othello project."""

from __future__ import annotations

import logging
import os
from typing import Optional

BOARD_SIZE: int = 8
EMPTY_CELL: str = "·"
RED_DISC: str = "●"
BLUE_DISC: str = "○"

# Blue opens the game.
FIRST_PLAYER: str = "blue"

# Display hint attached to skip notices, measured in ticks. Not enforced.
SKIP_MESSAGE_DURATION: int = 3

EVENT_QUEUE_CAPACITY: int = 64
ACTION_LOG_CAPACITY: int = 16

DEFAULT_PRESET: str = "standard"

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL: str = os.environ.get("OTHELLO_LOG_LEVEL", "WARNING")
LOG_FILE: Optional[str] = os.environ.get("OTHELLO_LOG_FILE") or None


def configure_logging(level: Optional[str] = None, filename: Optional[str] = None) -> None:
    """Configure the root logger for the interactive game.

    ``level`` and ``filename`` default to ``OTHELLO_LOG_LEVEL`` and
    ``OTHELLO_LOG_FILE``. Without a file the records go to stderr.
    """

    resolved_level = (level or LOG_LEVEL).upper()
    numeric = logging.getLevelName(resolved_level)
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level: {resolved_level}")
    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        filename=filename or LOG_FILE,
    )
