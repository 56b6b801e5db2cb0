"""Top-level package for the Othello TUI game."""

__all__ = [
    "config",
    "board",
    "rules",
    "events",
    "game",
    "engine",
    "controller",
]
