"""Bordered panels for the terminal UI: the status box and the result dialog."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")


def visible_width(text: str) -> int:
    return len(ANSI_ESCAPE_RE.sub("", text))


def fit(text: str, width: int) -> str:
    """Truncate or pad plain ``text`` to exactly ``width`` columns."""

    if width <= 0:
        return ""
    return text[:width].ljust(width)


@dataclass
class StatusBox:
    """Render a fixed-height bordered panel of text lines."""

    height: int = 1
    min_width: int = 20

    def __post_init__(self) -> None:
        if self.height < 1:
            raise ValueError("status box height must be positive")

    def render(self, lines: Iterable[str], width: int) -> List[str]:
        inner_width = max(self.min_width, width)
        body = [fit(str(line or ""), inner_width) for line in lines][: self.height]
        while len(body) < self.height:
            body.append(fit("", inner_width))
        top = "┌" + "─" * inner_width + "┐"
        bottom = "└" + "─" * inner_width + "┘"
        return [top, *(f"│{line}│" for line in body), bottom]


@dataclass
class ResultDialog:
    """A framed box centred over the board once the game has ended."""

    width: int = 32

    def render(self, lines: Iterable[str], screen_width: int, screen_height: int) -> List[str]:
        content = [str(line).strip() for line in lines] or ["Game over"]
        longest = max(len(line) for line in content)
        box_width = max(4, min(self.width, longest + 4))
        inner_width = box_width - 4

        framed = ["┌" + "─" * (box_width - 2) + "┐"]
        framed.extend(f"│ {fit(line, inner_width)} │" for line in content)
        framed.append("└" + "─" * (box_width - 2) + "┘")

        top_padding = max((screen_height - len(framed)) // 2, 0)
        side_padding = max((screen_width - box_width) // 2, 0)
        placed = [""] * top_padding
        placed.extend(" " * side_padding + line for line in framed)
        return placed[:screen_height]


def overlay(base_lines: List[str], overlay_lines: List[str]) -> List[str]:
    """Replace base lines with the non-blank overlay lines at the same index."""

    combined: List[str] = []
    for idx, base in enumerate(base_lines):
        top = overlay_lines[idx] if idx < len(overlay_lines) else ""
        combined.append(top if top.strip() else base)
    return combined
