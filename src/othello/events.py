"""Events exchanged between the host and the engine, and the queue holding them."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional, Union

from .board import Color, Point
from .config import EVENT_QUEUE_CAPACITY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DotClick:
    """A player's attempt to place a disc at ``point``."""

    point: Point
    player: Color


@dataclass(frozen=True)
class Message:
    """Text for the host to display.

    ``duration`` of 0 means the text stays until replaced. Other values are a
    hint for transient display and are not acted on by the engine.
    """

    text: str
    duration: int = 0


Event = Union[DotClick, Message]


@dataclass
class EventQueue:
    """Bounded last-in-first-out queue of pending events.

    When full, pushing discards the oldest pending event.
    """

    capacity: int = EVENT_QUEUE_CAPACITY
    _items: Deque[Event] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("event queue capacity must be positive")
        self._items = deque(maxlen=self.capacity)

    def push(self, event: Event) -> None:
        if len(self._items) == self.capacity:
            logger.warning("event queue full, dropping oldest event %r", self._items[0])
        self._items.append(event)

    def pop(self) -> Optional[Event]:
        """Remove and return the most recently pushed event, or ``None``."""

        if not self._items:
            return None
        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
