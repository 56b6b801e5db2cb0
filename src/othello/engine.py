"""Engine context: owns one game and feeds it queued events one tick at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import Board, Color
from .config import DEFAULT_PRESET, EVENT_QUEUE_CAPACITY
from .events import DotClick, Event, EventQueue, Message
from .game import Game, MoveResult, Outcome

logger = logging.getLogger(__name__)

TextHook = Callable[[str], None]
GameOverHook = Callable[[Outcome], None]


def _ignore_text(text: str) -> None:
    return None


def _ignore_game_over(outcome: Outcome) -> None:
    return None


@dataclass
class Engine:
    """Everything one running game needs, passed around explicitly.

    The host pushes clicks with :meth:`click` and calls :meth:`advance` once
    per tick. Each tick pops the most recently queued event and dispatches
    it: clicks go to the :class:`~othello.game.Game`, messages become the
    displayed text and are forwarded to ``on_text``. ``on_game_over`` fires
    on the tick that dispatches the final summary message.
    """

    game: Game = field(default_factory=Game.new)
    queue: EventQueue = field(default_factory=lambda: EventQueue(EVENT_QUEUE_CAPACITY))
    on_text: TextHook = _ignore_text
    on_game_over: GameOverHook = _ignore_game_over
    text: str = ""
    last_message: Optional[Message] = None
    _final_message: Optional[Message] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.game.is_finished:
            self.send(self.game.opening_message())

    @classmethod
    def new(
        cls,
        preset: str = DEFAULT_PRESET,
        *,
        on_text: Optional[TextHook] = None,
        on_game_over: Optional[GameOverHook] = None,
        capacity: int = EVENT_QUEUE_CAPACITY,
    ) -> "Engine":
        engine = cls(
            game=Game.new(Board.from_preset(preset)),
            queue=EventQueue(capacity),
            on_text=on_text or _ignore_text,
            on_game_over=on_game_over or _ignore_game_over,
        )
        logger.info("new game from %r start position", preset)
        return engine

    # ------------------------------------------------------------------
    # Host-facing hooks
    # ------------------------------------------------------------------
    @property
    def board(self) -> Board:
        return self.game.board

    @property
    def pending(self) -> int:
        return len(self.queue)

    def get_cell(self, x: int, y: int) -> Color:
        return self.game.board.get((x, y))

    def click(self, x: int, y: int) -> None:
        """Queue a click at ``(x, y)`` on behalf of the player to move."""

        point = (x, y)
        if not self.game.board.is_within_bounds(point):
            raise ValueError(f"click at {point} is outside the board")
        self.queue.push(DotClick(point, self.game.current_player))

    def send_message(self, text: str, duration: int = 0) -> None:
        self.send(Message(text, duration))

    def send(self, event: Event) -> None:
        self.queue.push(event)

    # ------------------------------------------------------------------
    # Ticks
    # ------------------------------------------------------------------
    def advance(self) -> Optional[Event]:
        """Run one tick. Returns the dispatched event, or ``None`` if idle."""

        event = self.queue.pop()
        if event is None:
            return None
        logger.debug("dispatching %r", event)
        if isinstance(event, DotClick):
            self._handle_click(event)
        elif isinstance(event, Message):
            self._handle_message(event)
        else:
            raise TypeError(f"unknown event: {event!r}")
        return event

    def run_pending(self) -> int:
        """Advance until the queue is empty; return the number of ticks run."""

        ticks = 0
        while self.queue:
            self.advance()
            ticks += 1
        return ticks

    def reset(self, preset: str = DEFAULT_PRESET) -> None:
        self.queue.clear()
        self.game.reset(Board.from_preset(preset))
        self.last_message = None
        self._final_message = None
        self.send(self.game.opening_message())
        logger.info("game reset to %r start position", preset)

    def _handle_click(self, click: DotClick) -> Optional[MoveResult]:
        result = self.game.handle_click(click)
        if result is None:
            return None
        for message in result.messages:
            self.send(message)
        if result.outcome is not None:
            # The host hears about the end once the summary has been shown.
            self._final_message = result.messages[-1]
        return result

    def _handle_message(self, message: Message) -> None:
        # TODO: expire messages with a nonzero duration and restore the
        # previous persistent text.
        self.last_message = message
        self.text = message.text
        self.on_text(message.text)
        if message is self._final_message and self.game.outcome is not None:
            self._final_message = None
            self.on_game_over(self.game.outcome)
