"""Turn controller for Othello: whose move it is, skips and the final result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from . import rules
from .board import Board, Color, Point, point_label
from .config import ACTION_LOG_CAPACITY, FIRST_PLAYER, SKIP_MESSAGE_DURATION
from .events import DotClick, Message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """Final piece counts. ``winner`` is ``None`` on a tie."""

    winner: Optional[Color]
    red: int
    blue: int

    @classmethod
    def from_board(cls, board: Board) -> "Outcome":
        red = board.count(Color.RED)
        blue = board.count(Color.BLUE)
        if red == blue:
            winner = None
        elif red > blue:
            winner = Color.RED
        else:
            winner = Color.BLUE
        return cls(winner=winner, red=red, blue=blue)

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    @property
    def summary(self) -> str:
        if self.winner is None:
            return "It's a tie!"
        if self.winner is Color.RED:
            return f"Red wins {self.red}:{self.blue}!"
        return f"Blue wins {self.blue}:{self.red}!"


@dataclass(frozen=True)
class AwaitingMove:
    turn: Color


@dataclass(frozen=True)
class Finished:
    outcome: Outcome


State = Union[AwaitingMove, Finished]


@dataclass
class MoveResult:
    point: Point
    player: Color
    flipped: List[Point]
    skipped: Optional[Color]
    outcome: Optional[Outcome]
    messages: List[Message]


def turn_message(player: Color) -> Message:
    return Message(f"{player.label}'s turn")


def skip_message(player: Color) -> Message:
    return Message(
        f"{player.label} has no valid moves, skipping turn",
        SKIP_MESSAGE_DURATION,
    )


@dataclass
class Game:
    """State machine for a two-player Othello match.

    The game is either awaiting a move from one color or finished. Clicks that
    are not legal for the player whose turn it is are ignored without any
    side effect.
    """

    board: Board = field(default_factory=Board.standard)
    state: State = field(default_factory=lambda: AwaitingMove(Color(FIRST_PLAYER)))
    last_move: Optional[MoveResult] = None
    moves_played: int = 0
    action_log: List[str] = field(default_factory=list)
    _log_capacity: int = ACTION_LOG_CAPACITY

    def __post_init__(self) -> None:
        if isinstance(self.state, AwaitingMove) and not self.state.turn.is_player:
            raise ValueError("the turn must belong to a player color")

    @classmethod
    def new(cls, board: Optional[Board] = None) -> "Game":
        return cls(board=board if board is not None else Board.standard())

    # ------------------------------------------------------------------
    # Status helpers
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return isinstance(self.state, Finished)

    @property
    def current_player(self) -> Color:
        """The player to move, or the last mover once the game is finished."""

        if isinstance(self.state, AwaitingMove):
            return self.state.turn
        if self.last_move is not None:
            return self.last_move.player
        return Color(FIRST_PLAYER)

    @property
    def outcome(self) -> Optional[Outcome]:
        if isinstance(self.state, Finished):
            return self.state.outcome
        return None

    def opening_message(self) -> Message:
        return turn_message(self.current_player)

    def status_message(self) -> str:
        if isinstance(self.state, Finished):
            return self.state.outcome.summary
        if self.last_move is not None and self.last_move.skipped is not None:
            return f"{self.last_move.skipped.label} skipped, {self.state.turn.label} again"
        return f"{self.state.turn.label} to move"

    # ------------------------------------------------------------------
    # Move handling
    # ------------------------------------------------------------------
    def handle_click(self, click: DotClick) -> Optional[MoveResult]:
        """Apply ``click`` if legal and return what happened.

        Returns ``None`` when the click is ignored: the game is over, the
        clicking player is not the one to move, or the cell is not a legal
        move for them.
        """

        if not isinstance(self.state, AwaitingMove):
            logger.debug("ignoring %r: game finished", click)
            return None
        player = click.player
        if player is not self.state.turn:
            logger.debug("ignoring %r: %s to move", click, self.state.turn.label)
            return None
        if not rules.is_valid_move(self.board, click.point, player):
            logger.debug("ignoring %r: not a legal move", click)
            return None

        flipped = rules.apply_move(self.board, click.point, player)
        self.moves_played += 1
        self._log_action(
            f"{player.label} {point_label(click.point)} (+{len(flipped)})"
        )
        logger.info(
            "%s played %s, flipping %d", player.label, point_label(click.point), len(flipped)
        )

        opponent = player.opponent
        opponent_can_move = rules.player_has_any_move(self.board, opponent)
        skipped: Optional[Color] = None
        outcome: Optional[Outcome] = None
        if not opponent_can_move and not rules.player_has_any_move(self.board, player):
            outcome = Outcome.from_board(self.board)
            self.state = Finished(outcome)
            messages = [Message(outcome.summary)]
            self._log_action(outcome.summary)
            logger.info("game finished: %s", outcome.summary)
        elif not opponent_can_move:
            skipped = opponent
            messages = [skip_message(opponent)]
            self._log_action(f"{opponent.label} skipped")
            logger.info("%s has no valid moves, %s moves again", opponent.label, player.label)
        else:
            self.state = AwaitingMove(opponent)
            messages = [turn_message(opponent)]

        result = MoveResult(
            point=click.point,
            player=player,
            flipped=flipped,
            skipped=skipped,
            outcome=outcome,
            messages=messages,
        )
        self.last_move = result
        return result

    def valid_moves(self) -> List[Point]:
        if not isinstance(self.state, AwaitingMove):
            return []
        return rules.valid_moves(self.board, self.state.turn)

    def reset(self, board: Optional[Board] = None) -> None:
        self.board = board if board is not None else Board.standard()
        self.state = AwaitingMove(Color(FIRST_PLAYER))
        self.last_move = None
        self.moves_played = 0
        self.action_log.clear()

    # ------------------------------------------------------------------
    # Action logging helpers
    # ------------------------------------------------------------------
    def _log_action(self, message: str) -> None:
        self.action_log.append(message)
        if len(self.action_log) > self._log_capacity:
            del self.action_log[0 : len(self.action_log) - self._log_capacity]
