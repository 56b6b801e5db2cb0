from __future__ import annotations

from typing import List

import pytest

from othello.board import Board, Color
from othello.engine import Engine
from othello.events import DotClick, Message
from othello.game import AwaitingMove, Game, Outcome

R, B = Color.RED, Color.BLUE


def test_new_engine_queues_turn_announcement() -> None:
    shown: List[str] = []
    engine = Engine.new(on_text=shown.append)
    assert engine.pending == 1
    assert engine.text == ""
    event = engine.advance()
    assert event == Message("Blue's turn")
    assert engine.text == "Blue's turn"
    assert shown == ["Blue's turn"]
    assert engine.pending == 0


def test_advance_on_empty_queue_is_a_no_op() -> None:
    engine = Engine.new()
    engine.run_pending()
    before = engine.board.snapshot()
    assert engine.advance() is None
    assert engine.board.snapshot() == before
    assert engine.text == "Blue's turn"


def test_click_waits_for_the_next_tick() -> None:
    engine = Engine.new()
    engine.run_pending()
    engine.click(2, 3)
    assert engine.get_cell(2, 3) is Color.EMPTY
    assert engine.advance() == DotClick((2, 3), B)
    assert engine.get_cell(2, 3) is B
    assert engine.get_cell(3, 3) is B
    assert engine.game.state == AwaitingMove(R)
    assert engine.pending == 1
    assert engine.text == "Blue's turn"
    assert engine.advance() == Message("Red's turn")
    assert engine.text == "Red's turn"


def test_click_carries_the_player_to_move() -> None:
    engine = Engine.new()
    engine.run_pending()
    engine.click(2, 3)
    engine.run_pending()
    engine.click(2, 2)
    assert engine.queue.pop() == DotClick((2, 2), R)


def test_illegal_click_changes_nothing() -> None:
    shown: List[str] = []
    engine = Engine.new(on_text=shown.append)
    engine.run_pending()
    before = engine.board.snapshot()
    engine.click(3, 3)
    engine.click(0, 0)
    assert engine.run_pending() == 2
    assert engine.board.snapshot() == before
    assert engine.game.state == AwaitingMove(B)
    assert shown == ["Blue's turn"]


def test_events_are_dispatched_newest_first() -> None:
    engine = Engine.new()
    engine.run_pending()
    engine.click(2, 3)
    engine.send_message("hello")
    assert engine.advance() == Message("hello")
    assert engine.get_cell(2, 3) is Color.EMPTY
    assert engine.advance() == DotClick((2, 3), B)
    assert engine.get_cell(2, 3) is B


def test_message_duration_is_kept_but_not_expired() -> None:
    engine = Engine.new()
    engine.run_pending()
    engine.send_message("brief", duration=3)
    engine.advance()
    for _ in range(5):
        engine.advance()
    assert engine.text == "brief"
    assert engine.last_message == Message("brief", 3)


def test_click_outside_board_raises() -> None:
    engine = Engine.new()
    with pytest.raises(ValueError):
        engine.click(8, 0)
    with pytest.raises(ValueError):
        engine.get_cell(0, -1)


def test_skip_message_reaches_display() -> None:
    engine = Engine.new("skipped-turn")
    engine.run_pending()
    engine.click(7, 4)
    engine.run_pending()
    assert engine.text == "Red has no valid moves, skipping turn"
    assert engine.game.current_player is B


def test_game_over_hook_fires_once() -> None:
    outcomes: List[Outcome] = []
    engine = Engine.new("endgame", on_game_over=outcomes.append)
    engine.run_pending()
    engine.click(0, 0)
    engine.run_pending()
    assert outcomes == [Outcome(winner=R, red=56, blue=8)]
    assert engine.text == "Red wins 56:8!"

    engine.click(0, 0)
    engine.run_pending()
    assert len(outcomes) == 1


def test_reset_starts_a_fresh_game() -> None:
    engine = Engine.new("endgame")
    engine.run_pending()
    engine.click(0, 0)
    engine.send_message("stale")
    engine.reset()
    assert engine.pending == 1
    engine.run_pending()
    assert engine.board.snapshot() == Board.standard().snapshot()
    assert engine.game.state == AwaitingMove(B)
    assert engine.text == "Blue's turn"


def test_unknown_preset_raises() -> None:
    with pytest.raises(ValueError):
        Engine.new("nonsense")


def test_direct_construction_queues_turn_announcement() -> None:
    engine = Engine()
    assert engine.pending == 1
    assert engine.advance() == Message("Blue's turn")

    custom = Engine(game=Game.new(Board.from_preset("skipped-turn")))
    assert custom.pending == 1


def test_game_over_hook_waits_for_summary_message() -> None:
    seen: List[str] = []
    engine = Engine.new(
        "endgame",
        on_text=seen.append,
        on_game_over=lambda outcome: seen.append(f"over: {outcome.summary}"),
    )
    engine.run_pending()
    engine.click(0, 0)
    engine.advance()
    assert engine.game.is_finished
    assert seen == ["Blue's turn"]

    assert engine.advance() == Message("Red wins 56:8!")
    assert seen == ["Blue's turn", "Red wins 56:8!", "over: Red wins 56:8!"]


def test_reset_forgets_undisplayed_summary() -> None:
    outcomes: List[Outcome] = []
    engine = Engine.new("endgame", on_game_over=outcomes.append)
    engine.run_pending()
    engine.click(0, 0)
    engine.advance()
    engine.reset()
    engine.run_pending()
    assert outcomes == []
