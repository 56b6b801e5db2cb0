from __future__ import annotations

import pytest

from othello.board import Color
from othello.controller import Command, Controller
from othello.engine import Engine
from othello.events import DotClick


def test_cursor_starts_near_center_and_wraps() -> None:
    controller = Controller(Engine.new())
    assert controller.cursor == (3, 3)
    controller.handle_input(Command.MOVE_LEFT)
    controller.handle_input(Command.MOVE_UP)
    assert controller.cursor == (2, 2)
    controller.cursor = (0, 0)
    controller.handle_input(Command.MOVE_LEFT)
    controller.handle_input(Command.MOVE_UP)
    assert controller.cursor == (7, 7)
    controller.handle_input(Command.MOVE_RIGHT)
    controller.handle_input(Command.MOVE_DOWN)
    assert controller.cursor == (0, 0)


def test_click_queues_dot_click_at_cursor() -> None:
    engine = Engine.new()
    engine.run_pending()
    controller = Controller(engine)
    controller.cursor = (2, 3)
    controller.handle_input(Command.CLICK)
    assert engine.queue.pop() == DotClick((2, 3), Color.BLUE)


def test_unknown_command_raises() -> None:
    controller = Controller(Engine.new())
    with pytest.raises(ValueError):
        controller.handle_input("jump")


def test_finished_game_only_accepts_reset() -> None:
    engine = Engine.new("endgame")
    controller = Controller(engine, preset="endgame")
    engine.run_pending()
    controller.cursor = (0, 0)
    controller.handle_input(Command.CLICK)
    engine.run_pending()
    assert engine.game.is_finished

    controller.handle_input(Command.CLICK)
    assert engine.pending == 0

    controller.handle_input(Command.RESET)
    assert not engine.game.is_finished
    engine.run_pending()
    assert engine.get_cell(0, 0) is Color.EMPTY
    assert engine.game.is_finished is False


def test_clicks_resume_after_engine_reset() -> None:
    engine = Engine.new("endgame")
    controller = Controller(engine)
    engine.run_pending()
    controller.cursor = (0, 0)
    controller.handle_input(Command.CLICK)
    engine.run_pending()
    assert engine.game.is_finished

    engine.reset()
    engine.run_pending()
    controller.cursor = (2, 3)
    controller.handle_input(Command.CLICK)
    assert engine.pending == 1
    engine.run_pending()
    assert engine.get_cell(2, 3) is Color.BLUE


def test_controller_keeps_host_game_over_hook() -> None:
    outcomes = []
    engine = Engine.new("endgame", on_game_over=outcomes.append)
    controller = Controller(engine)
    engine.run_pending()
    controller.cursor = (0, 0)
    controller.handle_input(Command.CLICK)
    engine.run_pending()
    assert len(outcomes) == 1
