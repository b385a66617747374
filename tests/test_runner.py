import logging

import pygame
import pytest

from blockfall.config import GameConfig, InputMode
from blockfall.render import Renderer
from blockfall.run_pygame import GameRunner


def key_event(event_type, key):
    return pygame.event.Event(event_type, key=key)


def make_runner(**kwargs):
    config = GameConfig(width=10, height=10, shapes=("elko",), seed=1, **kwargs)
    return GameRunner(config)


def test_quit_and_escape_stop_the_loop():
    runner = make_runner()
    assert runner.handle_event(pygame.event.Event(pygame.QUIT)) is False
    assert runner.handle_event(key_event(pygame.KEYDOWN, pygame.K_ESCAPE)) is False
    assert runner.handle_event(key_event(pygame.KEYDOWN, pygame.K_a)) is True


def test_arrow_key_moves_piece_on_next_step():
    runner = make_runner()
    assert runner.simulation.piece.position == (3, 0)
    runner.handle_event(key_event(pygame.KEYDOWN, pygame.K_LEFT))
    runner.step()
    assert runner.simulation.piece.position[0] == 2
    runner.step()
    assert runner.simulation.piece.position[0] == 2
    assert runner.frames == 2


def test_held_input_repeats_until_key_up():
    runner = make_runner(input_mode=InputMode.HELD)
    runner.handle_event(key_event(pygame.KEYDOWN, pygame.K_RIGHT))
    runner.step()
    runner.step()
    assert runner.simulation.piece.position[0] == 5
    runner.handle_event(key_event(pygame.KEYUP, pygame.K_RIGHT))
    runner.step()
    assert runner.simulation.piece.position[0] == 5


def test_run_loop_until_quit(monkeypatch, caplog):
    runner = make_runner(profile=True)
    batches = [[], [pygame.event.Event(pygame.QUIT)]]

    def fake_setup():
        runner.renderer = Renderer(pygame.Surface(runner.config.window_size), runner.config.box_size)

    monkeypatch.setattr(runner, "setup", fake_setup)
    monkeypatch.setattr(pygame.event, "get", lambda: batches.pop(0))
    monkeypatch.setattr(pygame.display, "flip", lambda: None)
    monkeypatch.setattr(pygame, "quit", lambda: None)

    with caplog.at_level(logging.INFO, logger="blockfall.run_pygame"):
        runner.run()

    assert runner.frames == 1
    assert runner.running is False
    assert "Game stopped after 1 frame(s)" in caplog.text
    assert "Frame timings" in caplog.text
    assert "update" in caplog.text


def test_failed_window_setup_still_shuts_pygame_down(monkeypatch):
    runner = make_runner()
    calls = []

    def broken_setup():
        raise pygame.error("No available video device")

    monkeypatch.setattr(runner, "setup", broken_setup)
    monkeypatch.setattr(pygame, "quit", lambda: calls.append("quit"))

    with pytest.raises(pygame.error):
        runner.run()

    assert calls == ["quit"]
    assert runner.running is False
    assert runner.frames == 0


def test_stop_ends_a_running_loop(monkeypatch):
    runner = make_runner()
    batches = [[], [], []]

    def fake_setup():
        runner.renderer = Renderer(pygame.Surface(runner.config.window_size), runner.config.box_size)

    def events():
        if runner.frames == 2:
            runner.stop()
        return batches.pop(0)

    monkeypatch.setattr(runner, "setup", fake_setup)
    monkeypatch.setattr(pygame.event, "get", events)
    monkeypatch.setattr(pygame.display, "flip", lambda: None)
    monkeypatch.setattr(pygame, "quit", lambda: None)

    runner.run()

    assert runner.frames == 2
    assert runner.running is False
    # Stopping an idle runner is a no-op
    runner.stop()
    assert runner.running is False
