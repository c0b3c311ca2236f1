"""Keyboard polling through the pygame event queue (headless)."""

from __future__ import annotations

import pygame

from game.input_source import KeyboardInput


def post_key(key: int) -> None:
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key, mod=0, unicode="", scancode=0))


def test_pause_key_toggles_once_per_press(pygame_headless) -> None:
    pygame.event.clear()
    keyboard = KeyboardInput()

    post_key(pygame.K_p)
    state = keyboard.poll()
    assert state.toggle_pause
    assert not state.quit

    # Queue was drained, the next poll sees nothing.
    assert not keyboard.poll().toggle_pause


def test_escape_and_window_close_request_quit(pygame_headless) -> None:
    pygame.event.clear()
    keyboard = KeyboardInput()

    post_key(pygame.K_ESCAPE)
    assert keyboard.poll().quit

    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert keyboard.poll().quit


def test_no_keys_held_means_no_movement(pygame_headless) -> None:
    pygame.event.clear()
    state = KeyboardInput().poll()
    assert not state.has_movement()
