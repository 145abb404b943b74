import pygame
import pytest

from tetris_config import CONFIG
from tetris_input import Controls


def key(kind, k):
    return pygame.event.Event(kind, key=k)


@pytest.mark.parametrize("k,action", [
    (pygame.K_LEFT, "left"),
    (pygame.K_RIGHT, "right"),
    (pygame.K_r, "rotate"),
    (pygame.K_UP, "rotate"),
    (pygame.K_ESCAPE, "quit"),
    (pygame.K_a, None),
])
def test_keydown_actions(k, action):
    assert Controls().handle(key(pygame.KEYDOWN, k)) == action


def test_window_close_quits():
    assert Controls().handle(pygame.event.Event(pygame.QUIT)) == "quit"


def test_soft_drop_toggles_fall_interval():
    c = Controls()
    assert c.fall_interval() == CONFIG["FALL_INTERVAL"]
    assert c.handle(key(pygame.KEYDOWN, pygame.K_DOWN)) is None
    assert c.fall_interval() == CONFIG["SOFT_DROP_INTERVAL"]
    c.handle(key(pygame.KEYUP, pygame.K_DOWN))
    assert c.fall_interval() == CONFIG["FALL_INTERVAL"]


def test_apply_dispatches_actions(make_game):
    g = make_game("I")
    c = Controls()
    events = [key(pygame.KEYDOWN, pygame.K_LEFT), key(pygame.KEYDOWN, pygame.K_LEFT),
              key(pygame.KEYDOWN, pygame.K_RIGHT), key(pygame.KEYDOWN, pygame.K_r)]
    assert c.apply(events, g) is True
    assert g.current.x == 3
    assert g.current.shape == [[1], [1], [1], [1]]


def test_apply_sets_fall_interval_from_soft_drop(make_game):
    g = make_game("O")
    c = Controls()
    c.apply([key(pygame.KEYDOWN, pygame.K_DOWN)], g)
    assert g.fall_interval == CONFIG["SOFT_DROP_INTERVAL"]
    c.apply([], g)
    assert g.fall_interval == CONFIG["SOFT_DROP_INTERVAL"]
    c.apply([key(pygame.KEYUP, pygame.K_DOWN)], g)
    assert g.fall_interval == CONFIG["FALL_INTERVAL"]


def test_apply_stops_on_quit(make_game):
    g = make_game("I")
    events = [key(pygame.KEYDOWN, pygame.K_ESCAPE), key(pygame.KEYDOWN, pygame.K_LEFT)]
    assert Controls().apply(events, g) is False
    assert g.current.x == 4
