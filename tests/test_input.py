import pygame
import pytest

from tetris import Game, GameState
from tetris_config import CONFIG
from tetris_input import ShiftRepeat, handle_keydown, handle_keyup


@pytest.fixture
def game():
    return Game(seed=3)


def test_first_press_steps_immediately():
    s = ShiftRepeat()
    assert s.update(16, True, False) == -1
    assert s.update(16, True, False) == 0


def test_no_repeat_before_das_then_repeat_every_arr():
    CONFIG["DAS_MS"], CONFIG["ARR_MS"] = 100, 30
    s = ShiftRepeat()
    steps = [s.update(10, False, True) for _ in range(40)]
    assert steps[0] == 1
    assert not any(steps[1:10])
    repeats = [i for i, v in enumerate(steps) if v and i > 0]
    assert repeats
    assert all(b - a == 3 for a, b in zip(repeats, repeats[1:]))


def test_arr_zero_steps_every_frame_after_das():
    CONFIG["DAS_MS"], CONFIG["ARR_MS"] = 50, 0
    s = ShiftRepeat()
    steps = [s.update(10, True, False) for _ in range(10)]
    assert steps[:4] == [-1, 0, 0, 0]
    assert steps[5:] == [-1] * 5


def test_direction_change_and_both_held():
    s = ShiftRepeat()
    assert s.update(10, True, False) == -1
    assert s.update(10, False, True) == 1
    assert s.update(10, True, True) == 0
    assert s.update(10, False, False) == 0


def test_key_bindings(game):
    state = game.current.state
    assert handle_keydown(game, pygame.K_UP)
    assert game.current.state in (state, (state + 1) % 4)

    assert handle_keydown(game, pygame.K_DOWN)
    assert game.soft_drop_held
    assert handle_keyup(game, pygame.K_DOWN)
    assert not game.soft_drop_held

    first = game.current.t
    assert handle_keydown(game, pygame.K_j)
    assert game.hold_type == first

    assert handle_keydown(game, pygame.K_SPACE)
    assert game.board_version == 2

    assert handle_keydown(game, pygame.K_ESCAPE)
    assert game.state is GameState.PAUSED
    handle_keydown(game, pygame.K_ESCAPE)
    assert game.state is GameState.PLAYING

    assert not handle_keydown(game, pygame.K_q)
    assert not handle_keyup(game, pygame.K_q)


def test_rshift_rotates_counterclockwise(game):
    game.current = game.current.moved(0, 5)
    assert handle_keydown(game, pygame.K_RSHIFT)
    assert game.current.state == 3


def test_restart_key(game):
    game.hard_drop()
    handle_keydown(game, pygame.K_r)
    assert game.score == 0
    assert not any(any(row) for row in game.board)


def test_reset_forgets_held_direction():
    CONFIG["DAS_MS"] = 100
    s = ShiftRepeat()
    assert s.update(10, True, False) == -1
    assert s.update(10, True, False) == 0
    s.reset()
    assert (s.dir, s.held_ms, s.initial) == (0, 0.0, False)
    assert s.update(10, True, False) == -1
