import pygame
import pytest

from main import dispatch, parse_args
from tetris import Game
from tetris_overlay import Overlay
from tetris_scores import HighScores


def key(kind, k):
    return pygame.event.Event(kind, key=k)


@pytest.fixture
def game(tmp_path):
    return Game(seed=8, scores=HighScores(tmp_path / "hs.json"))


def test_quit_saves_running_score(game, tmp_path):
    game.score = 450
    assert not dispatch(game, Overlay(), pygame.event.Event(pygame.QUIT))
    assert HighScores(tmp_path / "hs.json").best == 450


def test_soft_drop_released_while_overlay_open(game):
    overlay = Overlay()
    assert dispatch(game, overlay, key(pygame.KEYDOWN, pygame.K_DOWN))
    assert game.soft_drop_held
    dispatch(game, overlay, key(pygame.KEYDOWN, pygame.K_F1))
    assert overlay.active
    dispatch(game, overlay, key(pygame.KEYUP, pygame.K_DOWN))
    dispatch(game, overlay, key(pygame.KEYDOWN, pygame.K_F1))
    assert not overlay.active
    assert not game.soft_drop_held


def test_opening_overlay_stops_soft_drop(game):
    overlay = Overlay()
    game.set_soft_drop(True)
    dispatch(game, overlay, key(pygame.KEYDOWN, pygame.K_F1))
    assert not game.soft_drop_held


def test_overlay_swallows_game_keys(game):
    overlay = Overlay()
    overlay.toggle()
    before = game.current
    dispatch(game, overlay, key(pygame.KEYDOWN, pygame.K_SPACE))
    assert game.current == before
    assert game.hold_type is None


def test_parse_args():
    args = parse_args(["--seed", "3", "--level", "2", "--log-level", "debug"])
    assert (args.seed, args.level, args.log_level) == (3, 2, "debug")
    with pytest.raises(SystemExit):
        parse_args(["--level", "-1"])
