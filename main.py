import argparse
import logging
import sys

import pygame
from tetris import Game
from tetris_config import CONFIG
from tetris_input import ShiftRepeat, handle_keydown, handle_keyup
from tetris_layout import compute_dims
from tetris_logging import setup_logger
from tetris_overlay import Overlay
from tetris_piece import use_rotations
from tetris_render import RenderAssets
from tetris_rotations import RotationFileError, load_rotations
from tetris_scores import HighScores

log = logging.getLogger(__name__)

TARGET_FPS = 60
UPDATE_HZ = 60


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Classic single-player Tetris.")
    ap.add_argument("--seed", type=int, default=None, help="seed for the 7-bag randomizer")
    ap.add_argument("--level", type=int, default=0, help="starting level")
    ap.add_argument("--rotations", type=str, default=None, help="rotation table file")
    ap.add_argument("--scores", type=str, default=None, help="high score file (default ~/.tetris/highscore.json)")
    ap.add_argument("--log-level", type=str, default="info", choices=["debug", "info", "warning", "error"])
    args = ap.parse_args(argv)
    if args.level < 0:
        ap.error("--level must be >= 0")
    return args


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def dispatch(game: Game, overlay: Overlay, e) -> bool:
    """Route one pygame event. Returns False when the window should close."""
    if e.type == pygame.QUIT:
        game.save_score()
        return False
    if e.type == pygame.KEYDOWN:
        if e.key == pygame.K_F1 or overlay.active:
            overlay.handle(e)
            # keys held into the overlay would otherwise stay held
            game.set_soft_drop(False)
            return True
        handle_keydown(game, e.key)
    elif e.type == pygame.KEYUP:
        # releases always reach the game, even with the overlay open
        handle_keyup(game, e.key)
    return True


def run(game: Game, scores: HighScores):
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Classic Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    shift = ShiftRepeat()
    overlay = Overlay()

    acc = 0.0
    dt = 1000.0 / UPDATE_HZ

    while True:
        acc += clock.tick(TARGET_FPS)

        for e in pygame.event.get():
            if not dispatch(game, overlay, e):
                pygame.quit()
                return

        # cell size edited in the overlay: rebuild window and sprites
        new_dims = compute_dims()
        if new_dims.cell != dims.cell:
            dims = new_dims
            screen = recreate_window(dims)
            render = RenderAssets(dims, font, big_font)

        while acc >= dt:
            acc -= dt
            if overlay.active or not game.playing:
                shift.reset()
                continue
            keys = pygame.key.get_pressed()
            step = shift.update(dt, keys[pygame.K_LEFT], keys[pygame.K_RIGHT])
            if step:
                game.move(step)
            game.update(dt)

        render.draw(screen, game, scores.best)
        overlay.draw(screen, font, dims.total_w, dims.total_h)
        pygame.display.flip()


def main(argv=None):
    args = parse_args(argv)
    setup_logger(level=args.log_level)

    CONFIG["SEED"] = args.seed
    CONFIG["START_LEVEL"] = args.level
    if args.rotations:
        try:
            use_rotations(load_rotations(args.rotations))
        except (OSError, RotationFileError) as e:
            log.error("cannot use rotation file %s: %s", args.rotations, e)
            sys.exit(2)

    scores = HighScores(args.scores)
    game = Game(scores=scores)
    run(game, scores)


if __name__ == '__main__':
    main()
