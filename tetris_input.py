"""Key bindings and the DAS/ARR controller"""
from typing import TYPE_CHECKING

import pygame
from tetris_config import CONFIG

if TYPE_CHECKING:
    from tetris import Game

# One-shot commands on KEYDOWN. Left/Right go through ShiftRepeat and Down
# is a held soft drop, so they are handled separately.
KEYMAP = {
    pygame.K_UP: "rotate_cw",
    pygame.K_RSHIFT: "rotate_ccw",
    pygame.K_SPACE: "hard_drop",
    pygame.K_j: "hold",
    pygame.K_ESCAPE: "pause",
    pygame.K_r: "restart",
}


def handle_keydown(game: "Game", key: int) -> bool:
    """Apply a bound key to the game. Returns False for unbound keys."""
    cmd = KEYMAP.get(key)
    if cmd is None:
        if key == pygame.K_DOWN:
            game.set_soft_drop(True)
            return True
        return False
    if cmd == "rotate_cw": game.rotate(True)
    elif cmd == "rotate_ccw": game.rotate(False)
    elif cmd == "hard_drop": game.hard_drop()
    elif cmd == "hold": game.hold()
    elif cmd == "pause": game.toggle_pause()
    elif cmd == "restart": game.restart()
    return True


def handle_keyup(game: "Game", key: int) -> bool:
    if key == pygame.K_DOWN:
        game.set_soft_drop(False)
        return True
    return False


class ShiftRepeat:
    """Horizontal auto-shift: one step on press, then after DAS_MS a step
    every ARR_MS (0 => every frame). Releasing or switching direction resets.
    """
    def __init__(self):
        self.reset()

    def reset(self):
        self.dir = 0; self.held_ms = 0.0; self.last = 0.0; self.initial = False

    def update(self, dt, left, right) -> int:
        nd = (-1 if left else 0) + (1 if right else 0)
        if nd != self.dir:
            self.dir = nd; self.held_ms = 0.0; self.last = 0.0; self.initial = False
        if self.dir == 0: return 0
        self.held_ms += dt
        if not self.initial:
            self.initial = True; return self.dir
        if self.held_ms < CONFIG["DAS_MS"]: return 0
        arr = CONFIG["ARR_MS"]
        if arr == 0: return self.dir
        self.last += dt
        if self.last >= arr:
            self.last = 0.0; return self.dir
        return 0
