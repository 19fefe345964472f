"""
Classic Tetris: rule engine
===========================

`Game` is the whole rule set as a display-free state machine. The pygame
loop in main.py feeds it commands and elapsed time; the renderer reads its
fields. Nothing in here touches pygame, so it runs headless under tests.

-------------------------------------------------------------
STATE
-------------------------------------------------------------

  • board        : ROWS_TOTAL x COLS grid of Optional[str] (2 hidden rows on top)
  • current      : the active Piece
  • queue        : PieceQueue fed by a 7-bag (BagRandom)
  • hold_type    : Optional[str], swappable once per lock cycle
  • score/lines/level
  • state        : PLAYING, PAUSED or GAME_OVER

-------------------------------------------------------------
COMMANDS
-------------------------------------------------------------

  move(dx), rotate(cw), soft_drop(), set_soft_drop(held), hard_drop(),
  hold(), toggle_pause(), restart(), save_score(), update(dt_ms)

restart() and save_score() offer the running score to the high score
table, so a best reached mid-game survives a restart or quitting.
A piece that locks with any cell above the board ends the game (lock out).

Illegal moves and rotations change nothing and return False. Commands are
ignored unless the game is PLAYING.

-------------------------------------------------------------
TIMING
-------------------------------------------------------------

update(dt_ms) accumulates gravity time against gravity_interval(level),
or the shorter soft_drop_interval(level) while soft drop is held. Once the
piece rests on something, a lock-delay timer runs; moving or rotating a
grounded piece restarts it, at most MAX_LOCK_RESETS times per piece. Hard
drop bypasses both timers and locks at once.

-------------------------------------------------------------
SCORING
-------------------------------------------------------------

  • 1/2/3/4 lines : SCORE_TABLE[n] * (level + 1), level taken before the clear
  • soft drop     : SOFT_DROP_PER_CELL per row descended
  • hard drop     : HARD_DROP_PER_CELL per row descended
  • level         : start_level + lines // LINES_PER_LEVEL
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import List, Optional

from tetris_board import Board, collide, ghost_y, merge, new_board, sweep
from tetris_config import (
    CONFIG, HARD_DROP_PER_CELL, HIDDEN_ROWS, LINES_PER_LEVEL, MAX_LOCK_RESETS,
    SCORE_TABLE, SOFT_DROP_PER_CELL, gravity_interval, soft_drop_interval,
)
from tetris_piece import Piece, try_rotate
from tetris_rng import BagRandom, PieceQueue
from tetris_scores import HighScores

log = logging.getLogger(__name__)


class GameState(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Game:
    def __init__(self, seed: Optional[int] = None, start_level: Optional[int] = None,
                 scores: Optional[HighScores] = None):
        self.seed = CONFIG["SEED"] if seed is None else seed
        self.start_level = CONFIG["START_LEVEL"] if start_level is None else start_level
        self.scores = scores
        # bumped whenever locked cells change, so renderers can cache the board
        self.board_version = 0
        self._new_game()

    # ---------- lifecycle ----------
    def restart(self):
        self.save_score()
        self._new_game()

    def save_score(self):
        """Offer the current score to the high score table (a no-op unless it is a new best)."""
        if self.scores is not None:
            self.scores.submit(self.score)

    def _new_game(self):
        self.board: Board = new_board()
        self.rng = BagRandom(self.seed)
        self.queue = PieceQueue(self.rng, CONFIG["PREVIEW_COUNT"])
        self.hold_type: Optional[str] = None
        self.hold_used = False

        self.score = 0
        self.lines = 0
        self.level = self.start_level

        self.state = GameState.PLAYING
        self.soft_drop_held = False
        self.grav_acc = 0.0
        self.lock_timer = 0.0
        self.lock_resets = 0
        self.board_version += 1

        self.current: Piece
        self._spawn(self.queue.pop())
        log.info("new game (seed=%s, level=%d)", self.seed, self.level)

    def toggle_pause(self):
        if self.state is GameState.PLAYING:
            self.state = GameState.PAUSED
            self.soft_drop_held = False
        elif self.state is GameState.PAUSED:
            self.state = GameState.PLAYING

    @property
    def playing(self) -> bool:
        return self.state is GameState.PLAYING

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def next_types(self) -> List[str]:
        return self.queue.peek()

    @property
    def gravity_ms(self) -> int:
        return gravity_interval(self.level)

    def ghost(self) -> Piece:
        return self.current.moved(0, ghost_y(self.board, self.current) - self.current.y)

    # ---------- controller ----------
    def move(self, dx: int) -> bool:
        if not self.playing: return False
        t = self.current.moved(dx, 0)
        if collide(self.board, t): return False
        self.current = t
        self._moved_while_grounded()
        return True

    def rotate(self, cw: bool = True) -> bool:
        if not self.playing: return False
        t = try_rotate(self.board, self.current, cw)
        if t is None: return False
        self.current = t
        self._moved_while_grounded()
        return True

    def soft_drop(self) -> bool:
        """Step one row down now. Never locks; a grounded piece is left alone."""
        if not self.playing: return False
        t = self.current.moved(0, 1)
        if collide(self.board, t): return False
        self.current = t
        self.score += SOFT_DROP_PER_CELL
        self.grav_acc = 0.0
        return True

    def set_soft_drop(self, held: bool):
        self.soft_drop_held = held

    def hard_drop(self) -> int:
        """Drop to the ghost row and lock immediately. Returns rows descended."""
        if not self.playing: return 0
        dropped = ghost_y(self.board, self.current) - self.current.y
        self.current = self.current.moved(0, dropped)
        self.score += dropped * HARD_DROP_PER_CELL
        self._lock()
        return dropped

    def hold(self) -> bool:
        if not self.playing or self.hold_used: return False
        t = self.current.t
        if self.hold_type is None:
            self.hold_type = t
            self._spawn(self.queue.pop())
        else:
            self.hold_type, t = t, self.hold_type
            self._spawn(t)
        self.hold_used = True
        return True

    # ---------- timer ----------
    def update(self, dt_ms: float):
        if not self.playing: return

        if self._grounded():
            self.grav_acc = 0.0
            self.lock_timer += dt_ms
            if self.lock_timer >= CONFIG["LOCK_DELAY_MS"]:
                self._lock()
            return

        self.lock_timer = 0.0
        self.grav_acc += dt_ms
        interval = soft_drop_interval(self.level) if self.soft_drop_held else self.gravity_ms
        while self.grav_acc >= interval:
            self.grav_acc -= interval
            t = self.current.moved(0, 1)
            if collide(self.board, t):
                self.grav_acc = 0.0
                break
            self.current = t
            if self.soft_drop_held:
                self.score += SOFT_DROP_PER_CELL

    # ---------- lock & clear ----------
    def _grounded(self) -> bool:
        return collide(self.board, self.current.moved(0, 1))

    def _moved_while_grounded(self):
        if self._grounded() and self.lock_resets < MAX_LOCK_RESETS:
            self.lock_timer = 0.0
            self.lock_resets += 1

    def _lock(self):
        above = all(y < HIDDEN_ROWS for _, y in self.current.cells())
        lost = merge(self.board, self.current)
        cleared = sweep(self.board)
        if cleared:
            self.score += SCORE_TABLE[cleared] * (self.level + 1)
            self.lines += cleared
            level = self.start_level + self.lines // LINES_PER_LEVEL
            if level > self.level:
                log.debug("level %d -> %d", self.level, level)
                self.level = level
            if cleared > 1:
                log.debug("cleared %d lines", cleared)
        self.board_version += 1
        self.hold_used = False
        if above or lost:
            self._end("lock out")
            return
        self._spawn(self.queue.pop())

    def _spawn(self, t: str):
        self.current = Piece.spawn(t)
        self.grav_acc = 0.0
        self.lock_timer = 0.0
        self.lock_resets = 0
        if collide(self.board, self.current):
            self._end("block out")

    def _end(self, reason: str):
        self.state = GameState.GAME_OVER
        self.soft_drop_held = False
        log.info("game over (%s): score=%d lines=%d level=%d",
                 reason, self.score, self.lines, self.level)
        self.save_score()
