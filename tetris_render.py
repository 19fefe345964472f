"""
Rendering helpers for the Tetris project.

- Pre-render block cell Surfaces per color (solid + ghost outline) and blit them.
- Pre-render the static background (grid, hold box, panel) per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when
  Game.board_version changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Tuple, List, Optional
from tetris_config import CONFIG, COLS, ROWS, HIDDEN_ROWS
from tetris_layout import Dims
from tetris_piece import ROTATIONS, Piece

if TYPE_CHECKING:
    from tetris import Game

# Colors per tetromino type
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (88,176,188),
    "J": (22,101,167),
    "L": (217,133,1),
    "O": (235,214,1),
    "S": (55,154,48),
    "T": (137,64,135),
    "Z": (205,12,17),
}

TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    best: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    best_s: Optional[pygame.Surface] = None
    labels: Optional[Dict[str, pygame.Surface]] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.previews: Dict[Tuple[str, bool], pygame.Surface] = {}
        # Board surface cache (only locked blocks)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_version = -1

    # ---------- Static background (grid + side boxes) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        for x in (d.hold_x, d.panel_x):
            side = pygame.Rect(x, d.panel_y, d.side_w, d.board_h)
            pygame.draw.rect(self.bg, (21,25,53), side)
            pygame.draw.rect(self.bg, (50,60,100), side, 1)
        # Hold frame and queue frames (one per preview slot)
        pv = d.preview_cell
        self.hold_pos = (d.hold_x + 12, d.panel_y + 40)
        self.queue_pos: List[Tuple[int,int]] = []
        for i in range(max(1, int(CONFIG["PREVIEW_COUNT"]))):
            self.queue_pos.append((d.panel_x + 12, d.panel_y + 40 + i * (pv*3 + 12)))
        for (x, y) in [self.hold_pos] + self.queue_pos:
            frame = pygame.Rect(x-6, y-6, pv*4+12, pv*2+12)
            pygame.draw.rect(self.bg, (15,18,40), frame)
            pygame.draw.rect(self.bg, (55,65,110), frame, 1)
        self.hud_y = self.queue_pos[-1][1] + pv*2 + 24

    # ---------- Small cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[t] = g

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board):
        """Rebuilds the "locked blocks" surface from the visible board rows."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y in range(ROWS):
            for x in range(COLS):
                t = board[y + HIDDEN_ROWS][x]
                if t:
                    self.board_surface.blit(self.cell_surf[t], (x*c + 1, y*c + 1))

    # ---------- Per-cell helpers for moving/ghost piece ----------
    def draw_piece(self, screen: pygame.Surface, p: Piece, ghost: bool = False):
        d = self.dims
        surf = (self.ghost_surf if ghost else self.cell_surf)[p.t]
        inset = 4 if ghost else 1
        for bx, by in p.cells():
            vy = by - HIDDEN_ROWS
            if vy < 0: continue
            screen.blit(surf, (d.board_x + bx*d.cell + inset, d.board_y + vy*d.cell + inset))

    # ---------- Hold / queue previews ----------
    def preview(self, t: str, dim: bool = False) -> pygame.Surface:
        key = (t, dim)
        if key not in self.previews:
            pv = self.dims.preview_cell
            cells = [(x, y) for y, row in enumerate(ROTATIONS[t][0]) for x, v in enumerate(row) if v]
            minx = min(x for x, _ in cells); maxx = max(x for x, _ in cells)
            miny = min(y for _, y in cells); maxy = max(y for _, y in cells)
            offx = (4 - (maxx - minx + 1)) * pv // 2
            offy = (2 - (maxy - miny + 1)) * pv // 2
            s = pygame.Surface((pv*4, pv*2), pygame.SRCALPHA)
            col = COLORS[t]
            if dim: col = tuple(v // 3 for v in col)
            block = pygame.Surface((pv-2, pv-2))
            block.fill(col)
            for x, y in cells:
                s.blit(block, (offx + (x-minx)*pv + 1, offy + (y-miny)*pv + 1))
            self.previews[key] = s
        return self.previews[key]

    # ---------- HUD / Panel ----------
    def draw_hud(self, screen: pygame.Surface, score: int, level: int, lines: int, best: int):
        d = self.dims
        f = self.font
        if self.hud.labels is None:
            self.hud.labels = {
                "hold": f.render("Hold", True, TEXT),
                "next": f.render("Next", True, TEXT),
            }
        if self.hud.title is None:
            self.hud.title = f.render("Classic Tetris", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = f.render(f"Level: {level}", True, TEXT)
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, TEXT)
        if best != self.hud.best:
            self.hud.best = best
            self.hud.best_s = f.render(f"Best: {best}", True, TEXT)
        screen.blit(self.hud.labels["hold"], (d.hold_x + 12, d.panel_y + 12))
        screen.blit(self.hud.labels["next"], (d.panel_x + 12, d.panel_y + 12))
        y = self.hud_y
        for s in (self.hud.title, self.hud.score_s, self.hud.level_s, self.hud.lines_s, self.hud.best_s):
            screen.blit(s, (d.panel_x + 12, y)); y += 24
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, DIM_TEXT),
                f.render("↓ Soft drop", True, DIM_TEXT),
                f.render("↑ Rot CW", True, DIM_TEXT),
                f.render("RShift Rot CCW", True, DIM_TEXT),
                f.render("Space Hard", True, DIM_TEXT),
                f.render("J Hold", True, DIM_TEXT),
                f.render("Esc Pause", True, DIM_TEXT),
                f.render("R Restart", True, DIM_TEXT),
                f.render("F1 Overlay", True, DIM_TEXT),
            ]
        y = self.hold_pos[1] + d.preview_cell*2 + 30
        for surf in self.hud.controls:
            screen.blit(surf, (d.hold_x + 12, y)); y += 20

    def banner(self, screen: pygame.Surface, text: str, color, dy: int = 0):
        d = self.dims
        msg = self.big_font.render(text, True, color)
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2 + dy))
        screen.blit(msg, rect)

    # ---------- Whole frame ----------
    def draw(self, screen: pygame.Surface, game: "Game", best: int):
        d = self.dims
        if game.board_version != self._board_version:
            self.rebuild_board_surface(game.board)
            self._board_version = game.board_version
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        if not game.game_over:
            if CONFIG["SHOW_GHOST"]:
                self.draw_piece(screen, game.ghost(), ghost=True)
            self.draw_piece(screen, game.current)
        if game.hold_type:
            screen.blit(self.preview(game.hold_type, dim=game.hold_used), self.hold_pos)
        for pos, t in zip(self.queue_pos, game.next_types):
            screen.blit(self.preview(t), pos)
        self.draw_hud(screen, game.score, game.level, game.lines, max(best, game.score))
        if game.game_over:
            self.banner(screen, "GAME OVER", (255,220,220))
            self.banner(screen, "R to Restart", (255,220,220), 36)
        elif not game.playing:
            self.banner(screen, "PAUSED", (220,240,255))
            self.banner(screen, "Esc to Resume", (220,240,255), 36)
