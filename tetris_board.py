"""Board helpers: collide, merge, sweep, ghost"""
from typing import TYPE_CHECKING, List, Optional

from tetris_config import COLS, ROWS_TOTAL

if TYPE_CHECKING:
    from tetris_piece import Piece

# ROWS_TOTAL x COLS; row 0 is the top hidden row
Board = List[List[Optional[str]]]


def new_board() -> Board:
    return [[None] * COLS for _ in range(ROWS_TOTAL)]


def collide(board: Board, piece: "Piece") -> bool:
    """True if the piece overlaps a wall, the floor or a locked cell.

    Cells above row 0 are open space.
    """
    for y, row in enumerate(piece.shape):
        for x, v in enumerate(row):
            if not v: continue
            bx, by = piece.x + x, piece.y + y
            if bx < 0 or bx >= COLS or by >= ROWS_TOTAL: return True
            if by >= 0 and board[by][bx]: return True
    return False


def merge(board: Board, piece: "Piece") -> int:
    """Write the piece into the board; returns how many cells fell above row 0."""
    lost = 0
    for y, r in enumerate(piece.shape):
        for x, v in enumerate(r):
            if v:
                by = piece.y + y
                if by >= 0: board[by][piece.x + x] = piece.t
                else: lost += 1
    return lost


def sweep(board: Board) -> int:
    """Remove full rows bottom-up, shifting everything above down. Returns rows cleared."""
    c = 0; y = ROWS_TOTAL - 1
    while y >= 0:
        if all(board[y][x] for x in range(COLS)):
            del board[y]; board.insert(0, [None] * COLS); c += 1
        else: y -= 1
    return c


def ghost_y(board: Board, piece: "Piece") -> int:
    """Row the piece would land on if hard-dropped."""
    t = piece.moved(0, 0)
    while True:
        t.y += 1
        if collide(board, t): return t.y - 1

