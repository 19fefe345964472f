"""Piece model, shapes, rotation tables and SRS kicks"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from tetris_board import Board, collide
from tetris_config import COLS, HIDDEN_ROWS

Shape = List[List[int]]

PIECE_TYPES = ["I", "J", "L", "O", "S", "T", "Z"]

# Spawn orientation, minimal bounding box
SHAPES: Dict[str, Shape] = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "J": [[1,0,0],[1,1,1],[0,0,0]],
    "L": [[0,0,1],[1,1,1],[0,0,0]],
    "O": [[1,1],[1,1]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
}

def rotate_cw(m: Shape) -> Shape: return [list(r) for r in zip(*m[::-1])]


def build_rotations(shapes: Dict[str, Shape]) -> Dict[str, List[Shape]]:
    """Four clockwise rotation states (0, R, 2, L) per piece type."""
    table = {}
    for t, s in shapes.items():
        states = [[r[:] for r in s]]
        for _ in range(3):
            states.append(rotate_cw(states[-1]))
        table[t] = states
    return table


ROTATIONS: Dict[str, List[Shape]] = build_rotations(SHAPES)


def use_rotations(table: Dict[str, List[Shape]]):
    """Install a rotation table (e.g. loaded from a rotations file)."""
    ROTATIONS.clear()
    ROTATIONS.update(table)


def reset_rotations():
    use_rotations(build_rotations(SHAPES))


# SRS offsets, +y is up
JLSTZ_KICKS: Dict[Tuple[int,int], List[Tuple[int,int]]] = {
    (0,1):[(0,0),(-1,0),(-1,1),(0,-2),(-1,-2)],
    (1,0):[(0,0),(1,0),(1,-1),(0,2),(1,2)],
    (1,2):[(0,0),(1,0),(1,-1),(0,2),(1,2)],
    (2,1):[(0,0),(-1,0),(-1,1),(0,-2),(-1,-2)],
    (2,3):[(0,0),(1,0),(1,1),(0,-2),(1,-2)],
    (3,2):[(0,0),(-1,0),(-1,-1),(0,2),(-1,2)],
    (3,0):[(0,0),(-1,0),(-1,-1),(0,2),(-1,2)],
    (0,3):[(0,0),(1,0),(1,1),(0,-2),(1,-2)],
}
I_KICKS: Dict[Tuple[int,int], List[Tuple[int,int]]] = {
    (0,1):[(0,0),(-2,0),(1,0),(-2,-1),(1,2)],
    (1,0):[(0,0),(2,0),(-1,0),(2,1),(-1,-2)],
    (1,2):[(0,0),(-1,0),(2,0),(-1,2),(2,-1)],
    (2,1):[(0,0),(1,0),(-2,0),(1,-2),(-2,1)],
    (2,3):[(0,0),(2,0),(-1,0),(2,1),(-1,-2)],
    (3,2):[(0,0),(-2,0),(1,0),(-2,-1),(1,2)],
    (3,0):[(0,0),(1,0),(-2,0),(1,-2),(-2,1)],
    (0,3):[(0,0),(-1,0),(2,0),(-1,2),(2,-1)],
}


def kicks_for(t: str, old: int, new: int) -> List[Tuple[int,int]]:
    if t == "O":
        return [(0,0)]
    return (I_KICKS if t == "I" else JLSTZ_KICKS).get((old, new), [(0,0)])


@dataclass
class Piece:
    t: str
    shape: Shape
    state: int  # 0=spawn, 1=R, 2=2, 3=L
    x: int
    y: int

    @staticmethod
    def spawn(t: str) -> "Piece":
        s = ROTATIONS[t][0]
        w = len(s[0])
        empty = 0
        for r in s:
            if all(v == 0 for v in r): empty += 1
            else: break
        # top filled row lands on the first visible row
        return Piece(t, s, 0, (COLS - w) // 2, HIDDEN_ROWS - empty)

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.t, self.shape, self.state, self.x + dx, self.y + dy)

    def cells(self) -> List[Tuple[int,int]]:
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]


def try_rotate(board: Board, piece: Piece, cw: bool = True) -> Optional[Piece]:
    """Rotated piece at the first non-colliding kick offset, or None."""
    old = piece.state
    new = (old + (1 if cw else -1)) % 4
    ns = ROTATIONS[piece.t][new]
    for dx, dy in kicks_for(piece.t, old, new):
        test = Piece(piece.t, ns, new, piece.x + dx, piece.y - dy)
        if not collide(board, test): return test
    return None
