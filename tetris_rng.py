"""7-bag randomizer and the next-piece preview queue"""
import random
from collections import deque
from typing import List, Optional

from tetris_piece import PIECE_TYPES


class BagRandom:
    """Deals all seven piece types once, in shuffled order, before reshuffling.

    Over any aligned window of 7 draws every type appears exactly once, so
    droughts are bounded to 12 pieces.
    """
    PIECES = PIECE_TYPES

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._bag: List[str] = []

    def _refill(self):
        self._bag = list(self.PIECES)
        self._rng.shuffle(self._bag)

    def next_piece(self) -> str:
        if not self._bag:
            self._refill()
        return self._bag.pop()


class PieceQueue:
    """Fixed-length preview of upcoming piece types."""
    def __init__(self, rng: BagRandom, size: int = 3):
        self.rng = rng
        self.size = max(1, size)
        self._items = deque(rng.next_piece() for _ in range(self.size))

    def peek(self) -> List[str]:
        return list(self._items)

    def pop(self) -> str:
        t = self._items.popleft()
        self._items.append(self.rng.next_piece())
        return t

    def __len__(self):
        return len(self._items)
