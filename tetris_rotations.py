"""Rotation table files.

A rotation file lists, for each of the seven pieces, a name line followed by
four 4x4 masks (rotation states 0, R, 2, L). Mask rows are four whitespace
separated tokens, ``0`` for a filled cell and ``.`` for an empty one::

    // comments run to the end of the line
    TBlock
    .  0  .  .
    0  0  0  .
    .  .  .  .
    .  .  .  .

    .  0  .  .
    ...

Blank lines are ignored, so blocks may be spaced however is readable.
"""
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Tuple, Union

from tetris_piece import PIECE_TYPES, Shape

log = logging.getLogger(__name__)

MASK_SIZE = 4
NAMES = {f"{t}Block": t for t in PIECE_TYPES}
NAMES.update({t: t for t in PIECE_TYPES})
TOKENS = {"0": 1, ".": 0}


class RotationFileError(ValueError):
    def __init__(self, message: str, line: int = 0):
        self.line = line
        super().__init__(f"line {line}: {message}" if line else message)


def _content_lines(text: str) -> Iterator[Tuple[int, str]]:
    for no, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("//", 1)[0].strip()
        if line:
            yield no, line


def _parse_row(no: int, line: str) -> List[int]:
    tokens = line.split()
    if len(tokens) != MASK_SIZE:
        raise RotationFileError(f"expected {MASK_SIZE} cells, got {len(tokens)}", no)
    row = []
    for tok in tokens:
        if tok not in TOKENS:
            raise RotationFileError(f"unexpected cell {tok!r}", no)
        row.append(TOKENS[tok])
    return row


def parse_rotations(text: str) -> Dict[str, List[Shape]]:
    lines = list(_content_lines(text))
    table: Dict[str, List[Shape]] = {}
    i = 0
    while i < len(lines):
        no, name = lines[i]
        if name not in NAMES:
            raise RotationFileError(f"unexpected piece name {name!r}", no)
        t = NAMES[name]
        if t in table:
            raise RotationFileError(f"piece {name!r} defined twice", no)
        i += 1
        states: List[Shape] = []
        for _ in range(4):
            mask: Shape = []
            for _ in range(MASK_SIZE):
                if i >= len(lines):
                    raise RotationFileError(f"piece {name!r} ends early", no)
                rno, row = lines[i]
                if row in NAMES:
                    raise RotationFileError(f"piece {name!r} ends early", rno)
                mask.append(_parse_row(rno, row))
                i += 1
            if not any(any(r) for r in mask):
                raise RotationFileError(f"piece {name!r} has an empty rotation", no)
            states.append(mask)
        table[t] = states

    missing = [t for t in PIECE_TYPES if t not in table]
    if missing:
        raise RotationFileError(f"missing pieces: {', '.join(missing)}")
    return table


def load_rotations(path: Union[str, Path]) -> Dict[str, List[Shape]]:
    path = Path(path)
    table = parse_rotations(path.read_text(encoding="utf-8"))
    log.info("loaded rotation table from %s", path)
    return table
