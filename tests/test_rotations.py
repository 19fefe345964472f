import pytest

from tetris_piece import PIECE_TYPES, ROTATIONS, Piece, build_rotations, SHAPES, use_rotations
from tetris_rotations import RotationFileError, load_rotations, parse_rotations


@pytest.fixture
def text(rotations_file):
    with open(rotations_file, encoding="utf-8") as f:
        return f.read()


def _pad(shape, n=4):
    rows = [r + [0] * (n - len(r)) for r in shape]
    return rows + [[0] * n for _ in range(n - len(rows))]


def test_load_shipped_table(rotations_file):
    table = load_rotations(rotations_file)
    assert sorted(table) == sorted(PIECE_TYPES)
    for t in PIECE_TYPES:
        assert len(table[t]) == 4
        for mask in table[t]:
            assert len(mask) == 4 and all(len(r) == 4 for r in mask)
            assert sum(map(sum, mask)) == 4


def test_shipped_table_matches_builtin_rotations(rotations_file):
    table = load_rotations(rotations_file)
    builtin = build_rotations(SHAPES)
    for t in "IJLSTZ":
        assert table[t] == [_pad(s) for s in builtin[t]]


def test_comments_and_bare_letters(text):
    text = text.replace("OBlock", "O  // the square")
    assert parse_rotations(text)["O"][0][0] == [0, 1, 1, 0]


def test_installed_table_is_used_for_spawn(rotations_file):
    use_rotations(load_rotations(rotations_file))
    p = Piece.spawn("T")
    assert len(p.shape) == 4
    assert p.x == 3
    assert p.shape == ROTATIONS["T"][0]
    assert p.shape[0] == [0, 1, 0, 0]


@pytest.mark.parametrize("old,new,match", [
    ("TBlock\n.  0  .  .", "TBlock\n.  x  .  .", "unexpected cell 'x'"),
    ("TBlock\n.  0  .  .", "TBlock\n.  0  .", "expected 4 cells, got 3"),
    ("IBlock\n.  .  .  .\n0  0  0  0", "IBlock\n.  .  .  .\n.  .  .  .", "empty rotation"),
    ("ZBlock", "TBlock", "defined twice"),
    ("IBlock", "QBlock", "unexpected piece name 'QBlock'"),
])
def test_malformed_files(text, old, new, match):
    assert old in text
    with pytest.raises(RotationFileError, match=match) as exc:
        parse_rotations(text.replace(old, new, 1))
    assert exc.value.line > 0


def test_missing_piece(text):
    with pytest.raises(RotationFileError, match="missing pieces: Z"):
        parse_rotations(text.split("ZBlock")[0])


def test_truncated_block(text):
    lines = text.rstrip().splitlines()
    with pytest.raises(RotationFileError, match="ends early"):
        parse_rotations("\n".join(lines[:-2]))


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_rotations(tmp_path / "nope.txt")
