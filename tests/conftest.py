import os
import sys

import pytest

# Flat module layout: make the repo root importable without installing
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tetris_config import reset_config  # noqa: E402
from tetris_piece import reset_rotations  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    reset_rotations()
    yield
    reset_config()
    reset_rotations()


@pytest.fixture
def rotations_file():
    return os.path.join(ROOT, "rotations.txt")
