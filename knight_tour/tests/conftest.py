import random
import sys
from pathlib import Path

import pytest

# Ensure the project root is importable when pytest starts from any directory
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from knight_tour.board import Board  # noqa: E402
from knight_tour.config import BoardStyle, TourConfig  # noqa: E402
from knight_tour.moves import MoveGenerator  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def board_8x8(rng):
    return Board(TourConfig(size=8), rng)


@pytest.fixture
def holed_board(rng):
    return Board(TourConfig(size=8, style=BoardStyle.WITH_HOLES), rng)


@pytest.fixture
def moves_8x8(board_8x8):
    return MoveGenerator(board_8x8)
