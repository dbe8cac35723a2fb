import numpy as np

from knight_tour.board import UNVISITED, BoardSnapshot
from knight_tour.validation import (
    closes,
    has_contiguous_order,
    is_knight_jump,
    is_knight_path,
    path_from_order,
    validate_tour,
)


def _snapshot(rows, holes=None):
    order = np.array([rows], dtype=np.int32)
    hole_mask = np.zeros_like(order, dtype=bool) if holes is None else np.array([holes])
    total = int(np.count_nonzero(~hole_mask))
    return BoardSnapshot(order=order, holes=hole_mask, total=total)


# a well-known open tour on 5x5
TOUR_5X5 = [
    [1, 14, 9, 20, 3],
    [24, 19, 2, 15, 10],
    [13, 8, 25, 4, 21],
    [18, 23, 6, 11, 16],
    [7, 12, 17, 22, 5],
]


def test_known_tour_validates():
    snap = _snapshot(TOUR_5X5)
    assert has_contiguous_order(snap)
    assert validate_tour(snap)
    path = path_from_order(snap.order)
    assert path[0] == (0, 0, 0)
    assert path[-1] == (0, 2, 2)
    assert not closes(path)


def test_swapped_cells_break_the_path():
    rows = [row[:] for row in TOUR_5X5]
    rows[0][0], rows[0][1] = rows[0][1], rows[0][0]
    snap = _snapshot(rows)
    assert has_contiguous_order(snap)
    assert not validate_tour(snap)


def test_gap_in_order():
    rows = [row[:] for row in TOUR_5X5]
    rows[2][2] = UNVISITED
    assert not has_contiguous_order(_snapshot(rows))


def test_holes_are_ignored():
    rows = [[1, 0], [0, 0]]
    holes = [[False, True], [True, True]]
    snap = _snapshot(rows, holes)
    assert snap.total == 1
    assert has_contiguous_order(snap)


def test_knight_jumps():
    assert is_knight_jump((0, 0, 0), (0, 1, 2))
    assert not is_knight_jump((0, 0, 0), (0, 1, 1))
    assert not is_knight_jump((0, 0, 0), (1, 0, 2))
    assert is_knight_jump((0, 0, 0), (1, 0, 2), three_d=True)
    assert is_knight_path([(0, 0, 0), (0, 2, 1), (0, 4, 2)])
    assert closes([]) is None
