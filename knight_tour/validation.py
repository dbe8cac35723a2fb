#! /usr/bin/env python
"""Checks on a finished board that do not trust the solver's own counters."""

from typing import List, Optional

import numpy as np

from knight_tour.board import UNVISITED, BoardSnapshot, Cell
from knight_tour.moves import MOVES_2D, MOVES_3D


def path_from_order(order: np.ndarray) -> List[Cell]:
    """Visited cells sorted by visit order."""
    visited = np.argwhere(order != UNVISITED)
    steps = sorted(
        (int(order[tuple(cell)]), (int(cell[0]), int(cell[1]), int(cell[2])))
        for cell in visited
    )
    return [cell for _, cell in steps]


def is_knight_jump(a: Cell, b: Cell, three_d: bool = False) -> bool:
    delta = (b[0] - a[0], b[1] - a[1], b[2] - a[2])
    return delta in (MOVES_3D if three_d else MOVES_2D)


def has_contiguous_order(snapshot: BoardSnapshot) -> bool:
    """Non-hole cells hold exactly 1..total, each once."""
    values = snapshot.order[~snapshot.holes]
    if len(values) != snapshot.total:
        return False
    return np.array_equal(np.sort(values), np.arange(1, snapshot.total + 1))


def is_knight_path(path: List[Cell], three_d: bool = False) -> bool:
    return all(is_knight_jump(a, b, three_d) for a, b in zip(path, path[1:]))


def validate_tour(snapshot: BoardSnapshot, three_d: bool = False) -> bool:
    if not has_contiguous_order(snapshot):
        return False
    return is_knight_path(path_from_order(snapshot.order), three_d)


def closes(path: List[Cell], three_d: bool = False) -> Optional[bool]:
    """Whether the last cell jumps back to the first; None for an empty path."""
    if not path:
        return None
    return is_knight_jump(path[-1], path[0], three_d)
