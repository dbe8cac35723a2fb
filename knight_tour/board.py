#! /usr/bin/env python
"""
Board model for the knight's tour: visit order and hole flags per cell,
indexed (layer, row, col).
"""

from dataclasses import dataclass
import logging
import random
from typing import Iterator, Optional, Tuple

import numpy as np

from knight_tour.config import HOLE_FRACTION, BoardStyle, TourConfig

logger = logging.getLogger(__name__)

UNVISITED = -1

Cell = Tuple[int, int, int]


@dataclass(frozen=True)
class BoardSnapshot:
    """Read-only copy of a board, for rendering and reporting."""

    order: np.ndarray
    holes: np.ndarray
    total: int
    start: Optional[Cell] = None

    @property
    def visited(self) -> int:
        return int(np.count_nonzero(self.order != UNVISITED))

    def is_hole(self, layer: int, row: int, col: int) -> bool:
        return bool(self.holes[layer, row, col])

    def order_at(self, layer: int, row: int, col: int) -> int:
        return int(self.order[layer, row, col])


class Board:
    def __init__(self, config: TourConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        shape = (config.layers, config.size, config.size)
        self.order = np.full(shape, UNVISITED, dtype=np.int32)
        self.holes = np.zeros(shape, dtype=bool)
        if config.style == BoardStyle.WITH_HOLES:
            self._place_holes()

    def _place_holes(self):
        draws = self.config.cells // HOLE_FRACTION
        placed = 0
        for _ in range(draws):
            layer = self.rng.randrange(self.config.layers)
            row = self.rng.randrange(self.config.size)
            col = self.rng.randrange(self.config.size)
            if self.is_corner(layer, row, col) or self.holes[layer, row, col]:
                continue
            self.holes[layer, row, col] = True
            placed += 1
        logger.info(f"Created {placed} holes from {draws} draws")

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def layers(self) -> int:
        return self.config.layers

    @property
    def hole_count(self) -> int:
        return int(np.count_nonzero(self.holes))

    @property
    def total_squares(self) -> int:
        return max(self.config.cells - self.hole_count, 0)

    @property
    def visited_count(self) -> int:
        return int(np.count_nonzero(self.order != UNVISITED))

    def is_corner(self, layer: int, row: int, col: int) -> bool:
        last = self.size - 1
        return row in (0, last) and col in (0, last)

    def in_bounds(self, layer: int, row: int, col: int) -> bool:
        return (
            0 <= layer < self.layers and 0 <= row < self.size and 0 <= col < self.size
        )

    def is_hole(self, layer: int, row: int, col: int) -> bool:
        if not self.in_bounds(layer, row, col):
            return False
        return bool(self.holes[layer, row, col])

    def is_occupiable(self, layer: int, row: int, col: int) -> bool:
        if not self.in_bounds(layer, row, col):
            return False
        if self.config.style == BoardStyle.WITH_HOLES and self.holes[layer, row, col]:
            return False
        return bool(self.order[layer, row, col] == UNVISITED)

    def mark(self, layer: int, row: int, col: int, order: int):
        if not self.is_occupiable(layer, row, col):
            raise ValueError(f"Cell {(layer, row, col)} is not free to visit")
        self.order[layer, row, col] = order

    def reset(self):
        """Clear all visits. Holes and configuration are kept."""
        self.order.fill(UNVISITED)

    def open_cells(self) -> Iterator[Cell]:
        """Non-hole cells in (layer, row, col) order."""
        for layer, row, col in np.argwhere(~self.holes):
            yield int(layer), int(row), int(col)

    def find_order(self, order: int) -> Optional[Cell]:
        found = np.argwhere(self.order == order)
        if len(found) == 0:
            return None
        layer, row, col = found[0]
        return int(layer), int(row), int(col)

    def snapshot(self, start: Optional[Cell] = None) -> BoardSnapshot:
        order = self.order.copy()
        holes = self.holes.copy()
        order.flags.writeable = False
        holes.flags.writeable = False
        return BoardSnapshot(
            order=order, holes=holes, total=self.total_squares, start=start
        )
