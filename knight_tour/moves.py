#! /usr/bin/env python
"""Knight move offsets and the queries built on them."""

from typing import List, Tuple

from knight_tour.board import Board, Cell

# (d_layer, d_row, d_col)
MOVES_2D: Tuple[Tuple[int, int, int], ...] = (
    (0, 2, 1),
    (0, 1, 2),
    (0, -1, 2),
    (0, -2, 1),
    (0, -2, -1),
    (0, -1, -2),
    (0, 1, -2),
    (0, 2, -1),
)

MOVES_3D: Tuple[Tuple[int, int, int], ...] = MOVES_2D + (
    # row stays, jump across layers and columns
    (1, 0, 2),
    (2, 0, 1),
    (2, 0, -1),
    (1, 0, -2),
    (-1, 0, -2),
    (-2, 0, -1),
    (-2, 0, 1),
    (-1, 0, 2),
    # column stays, jump across layers and rows
    (1, 2, 0),
    (2, 1, 0),
    (2, -1, 0),
    (1, -2, 0),
    (-1, -2, 0),
    (-2, -1, 0),
    (-2, 1, 0),
    (-1, 2, 0),
)


class MoveGenerator:
    def __init__(self, board: Board):
        self.board = board
        config = board.config
        self.offsets = MOVES_3D if config.uses_3d_moves else MOVES_2D
        self.layer_moves = config.dimension > 2

    def candidate_moves(self, layer: int, row: int, col: int) -> List[Cell]:
        """All cells one jump away, on the board or not."""
        moves = []
        for d_layer, d_row, d_col in self.offsets:
            next_layer = layer + d_layer if self.layer_moves else layer
            moves.append((next_layer, row + d_row, col + d_col))
        return moves

    def degree(self, layer: int, row: int, col: int) -> int:
        count = 0
        for cell in self.candidate_moves(layer, row, col):
            if self.board.is_occupiable(*cell):
                count += 1
        return count

    def reaches_start(self, cell: Cell, start: Cell) -> bool:
        return start in self.candidate_moves(*cell)
