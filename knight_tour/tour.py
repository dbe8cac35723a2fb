#! /usr/bin/env python
"""
Knight's tour driver. Marks the start, then keeps asking the Warnsdorff
selector for the next square until the board is full or the knight is stuck.

Note! This does not guarantee a full knight's tour: there is no backtracking.
A failed attempt is abandoned, and solve_with_random_start just tries again
from somewhere else.
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
import logging
import random
from typing import List, Optional, Tuple

from knight_tour.board import Board, BoardSnapshot, Cell
from knight_tour.config import DEFAULT_LAYERS, DEFAULT_SIZE, BoardStyle, TourConfig
from knight_tour.heuristic import select_next_move
from knight_tour.moves import MoveGenerator
from knight_tour.validation import path_from_order

logger = logging.getLogger(__name__)


class TourOutcome(Enum):
    IDLE = "idle"
    REJECTED = "rejected"  # start cell not free
    STUCK = "stuck"  # no move before the board was full
    UNCLOSED = "unclosed"  # board full, last cell cannot reach the start
    OPEN_COMPLETE = "open complete"
    CLOSED_COMPLETE = "closed complete"

    @property
    def completed(self) -> bool:
        return self in (TourOutcome.OPEN_COMPLETE, TourOutcome.CLOSED_COMPLETE)


@dataclass
class TourState:
    total: int
    visited: int = 0
    step: int = 0
    start: Optional[Cell] = None
    current: Optional[Cell] = None
    outcome: TourOutcome = TourOutcome.IDLE

    @property
    def moves_remaining(self) -> int:
        return self.total - self.visited


class KnightsTour:
    def __init__(
        self,
        config: TourConfig,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self.config = config
        self.rng = rng if rng is not None else random.Random(seed)
        self.board = Board(config, self.rng)
        self.moves = MoveGenerator(self.board)
        self.state = TourState(total=self.board.total_squares)
        self.attempts = 0
        self.outcome_counts: Counter = Counter()
        self.last_outcome = TourOutcome.IDLE

    @classmethod
    def from_options(
        cls,
        size: int = DEFAULT_SIZE,
        layers: int = DEFAULT_LAYERS,
        style: BoardStyle = BoardStyle.REGULAR,
        dimension: int = 2,
        closed: bool = False,
        **kwargs,
    ) -> "KnightsTour":
        config = TourConfig(
            size=size, layers=layers, style=style, dimension=dimension, closed=closed
        )
        return cls(config, **kwargs)

    @property
    def visited(self) -> int:
        return self.state.visited

    @property
    def total(self) -> int:
        return self.state.total

    def reset(self):
        self.board.reset()
        self.state = TourState(total=self.board.total_squares)
        self.last_outcome = TourOutcome.IDLE

    def _visit(self, cell: Cell):
        self.state.step += 1
        self.board.mark(*cell, self.state.step)
        self.state.visited += 1
        self.state.current = cell

    def _finish(self, outcome: TourOutcome) -> bool:
        self.state.outcome = outcome
        self.last_outcome = outcome
        self.outcome_counts[outcome] += 1
        return outcome.completed

    def solve(self, layer: int, row: int, col: int) -> bool:
        """
        A rejected start leaves the board and state of the previous attempt
        alone; only last_outcome reports the rejection.
        """
        start = (layer, row, col)
        if not self.board.is_occupiable(*start):
            logger.info(f"Invalid starting position {start}")
            self.last_outcome = TourOutcome.REJECTED
            return False

        state = TourState(total=self.board.total_squares, start=start)
        self.state = state
        self._visit(start)

        while state.visited < state.total:
            next_cell = select_next_move(
                self.moves,
                state.current,
                state.moves_remaining,
                start,
                self.config.closed,
                self.rng,
            )
            if next_cell is None:
                logger.info(
                    f"Stuck at move {state.step}, visited {state.visited} of {state.total}"
                )
                return self._finish(TourOutcome.STUCK)
            self._visit(next_cell)

        if not self.config.closed:
            return self._finish(TourOutcome.OPEN_COMPLETE)
        if not self.moves.reaches_start(state.current, start):
            logger.info("Tour completed but not closed")
            return self._finish(TourOutcome.UNCLOSED)
        logger.info("Closed tour achieved")
        return self._finish(TourOutcome.CLOSED_COMPLETE)

    def random_start(self) -> Cell:
        return self.rng.choice(list(self.board.open_cells()))

    def solve_with_random_start(self, max_attempts: int) -> bool:
        self.attempts = 0
        for _ in range(max_attempts):
            self.attempts += 1
            self.reset()
            start = self.random_start()
            if self.solve(*start):
                logger.info(
                    f"Found solution starting at {start} after {self.attempts} attempt(s)"
                )
                return True
        logger.info(f"No solution in {max_attempts} attempts")
        return False

    def has_valid_solution(self) -> bool:
        return self.state.visited > 0 and self.state.visited == self.state.total

    def is_tour_closed(self) -> bool:
        if not self.has_valid_solution():
            return False
        last = self.board.find_order(self.state.total)
        if last is None or self.state.start is None:
            return False
        return self.moves.reaches_start(last, self.state.start)

    def path(self) -> List[Cell]:
        return path_from_order(self.board.order)

    def snapshot(self) -> BoardSnapshot:
        return self.board.snapshot(start=self.state.start)


def knights_tour(
    start: Tuple[int, int], size: int, closed: bool = False, seed: Optional[int] = None
) -> List[Tuple[int, int]]:
    """Single attempt on a plain size x size board; returns the (row, col) path."""
    tour = KnightsTour(TourConfig(size=size, closed=closed), seed=seed)
    tour.solve(0, start[0], start[1])
    return [(row, col) for _, row, col in tour.path()]
