#! /usr/bin/env python
"""
Warnsdorff's rule: always jump to the square with the fewest onward moves,
so the knight clears out the awkward squares before it can strand them.

Ties between equally constrained squares are broken by distance to the board
centre for closed tours, and at random otherwise. On the last step of a
closed tour only squares that can jump back to the start are considered.
"""

from dataclasses import dataclass
from enum import IntEnum
import logging
import math
import random
from typing import List, Optional

from knight_tour.board import Cell
from knight_tour.moves import MoveGenerator

logger = logging.getLogger(__name__)


class PriorityKind(IntEnum):
    FORCED_CLOSE = 0
    NORMAL = 1


@dataclass(frozen=True, order=True)
class Priority:
    """Lower sorts first. A forced closing move beats every degree."""

    kind: PriorityKind
    degree: int = 0

    @classmethod
    def forced_close(cls) -> "Priority":
        return cls(PriorityKind.FORCED_CLOSE)

    @classmethod
    def normal(cls, degree: int) -> "Priority":
        return cls(PriorityKind.NORMAL, degree)

    def __repr__(self) -> str:
        if self.kind == PriorityKind.FORCED_CLOSE:
            return "ForcedClose"
        return f"Normal({self.degree})"


@dataclass(frozen=True)
class Candidate:
    cell: Cell
    priority: Priority


def rank_candidates(
    moves: MoveGenerator,
    current: Cell,
    moves_remaining: int,
    start: Cell,
    closed: bool,
) -> List[Candidate]:
    """Occupiable next cells with their priority, in offset order."""
    board = moves.board
    closing = closed and moves_remaining == 1
    candidates = []
    for cell in moves.candidate_moves(*current):
        if not board.is_occupiable(*cell):
            continue
        if closing:
            if not moves.reaches_start(cell, start):
                continue
            candidates.append(Candidate(cell, Priority.forced_close()))
        else:
            candidates.append(Candidate(cell, Priority.normal(moves.degree(*cell))))
    return candidates


def best_candidates(candidates: List[Candidate]) -> List[Candidate]:
    if not candidates:
        return []
    best = min(c.priority for c in candidates)
    return [c for c in candidates if c.priority == best]


def closest_to_center(candidates: List[Candidate], size: int) -> Optional[Candidate]:
    """Row/column distance only. The first of equally close cells wins."""
    center = (size - 1) / 2.0
    chosen = None
    min_dist = math.inf
    for cand in candidates:
        _, row, col = cand.cell
        dist = math.sqrt((row - center) ** 2 + (col - center) ** 2)
        if dist < min_dist:
            min_dist = dist
            chosen = cand
    return chosen


def break_tie(
    candidates: List[Candidate], size: int, closed: bool, rng: random.Random
) -> Candidate:
    if len(candidates) == 1:
        return candidates[0]
    if closed:
        central = closest_to_center(candidates, size)
        if central is not None:
            return central
    return rng.choice(candidates)


def select_next_move(
    moves: MoveGenerator,
    current: Cell,
    moves_remaining: int,
    start: Cell,
    closed: bool,
    rng: random.Random,
) -> Optional[Cell]:
    """Next cell for the knight, or None when it has nowhere to go."""
    candidates = rank_candidates(moves, current, moves_remaining, start, closed)
    tied = best_candidates(candidates)
    if not tied:
        logger.debug(f"No move from {current} with {moves_remaining} to go")
        return None
    chosen = break_tie(tied, moves.board.size, closed, rng)
    logger.debug(f"{current} -> {chosen.cell} {chosen.priority!r} of {len(tied)} tied")
    return chosen.cell
