#! /usr/bin/env python
"""Console tables for a board snapshot."""

from typing import List

from knight_tour.board import UNVISITED, BoardSnapshot
from knight_tour.config import TourConfig

RULE = "=" * 70


def _cell_label(snapshot: BoardSnapshot, layer: int, row: int, col: int) -> str:
    """'H' for holes, '.' unvisited, 'S'/'E' for start and end, else the order."""
    if snapshot.is_hole(layer, row, col):
        return "H"
    order = snapshot.order_at(layer, row, col)
    if order == UNVISITED:
        return "."
    if snapshot.start == (layer, row, col):
        return "S"
    if order == snapshot.total:
        return "E"
    return str(order)


def format_board(snapshot: BoardSnapshot, config: TourConfig, closed: bool) -> str:
    layers, size, _ = snapshot.order.shape
    lines = [
        RULE,
        "KNIGHT'S TOUR SOLUTION",
        RULE,
        f"Board Size: {size}x{size}",
        f"Layers: {layers}",
        f"Style: {config.style.name}",
        f"Dimension: {config.dimension}D",
        f"Tour Type: {'CLOSED' if config.closed else 'OPEN'}",
        f"Visited Squares: {snapshot.visited}/{snapshot.total}",
        f"Tour Status: {'CLOSED' if closed else 'OPEN'}",
        RULE,
    ]
    divider = "-" * (size * 6 + 1)
    for layer in range(layers):
        lines.append("")
        lines.append(f"LAYER {layer}:")
        lines.append(divider)
        for row in range(size):
            cells = []
            for col in range(size):
                label = _cell_label(snapshot, layer, row, col)
                order = snapshot.order_at(layer, row, col)
                # start and end keep their number next to the marker
                if label in ("S", "E"):
                    cells.append(f" {label}{order:2d} ")
                elif label in ("H", "."):
                    cells.append(f"  {label}  ")
                else:
                    cells.append(f" {label:>3} ")
            lines.append("|" + "|".join(cells) + "|")
            lines.append(divider)

    if snapshot.visited == snapshot.total:
        lines.append("")
        if config.closed and closed:
            lines.append("CLOSED TOUR ACHIEVED!")
            lines.append("  The knight ends one jump away from its starting square.")
        else:
            lines.append("OPEN TOUR COMPLETED!")
            lines.append("  All squares visited successfully.")
    return "\n".join(lines)


def format_path(snapshot: BoardSnapshot, closed: bool) -> str:
    """Compact grid, one line per row, columns padded to the widest order."""
    layers, size, _ = snapshot.order.shape
    width = len(str(snapshot.total))
    lines: List[str] = ["PATH VISUALIZATION:"]
    for layer in range(layers):
        lines.append("")
        lines.append(f"Layer {layer}:")
        for row in range(size):
            lines.append(
                " ".join(
                    f"{_cell_label(snapshot, layer, row, col):>{width}}"
                    for col in range(size)
                )
            )

    if snapshot.visited == snapshot.total and snapshot.start is not None:
        lines.append("")
        lines.append("PATH SUMMARY:")
        lines.append(f"S = Start ({snapshot.order_at(*snapshot.start)})")
        lines.append(f"E = End ({snapshot.total})")
        if closed:
            lines.append("-> Closed loop achieved!")
    return "\n".join(lines)


def format_statistics(
    snapshot: BoardSnapshot, config: TourConfig, closed: bool, elapsed_ms: float
) -> str:
    return "\n".join(
        [
            "=" * 50,
            "TOUR STATISTICS",
            "=" * 50,
            f"Board squares: {snapshot.total}",
            f"Tour type: {'Closed' if config.closed else 'Open'}",
            f"Status: {'Closed' if closed else 'Open'}",
            f"Computation time: {elapsed_ms:.1f}ms",
        ]
    )


def format_failure(snapshot: BoardSnapshot, config: TourConfig) -> str:
    return "\n".join(
        [
            RULE,
            "ERROR: No complete solution found!",
            RULE,
            "Configuration:",
            f"  Board: {config.size}x{config.size}",
            f"  Layers: {config.layers}",
            f"  Style: {config.style.name}",
            f"  Tour Type: {'Closed' if config.closed else 'Open'}",
            f"  Visited: {snapshot.visited}/{snapshot.total} squares",
            "",
            "Suggestions:",
            "1. Try a different starting position",
            "2. Try an open tour instead of closed",
            "3. Reduce board size",
            "4. Remove holes from board",
            "5. Try more random attempts",
            RULE,
        ]
    )
