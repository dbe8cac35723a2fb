from knight_tour.config import BoardStyle, TourConfig
from knight_tour.render import (
    format_board,
    format_failure,
    format_path,
    format_statistics,
)
from knight_tour.tour import KnightsTour


def _stuck_3x3():
    tour = KnightsTour.from_options(size=3, seed=0)
    tour.solve(0, 0, 0)
    return tour


def test_partial_board_shows_start_and_unvisited():
    tour = _stuck_3x3()
    text = format_board(tour.snapshot(), tour.config, closed=False)
    assert "KNIGHT'S TOUR SOLUTION" in text
    assert "| S 1 |" in text
    assert "|  .  |" in text
    assert "Visited Squares: 8/9" in text
    assert "COMPLETED" not in text


def test_complete_board_shows_end_marker():
    tour = KnightsTour.from_options(size=5, seed=42)
    assert tour.solve_with_random_start(100)
    snap = tour.snapshot()
    text = format_board(snap, tour.config, tour.is_tour_closed())
    assert " E25 " in text
    assert "OPEN TOUR COMPLETED!" in text
    compact = format_path(snap, tour.is_tour_closed())
    assert "PATH SUMMARY:" in compact
    assert "E = End (25)" in compact


def test_holes_are_marked():
    tour = KnightsTour(TourConfig(size=8, style=BoardStyle.WITH_HOLES), seed=4)
    snap = tour.snapshot()
    assert "  H  " in format_board(snap, tour.config, closed=False)
    assert " H" in format_path(snap, closed=False)


def test_path_columns_are_padded():
    tour = _stuck_3x3()
    lines = format_path(tour.snapshot(), closed=False).splitlines()
    assert lines[2] == "Layer 0:"
    rows = lines[3:6]
    assert rows[0].startswith("S ")
    assert all(len(row) == 5 for row in rows)
    assert rows[1][2] == "."
    assert "PATH SUMMARY:" not in lines


def test_statistics_and_failure_report():
    tour = _stuck_3x3()
    snap = tour.snapshot()
    stats = format_statistics(snap, tour.config, closed=False, elapsed_ms=1.25)
    assert "Board squares: 9" in stats
    assert "Computation time: 1.2ms" in stats or "Computation time: 1.3ms" in stats
    failure = format_failure(snap, tour.config)
    assert "No complete solution found" in failure
    assert "Visited: 8/9 squares" in failure
