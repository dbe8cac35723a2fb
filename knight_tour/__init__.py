"""Knight's tour by Warnsdorff's rule on 2D/3D boards, with or without holes."""

from knight_tour.config import BoardStyle, TourConfig, normalize_config
from knight_tour.tour import KnightsTour, TourOutcome, TourState, knights_tour

__all__ = [
    "BoardStyle",
    "KnightsTour",
    "TourConfig",
    "TourOutcome",
    "TourState",
    "knights_tour",
    "normalize_config",
]
