"""Board configuration for the knight's tour solver."""

from dataclasses import dataclass
from enum import Enum
import logging

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 8
MIN_SIZE = 3
LARGE_SIZE = 20  # anything above this gets slow
DEFAULT_LAYERS = 1
HOLE_FRACTION = 4  # one placement draw per 4 cells, ~25% holes

# retry budgets used by the command line front end
RETRIES_AFTER_FAILED_START = {True: 2000, False: 500}
RETRIES_RANDOM_START = {True: 3000, False: 1000}


class BoardStyle(Enum):
    REGULAR = "regular"
    WITH_HOLES = "holes"
    HIGH_DIMENSIONAL = "high"


@dataclass(frozen=True)
class TourConfig:
    size: int = DEFAULT_SIZE
    layers: int = DEFAULT_LAYERS
    style: BoardStyle = BoardStyle.REGULAR
    dimension: int = 2
    closed: bool = False

    @property
    def cells(self) -> int:
        return self.layers * self.size * self.size

    @property
    def uses_3d_moves(self) -> bool:
        return self.dimension != 2 and self.style == BoardStyle.HIGH_DIMENSIONAL

    def describe(self) -> str:
        return (
            f"{self.size}x{self.size}, {self.layers} layer(s), {self.style.name}, "
            f"{self.dimension}D, {'closed' if self.closed else 'open'} tour"
        )


def normalize_config(
    size: int = DEFAULT_SIZE,
    layers: int = DEFAULT_LAYERS,
    style: BoardStyle = BoardStyle.REGULAR,
    dimension: int = 2,
    closed: bool = False,
) -> TourConfig:
    """
    Apply the corrections the interactive front end always made before
    building a board. TourConfig itself takes whatever it is given.
    """
    if size < MIN_SIZE:
        logger.warning(f"Board size {size} too small, using minimum size {MIN_SIZE}")
        size = MIN_SIZE
    elif size > LARGE_SIZE:
        logger.warning(f"Board size {size} may take longer to compute")

    if layers < 1:
        logger.warning(f"Invalid number of layers {layers}, using 1")
        layers = 1

    if style == BoardStyle.HIGH_DIMENSIONAL:
        if dimension not in (2, 3):
            logger.warning(f"Only 2D and 3D supported, using 3D instead of {dimension}D")
            dimension = 3
        if dimension == 3 and layers == 1:
            logger.warning("3D board needs more than one layer, using 3 layers")
            layers = 3
    else:
        dimension = 2

    if closed and size % 2 == 1:
        logger.info("Closed tours on odd-sized boards are very rare")

    return TourConfig(
        size=size, layers=layers, style=style, dimension=dimension, closed=closed
    )
