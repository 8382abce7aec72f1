# heat_grid.py

import logging
import numpy as np
from exceptions import GridDimensionError
import constants

logger = logging.getLogger("doom_fire")


class HeatGrid:
    """
    A width x height field of discrete heat values.

    Data Contract:
    - Inputs: width, height (int) - Dimensions in cells, both >= 0.
    - Outputs: None. The grid is plain storage.
    - Side Effects: None.
    - Invariants: `cells` is a flat, row-major int32 array of length
      width * height (index = y * width + x). Every value lies in
      [0, constants.MAX_HEAT].
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells = np.zeros(width * height, dtype=np.int32)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def rows(self) -> np.ndarray:
        """A (height, width) view of the cells. Writes go through to the grid."""
        return self.cells.reshape((self.height, self.width))

    def __getitem__(self, pos):
        x, y = pos
        return int(self.cells[y * self.width + x])

    def __setitem__(self, pos, heat):
        x, y = pos
        self.cells[y * self.width + x] = heat

    def __repr__(self):
        return f"HeatGrid(width={self.width}, height={self.height})"


def allocate(width: int, height: int) -> HeatGrid:
    """
    Creates a zero-filled grid. Zero dimensions give an empty grid on which
    every operation is a no-op.
    """
    if width < 0 or height < 0:
        raise GridDimensionError(width, height)
    return HeatGrid(width, height)


def ignite(grid: HeatGrid):
    """
    Sets every cell of the bottom row to MAX_HEAT. The bottom row is the
    perpetual heat source; propagation never writes to it.
    """
    if grid.is_empty:
        return
    start = (grid.height - 1) * grid.width
    grid.cells[start:start + grid.width] = constants.MAX_HEAT
    logger.debug(f"Ignited source row {grid.height - 1} across {grid.width} columns.")
