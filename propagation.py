# propagation.py

import numpy as np
import numba

# --- JIT-Compiled Fire Kernel ---
# The kernel is kept outside any class and operates only on NumPy arrays and
# plain scalars, as required by Numba's nopython mode. Random numbers are
# handed over as one block by DrawStream and consumed here in traversal order.

@numba.jit(nopython=True)
def _spread_fire_jit(cells, width, height, wind, decay_rate, flicker, draws):
    """
    Advances the flat heat array by one tick, in place.
    Columns are visited left to right and, within a column, rows from the top
    (y=1) down to the source row. Each cell pushes its cooled heat one row up,
    shifted by wind and flicker. Returns the number of draws consumed.
    """
    cursor = 0
    for x in range(width):
        for y in range(1, height):
            heat = cells[y * width + x]

            # A cold cell darkens the cell above it and draws nothing
            if heat == 0:
                cells[(y - 1) * width + x] = 0
                continue

            decay = int(draws[cursor] * decay_rate)
            cursor += 1

            jitter = 0
            if flicker:
                jitter = int(draws[cursor] * 3.0) - 1
                cursor += 1

            target_x = x + jitter + wind
            # Heat pushed past the side edges is lost
            if target_x < 0 or target_x >= width:
                continue

            new_heat = heat - decay
            if new_heat < 0:
                new_heat = 0
            cells[(y - 1) * width + target_x] = new_heat
    return cursor


def draws_needed(width: int, height: int, flicker: bool) -> int:
    """Upper bound on the uniforms a single step can consume."""
    if width <= 0 or height <= 1:
        return 0
    per_cell = 2 if flicker else 1
    return per_cell * width * (height - 1)


class DrawStream:
    """
    A sequential stream of uniforms in [0, 1) backed by a random generator.

    The kernel needs its draws as one array, but only uses some of them.
    window() tops the buffer up from the generator in blocks and consume()
    discards exactly the values that were used, so the unused tail is the
    start of the next window. The values handed out are therefore the
    generator's own sequence, one value per draw actually made.

    Data Contract:
    - Inputs: rng - A np.random.Generator, or any object whose random(size)
      returns that many floats in [0, 1).
    - Outputs: None.
    - Side Effects: Advances the generator when the buffer runs short.
    - Invariants: `consumed` counts every value ever consumed.
    """
    def __init__(self, rng):
        self.rng = rng
        self._buffer = np.empty(0, dtype=np.float64)
        self.consumed = 0

    @property
    def buffered(self) -> int:
        return self._buffer.size

    def window(self, count: int) -> np.ndarray:
        """The next `count` values, without consuming them."""
        missing = count - self._buffer.size
        if missing > 0:
            fresh = np.asarray(self.rng.random(missing), dtype=np.float64)
            self._buffer = np.concatenate((self._buffer, fresh))
        return self._buffer[:count]

    def consume(self, count: int):
        self._buffer = self._buffer[count:]
        self.consumed += count


def step(grid, wind: int, decay_rate: float, flicker: bool, draws: DrawStream) -> int:
    """
    Advances the grid by exactly one tick, mutating it in place.

    Data Contract:
    - Inputs:
        - grid (HeatGrid): The grid to advance.
        - wind (int): Signed column offset applied to every live cell.
        - decay_rate (float): Upper bound (exclusive) of the per-cell cooling.
        - flicker (bool): Adds a -1/0/+1 column jitter per live cell.
        - draws (DrawStream): Source of randomness, shared across ticks.
    - Outputs: The number of random values consumed.
    - Side Effects: Rewrites rows 0 .. height-2 of the grid. Advances the
      stream by exactly the number of values used.
    - Invariants: The bottom row is never written. Heat never increases.
      Targets outside [0, width) are dropped, never wrapped or clamped.
    """
    count = draws_needed(grid.width, grid.height, flicker)
    if count == 0:
        return 0

    used = _spread_fire_jit(
        grid.cells,
        grid.width,
        grid.height,
        int(wind),
        float(decay_rate),
        bool(flicker),
        draws.window(count)
    )
    draws.consume(used)
    return used
