# fire_animation.py

from dataclasses import dataclass
from enum import Enum
import logging
import numpy as np
import constants
import heat_grid
import propagation
from controls import Action

logger = logging.getLogger("doom_fire")


class AnimationState(Enum):
    UNINITIALIZED = "uninitialized"  # No grid, display size unknown
    RUNNING = "running"  # Grid allocated, receiving ticks
    STOPPED = "stopped"  # Quit requested


@dataclass
class SimulationParameters:
    """Tunable values applied uniformly to every cell on the next tick."""
    wind: int = 0
    decay_rate: float = constants.DEFAULT_DECAY
    flicker: bool = True
    tick_interval_ms: int = constants.DEFAULT_TICK_INTERVAL_MS

    def __post_init__(self):
        self.decay_rate = max(float(self.decay_rate), 0.0)
        self.tick_interval_ms = max(int(self.tick_interval_ms), constants.MIN_TICK_INTERVAL_MS)


class FireAnimation:
    """
    Owns the heat grid, the palette, the simulation parameters and the random
    generator, and drives ignition and propagation.

    Data Contract:
    - Inputs:
        - palette (Palette): Pre-rendered glyph per heat level.
        - parameters (SimulationParameters): Initial tunables.
        - rng (np.random.Generator): The only source of randomness, read
          through a DrawStream so each tick takes exactly the draws it uses.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: Reallocates the grid on every resize.
    - Invariants: The grid exists exactly when the state is not UNINITIALIZED.
      Parameter changes never touch the grid.
    """
    def __init__(self, palette, parameters: SimulationParameters = None, rng: np.random.Generator = None):
        self.palette = palette
        self.parameters = parameters or SimulationParameters()
        self.rng = rng if rng is not None else np.random.default_rng()
        # Outlives resizes so the random sequence never skips a value
        self.draws = propagation.DrawStream(self.rng)
        self.grid = None
        self.state = AnimationState.UNINITIALIZED
        self.tick_count = 0

    @property
    def is_running(self) -> bool:
        return self.state is AnimationState.RUNNING

    # --- Events ---

    def resize(self, width: int, height: int):
        """Discards the current grid, allocates a new one and ignites it."""
        if self.state is AnimationState.STOPPED:
            return
        self.grid = heat_grid.allocate(width, height)
        heat_grid.ignite(self.grid)
        self.state = AnimationState.RUNNING
        logger.info(f"Grid reset to {width}x{height} cells.")

    def tick(self) -> bool:
        """
        Runs one propagation step. Returns True if the grid was advanced.
        """
        if not self.is_running or self.grid.is_empty:
            return False
        p = self.parameters
        propagation.step(self.grid, p.wind, p.decay_rate, p.flicker, self.draws)
        self.tick_count += 1
        return True

    def stop(self):
        self.state = AnimationState.STOPPED
        logger.info(f"Animation stopped after {self.tick_count} ticks.")

    # --- Parameter changes ---

    def nudge_wind(self, delta: int):
        self.parameters.wind += delta
        logger.debug(f"Wind set to {self.parameters.wind}.")

    def adjust_decay(self, delta: float):
        # Below zero is clamped, not reported
        self.parameters.decay_rate = max(self.parameters.decay_rate + delta, 0.0)
        logger.debug(f"Decay set to {self.parameters.decay_rate:.1f}.")

    def adjust_tick_interval(self, delta_ms: int):
        self.parameters.tick_interval_ms = max(
            self.parameters.tick_interval_ms + delta_ms,
            constants.MIN_TICK_INTERVAL_MS
        )
        logger.debug(f"Tick interval set to {self.parameters.tick_interval_ms}ms.")

    def toggle_flicker(self):
        self.parameters.flicker = not self.parameters.flicker
        logger.debug(f"Flicker {'on' if self.parameters.flicker else 'off'}.")

    def reset_parameters(self):
        """Restores wind, decay and tick interval. Flicker keeps its current value."""
        self.parameters.wind = 0
        self.parameters.decay_rate = constants.DEFAULT_DECAY
        self.parameters.tick_interval_ms = constants.RESET_TICK_INTERVAL_MS
        logger.debug("Parameters reset.")

    def apply(self, action: Action):
        """Dispatches a key binding action."""
        if action is Action.QUIT:
            self.stop()
        elif action is Action.WIND_LEFT:
            self.nudge_wind(-1)
        elif action is Action.WIND_RIGHT:
            self.nudge_wind(1)
        elif action is Action.TOGGLE_FLICKER:
            self.toggle_flicker()
        elif action is Action.DECAY_UP:
            self.adjust_decay(constants.DECAY_STEP)
        elif action is Action.DECAY_DOWN:
            self.adjust_decay(-constants.DECAY_STEP)
        elif action is Action.FASTER:
            self.adjust_tick_interval(-constants.TICK_INTERVAL_STEP_MS)
        elif action is Action.SLOWER:
            self.adjust_tick_interval(constants.TICK_INTERVAL_STEP_MS)
        elif action is Action.RESET:
            self.reset_parameters()

    # --- Render support ---

    def heat_indices(self) -> np.ndarray:
        """
        Palette indices for the displayed rows, shape (height - 1, width).
        The bottom source row is not displayed.
        """
        if self.grid is None or self.grid.height < 2:
            return np.zeros((0, 0 if self.grid is None else self.grid.width), dtype=np.int32)
        return self.grid.rows()[:-1]

    def get_stats(self) -> dict:
        """Runtime values for throttled debug logging."""
        stats = {
            'state': self.state.value,
            'tick': self.tick_count,
            'wind': self.parameters.wind,
            'decay': self.parameters.decay_rate,
            'flicker': self.parameters.flicker,
            'tick_interval_ms': self.parameters.tick_interval_ms,
        }
        if self.grid is not None and not self.grid.is_empty:
            visible = self.heat_indices()
            stats['live_cells'] = int(np.count_nonzero(visible))
            stats['mean_heat'] = float(visible.mean()) if visible.size else 0.0
        return stats
