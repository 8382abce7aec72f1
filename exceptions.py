# exceptions.py

"""Custom exceptions for the fire animation.

Exception Hierarchy:
    DoomFireError (base)
    ├── ConfigurationError - Unreadable or malformed config file
    ├── UnknownPaletteError - Requested color ramp is not registered
    └── GridDimensionError - Negative grid dimensions (also a ValueError)
"""

from typing import Iterable, Optional


class DoomFireError(Exception):
    """Base exception for all fire animation errors."""

    pass


class ConfigurationError(DoomFireError):
    """Raised when the configuration file cannot be used.

    Attributes:
        message (str): Explanation of the problem.
        config_path (str): Path to the configuration file, if applicable.
    """

    def __init__(self, message: str, config_path: Optional[str] = None):
        self.message = message
        self.config_path = config_path
        if config_path:
            message = f"{message} (config: {config_path})"
        super().__init__(message)


class UnknownPaletteError(DoomFireError):
    """Raised when a palette name is not one of the registered ramps.

    Attributes:
        name (str): The name that was requested.
        available (list): Sorted names of the registered ramps.
    """

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Unknown palette '{name}'. Available: {', '.join(self.available)}"
        )


class GridDimensionError(DoomFireError, ValueError):
    """Raised when a heat grid is requested with a negative width or height."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"Grid dimensions must be non-negative, got {width}x{height}")
