# controls.py

"""
Keyboard bindings for the running animation.

Each KEYDOWN is translated into an Action; the animation applies it. Letter
and punctuation keys are matched on the typed character so they follow the
keyboard layout, arrows are matched on the key code.
"""

from enum import Enum
import pygame


class Action(Enum):
    QUIT = "quit"
    WIND_LEFT = "wind_left"
    WIND_RIGHT = "wind_right"
    TOGGLE_FLICKER = "toggle_flicker"
    DECAY_UP = "decay_up"
    DECAY_DOWN = "decay_down"
    FASTER = "faster"
    SLOWER = "slower"
    RESET = "reset"


CHAR_BINDINGS = {
    "q": Action.QUIT,
    "h": Action.WIND_LEFT,
    "l": Action.WIND_RIGHT,
    "f": Action.TOGGLE_FLICKER,
    "j": Action.DECAY_UP,
    "k": Action.DECAY_DOWN,
    "]": Action.FASTER,
    "[": Action.SLOWER,
    "0": Action.RESET,
    " ": Action.RESET,
}

KEY_BINDINGS = {
    pygame.K_LEFT: Action.WIND_LEFT,
    pygame.K_RIGHT: Action.WIND_RIGHT,
    pygame.K_DOWN: Action.DECAY_UP,
    pygame.K_UP: Action.DECAY_DOWN,
}


def action_for_key(key: int, unicode: str = "", mod: int = 0):
    """Returns the Action bound to a key press, or None if the key is unbound."""
    if key == pygame.K_c and mod & pygame.KMOD_CTRL:
        return Action.QUIT
    if key in KEY_BINDINGS:
        return KEY_BINDINGS[key]
    return CHAR_BINDINGS.get(unicode)
