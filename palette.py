# palette.py

import logging
import pygame
import constants
from exceptions import UnknownPaletteError

logger = logging.getLogger("doom_fire")


def available_palettes():
    """Sorted names of the registered color ramps."""
    return sorted(constants.PALETTES)


def resolve_ramp(name: str) -> tuple:
    """
    Looks up a named ramp and converts it to pygame colors.

    Data Contract:
    - Inputs: name (str) - A key of constants.PALETTES.
    - Outputs: A tuple of pygame.Color, coldest first.
    - Side Effects: None.
    - Invariants: Raises UnknownPaletteError for unregistered names.
    """
    if name not in constants.PALETTES:
        raise UnknownPaletteError(name, constants.PALETTES)
    return tuple(pygame.Color(hex_color) for hex_color in constants.PALETTES[name])


class Palette:
    """
    An immutable, index-aligned mapping from heat level to a pre-rendered glyph.

    Entry i holds the ramp color for heat i and the glyph rendered in that
    color. Entry 0 is the background: it has no glyph and is never painted.

    Data Contract:
    - Inputs:
        - name (str): The ramp name, kept for logging and display.
        - colors (tuple): pygame.Color per heat level.
        - glyphs (tuple): pygame.Surface per heat level, None at index 0.
    - Outputs: None.
    - Side Effects: None after construction.
    - Invariants: len(colors) == len(glyphs); glyphs[0] is None.
    """
    def __init__(self, name: str, colors: tuple, glyphs: tuple):
        if len(colors) != len(glyphs):
            raise ValueError(f"Palette '{name}' has {len(colors)} colors but {len(glyphs)} glyphs")
        self.name = name
        self.colors = tuple(colors)
        self.glyphs = tuple(glyphs)

    @classmethod
    def build(cls, name: str, glyph: str, font: pygame.font.Font) -> "Palette":
        """
        Renders `glyph` once per heat level. This is the only place text is
        rendered; drawing a cell afterwards is a single lookup.
        """
        colors = resolve_ramp(name)
        if len(colors) != constants.MAX_HEAT + 1:
            raise ValueError(
                f"Palette '{name}' has {len(colors)} colors, expected {constants.MAX_HEAT + 1}"
            )

        glyphs = [None]
        for color in colors[1:]:
            glyphs.append(font.render(glyph, True, color))

        logger.info(f"Palette '{name}' built: {len(glyphs)} levels, glyph {glyph!r}.")
        return cls(name, colors, tuple(glyphs))

    @property
    def max_heat(self) -> int:
        return len(self.glyphs) - 1

    def __len__(self):
        return len(self.glyphs)

    def __getitem__(self, heat: int):
        return self.glyphs[heat]
