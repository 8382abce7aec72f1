# renderer.py

import pygame
import constants


class GlyphRenderer:
    """
    Paints a heat grid onto a pygame surface as a grid of character cells.

    Data Contract:
    - Inputs: font (pygame.font.Font) - Font the palette glyphs were rendered with.
    - Outputs: None.
    - Side Effects: draw() overwrites the target surface.
    - Invariants: Every cell is cell_width x cell_height pixels. Heat 0 cells
      are left as background.
    """
    def __init__(self, font: pygame.font.Font, glyph: str = constants.DEFAULT_GLYPH):
        width, height = font.size(glyph)
        # Zero-width glyphs would make the grid infinite
        self.cell_width = max(width, 1)
        self.cell_height = max(height, 1)

    def grid_size(self, pixel_width: int, pixel_height: int) -> tuple:
        """
        Number of (columns, rows) that fit the surface. One extra row is added
        for the source row, which is simulated but never drawn.
        """
        columns = max(pixel_width, 0) // self.cell_width
        rows = max(pixel_height, 0) // self.cell_height
        if columns == 0 or rows == 0:
            return columns, rows
        return columns, rows + 1

    def draw(self, surface: pygame.Surface, animation):
        surface.fill(constants.BACKGROUND)
        indices = animation.heat_indices()
        if indices.size == 0:
            return

        glyphs = animation.palette.glyphs
        ys, xs = indices.nonzero()
        surface.blits(
            [
                (glyphs[heat], (x * self.cell_width, y * self.cell_height))
                for x, y, heat in zip(xs.tolist(), ys.tolist(), indices[ys, xs].tolist())
            ],
            False
        )
