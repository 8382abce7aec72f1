import numpy as np
import pygame
import pytest

import constants
from fire_animation import FireAnimation, SimulationParameters
from renderer import GlyphRenderer


@pytest.fixture
def renderer(font):
    return GlyphRenderer(font, "#")


def test_cell_size_comes_from_the_font(font, renderer):
    assert (renderer.cell_width, renderer.cell_height) == font.size("#")


def test_grid_size_adds_the_hidden_source_row(renderer):
    width = renderer.cell_width * 10 + 1
    height = renderer.cell_height * 5
    assert renderer.grid_size(width, height) == (10, 6)


def test_grid_size_of_a_tiny_surface(renderer):
    assert renderer.grid_size(0, 100) == (0, 100 // renderer.cell_height)
    assert renderer.grid_size(renderer.cell_width - 1, 0) == (0, 0)


def _cell(pixels, renderer, x, y):
    cw, ch = renderer.cell_width, renderer.cell_height
    return pixels[x * cw:(x + 1) * cw, y * ch:(y + 1) * ch]


def test_draw_paints_only_hot_visible_cells(red_palette, renderer):
    animation = FireAnimation(red_palette, SimulationParameters(), np.random.default_rng(0))
    animation.resize(4, 3)
    animation.grid[(1, 1)] = constants.MAX_HEAT
    surface = pygame.Surface((4 * renderer.cell_width, 3 * renderer.cell_height))

    renderer.draw(surface, animation)

    pixels = pygame.surfarray.array3d(surface)
    assert _cell(pixels, renderer, 1, 1).any()
    assert not _cell(pixels, renderer, 0, 0).any()
    # Row 2 is the burning source row; it is never drawn
    assert not _cell(pixels, renderer, 2, 2).any()


def test_draw_before_the_first_resize_clears_the_surface(red_palette, renderer):
    animation = FireAnimation(red_palette)
    surface = pygame.Surface((20, 20))
    surface.fill((255, 0, 0))

    renderer.draw(surface, animation)

    assert not pygame.surfarray.array3d(surface).any()
