import pygame
import pytest

import constants
from exceptions import UnknownPaletteError
from palette import Palette, available_palettes, resolve_ramp


def test_available_palettes_are_sorted():
    assert available_palettes() == ["blue", "gray", "green", "red"]


@pytest.mark.parametrize("name", sorted(constants.PALETTES))
def test_every_ramp_covers_the_heat_scale(name):
    ramp = resolve_ramp(name)
    assert len(ramp) == constants.MAX_HEAT + 1
    assert all(isinstance(color, pygame.Color) for color in ramp)
    assert ramp[-1] == pygame.Color("#ffffff")


def test_ramp_order_is_coldest_first():
    ramp = resolve_ramp("red")
    assert ramp[0] == pygame.Color(7, 7, 7)
    assert ramp[1] == pygame.Color(0x1F, 7, 7)


def test_unknown_palette_lists_the_available_names():
    with pytest.raises(UnknownPaletteError) as excinfo:
        resolve_ramp("purple")

    assert excinfo.value.name == "purple"
    assert excinfo.value.available == ["blue", "gray", "green", "red"]
    assert "blue, gray, green, red" in str(excinfo.value)


def test_build_renders_one_glyph_per_heat_level(red_palette):
    assert len(red_palette) == constants.MAX_HEAT + 1
    assert red_palette.max_heat == constants.MAX_HEAT
    assert red_palette.name == "red"
    assert red_palette[0] is None
    assert all(isinstance(glyph, pygame.Surface) for glyph in red_palette.glyphs[1:])


def test_build_unknown_name_raises(font):
    with pytest.raises(UnknownPaletteError):
        Palette.build("purple", "#", font)


def test_palette_is_index_stable(font):
    first = Palette.build("green", "#", font)
    second = Palette.build("green", "#", font)
    assert first.colors == second.colors
    assert first[12] is first[12]


def test_palette_entries_are_immutable(red_palette):
    assert isinstance(red_palette.glyphs, tuple)
    assert isinstance(red_palette.colors, tuple)


def test_mismatched_palette_is_rejected():
    with pytest.raises(ValueError):
        Palette("broken", (pygame.Color("#000000"),), (None, None))
