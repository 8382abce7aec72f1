import pygame
import pytest

from controls import Action, action_for_key


@pytest.mark.parametrize("key,unicode,expected", [
    (pygame.K_q, "q", Action.QUIT),
    (pygame.K_h, "h", Action.WIND_LEFT),
    (pygame.K_LEFT, "", Action.WIND_LEFT),
    (pygame.K_l, "l", Action.WIND_RIGHT),
    (pygame.K_RIGHT, "", Action.WIND_RIGHT),
    (pygame.K_f, "f", Action.TOGGLE_FLICKER),
    (pygame.K_j, "j", Action.DECAY_UP),
    (pygame.K_DOWN, "", Action.DECAY_UP),
    (pygame.K_k, "k", Action.DECAY_DOWN),
    (pygame.K_UP, "", Action.DECAY_DOWN),
    (pygame.K_RIGHTBRACKET, "]", Action.FASTER),
    (pygame.K_LEFTBRACKET, "[", Action.SLOWER),
    (pygame.K_0, "0", Action.RESET),
    (pygame.K_SPACE, " ", Action.RESET),
])
def test_bound_keys(key, unicode, expected):
    assert action_for_key(key, unicode) is expected


def test_ctrl_c_quits():
    assert action_for_key(pygame.K_c, "\x03", pygame.KMOD_LCTRL) is Action.QUIT


def test_plain_c_is_unbound():
    assert action_for_key(pygame.K_c, "c") is None


def test_unbound_key():
    assert action_for_key(pygame.K_x, "x") is None
