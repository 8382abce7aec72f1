"""Shared pytest fixtures for the fire animation test suite.

pygame runs headless: the dummy video and audio drivers are selected before
pygame is imported anywhere.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest


class ScriptedRandom:
    """Stands in for np.random.Generator, replaying a fixed list of draws.

    random(size) returns the next `size` scripted values; once the script is
    exhausted it repeats `fill`. Every request is recorded.
    """

    def __init__(self, values=(), fill=0.0):
        self.values = list(values)
        self.fill = fill
        self.requests = []

    def random(self, size):
        self.requests.append(size)
        head, self.values = self.values[:size], self.values[size:]
        return np.array(head + [self.fill] * (size - len(head)), dtype=np.float64)


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture(scope="session")
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 16)
    pygame.font.quit()


@pytest.fixture
def red_palette(font):
    from palette import Palette
    return Palette.build("red", "#", font)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
