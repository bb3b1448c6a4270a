"""
Shared fixtures. pygame runs headless for the whole test session.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from blockflap.data_models import GameSession
from blockflap.physics_core import PhysicsCore


class FakeRenderer:
    """Records draw calls and the block height at draw time."""

    def __init__(self):
        self.calls = []
        self.drawn_y = []

    def clear(self):
        self.calls.append("clear")

    def draw_world(self, session):
        self.calls.append("world")
        self.drawn_y.append(session.player.y)

    def draw_game_over(self):
        self.calls.append("game_over")


class FixedRandom(random.Random):
    """Always lands the gap in the middle of its range."""

    def random(self):
        return 0.5


class Floating(PhysicsCore):
    """No gravity, so the block holds its height."""
    GRAVITY = 0.0


@pytest.fixture
def session():
    return GameSession.new()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def sounds():
    """Sound ids in the order they were triggered. Use `sounds.append` as the trigger."""
    return []


@pytest.fixture
def scheduled():
    return []
