"""
Pytest fixtures: recording fakes for the host world and player.
"""
import pytest

from triggerfx.core.effects.types import EffectContext
from triggerfx.core.world import Location, Player, World


class RecordingWorld(World):
    def __init__(self, name: str = "world"):
        self.name = name
        self.explosions = []

    def create_explosion(self, location, power):
        self.explosions.append((location, power))


class FakePlayer(Player):
    def __init__(self, world):
        self._world = world

    def get_world(self):
        return self._world


@pytest.fixture
def world():
    return RecordingWorld()


@pytest.fixture
def player(world):
    return FakePlayer(world)


@pytest.fixture
def location(world):
    return Location(world, 10.0, 64.0, -3.0)


@pytest.fixture
def ctx(player):
    return EffectContext(user="Steve", source="command", player=player)
