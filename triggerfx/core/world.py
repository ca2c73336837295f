from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


class World:
    """Host world handle. Hosts subclass or duck-type this."""

    def create_explosion(self, location: Any, power: float) -> None:
        raise NotImplementedError


class Player:
    def get_world(self) -> World:
        raise NotImplementedError


@dataclass(frozen=True)
class Location:
    """Default location value: a world plus three coordinates."""

    world: Any
    x: float
    y: float
    z: float

    def get_world(self) -> Any:
        return self.world


# (world, x, y, z) -> location
LocationFactory = Callable[[Any, float, float, float], Any]
