from __future__ import annotations

"""EXPLOSION effect.

Usage from a trigger script:
    EXPLOSION <power> <location>
    EXPLOSION <power> <x> <y> <z>

Power 0.0 does no damage; anything above 20.0 is capped.
"""

import logging
from dataclasses import dataclass
from typing import Any, Sequence, Union

from triggerfx.core.effects.engine import EffectHandler, EffectValidationError
from triggerfx.core.effects.types import EffectContext, EffectResult
from triggerfx.core.numbers import clamp

log = logging.getLogger("triggerfx.effects")

MIN_POWER = 0.0
MAX_POWER = 20.0

USAGE = "Invalid parameters. Need [Power<number>, Location<location or number number number>]"


class InvalidArgumentCount(EffectValidationError):
    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class ExplosionAt:
    power: float
    location: Any


@dataclass(frozen=True)
class ExplosionAtCoords:
    power: float
    x: float
    y: float
    z: float


ExplosionRequest = Union[ExplosionAt, ExplosionAtCoords]


def parse_explosion_args(args: Sequence[Any]) -> ExplosionRequest:
    if len(args) == 2:
        return ExplosionAt(power=args[0], location=args[1])
    if len(args) == 4:
        return ExplosionAtCoords(power=args[0], x=args[1], y=args[2], z=args[3])
    raise InvalidArgumentCount()


def resolve_location(request: ExplosionRequest, ctx: EffectContext) -> Any:
    if isinstance(request, ExplosionAt):
        return request.location
    if ctx.player is None:
        raise EffectValidationError("EXPLOSION with coordinates requires ctx.player")
    world = ctx.player.get_world()
    return ctx.location_factory(world, request.x, request.y, request.z)


def power_cap(ctx: EffectContext) -> float:
    cap = getattr(ctx.settings, "EXPLOSION_MAX_POWER", MAX_POWER)
    return clamp(float(cap), MIN_POWER, MAX_POWER)


def trigger(request: ExplosionRequest, ctx: EffectContext) -> tuple[Any, float]:
    """Resolve the location and create the explosion. Returns (location, applied power)."""
    location = resolve_location(request, ctx)
    power = clamp(request.power, MIN_POWER, power_cap(ctx))
    if power != request.power:
        log.info("EXPLOSION power %s clamped to %s", request.power, power)

    log.debug("EXPLOSION at %r power=%s", location, power)
    location.get_world().create_explosion(location, power)
    return location, power


def explosion(args: Sequence[Any], ctx: EffectContext) -> None:
    trigger(parse_explosion_args(args), ctx)
    return None


def _describe(location: Any) -> dict[str, Any]:
    if all(hasattr(location, a) for a in ("x", "y", "z")):
        return {"x": location.x, "y": location.y, "z": location.z}
    return {"repr": repr(location)}


class ExplosionHandler(EffectHandler):
    type = "EXPLOSION"

    def apply(self, effect: dict[str, Any], ctx: EffectContext) -> EffectResult:
        args = effect.get("args")
        if args is None:
            args = []
        if not isinstance(args, (list, tuple)):
            raise EffectValidationError("EXPLOSION.args must be a list")

        request = parse_explosion_args(args)
        location, power = trigger(request, ctx)

        return EffectResult(
            ok=True,
            type=self.type,
            detail={
                "requested_power": request.power,
                "power": power,
                "location": _describe(location),
                "user": ctx.user,
            },
        )
