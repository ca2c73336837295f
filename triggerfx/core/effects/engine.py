from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from triggerfx.core.effects.types import EffectContext, EffectResult

log = logging.getLogger("triggerfx.engine")


class EffectValidationError(ValueError):
    pass


class EffectHandler:
    """Base class for effect handlers.

    Handlers should be small and focused. They may raise EffectValidationError
    for argument problems; other exceptions are treated as handler failures.
    """

    # the effect "type" this handler supports
    type: str = ""

    def apply(self, effect: dict[str, Any], ctx: EffectContext) -> EffectResult:
        raise NotImplementedError


@dataclass
class EffectEngine:
    """Executes effects via a registry of handlers."""

    settings: Any = None

    def __post_init__(self) -> None:
        # Lazy import handlers to avoid side-effects at import time.
        from triggerfx.core.effects.handlers.explosion import ExplosionHandler

        handlers: list[EffectHandler] = []
        if getattr(self.settings, "EXPLOSION_ENABLED", True):
            handlers.append(ExplosionHandler())

        self._handlers: dict[str, EffectHandler] = {}
        for h in handlers:
            if h.type:
                self._handlers[h.type.upper()] = h

    def handler_types(self) -> list[str]:
        return sorted(self._handlers)

    def _lookup(self, effect: dict[str, Any]) -> tuple[str, EffectHandler | None]:
        t = str(effect.get("type") or "").strip()
        return t, self._handlers.get(t.upper())

    def apply(self, effect: dict[str, Any], ctx: EffectContext) -> EffectResult:
        """Apply a single effect. Errors propagate to the caller."""
        if not isinstance(effect, dict):
            raise EffectValidationError("Effect is not an object")
        t, handler = self._lookup(effect)
        if not t:
            raise EffectValidationError("Missing effect.type")
        if not handler:
            raise EffectValidationError(f"No handler registered for {t}")
        return handler.apply(effect, ctx)

    def apply_all(self, effects: Iterable[dict[str, Any]], ctx: EffectContext) -> list[EffectResult]:
        """Apply a list of effects.

        Execution is best-effort: one failing effect does not stop the rest.
        """
        results: list[EffectResult] = []
        for eff in (effects or []):
            if not isinstance(eff, dict):
                results.append(
                    EffectResult(
                        ok=False,
                        type="invalid",
                        detail={"raw": str(eff)},
                        error="Effect is not an object",
                    )
                )
                continue

            t, handler = self._lookup(eff)
            if not t:
                results.append(
                    EffectResult(ok=False, type="invalid", detail={"effect": eff}, error="Missing effect.type")
                )
                continue

            if not handler:
                results.append(
                    EffectResult(ok=False, type=t, detail={"effect": eff}, error=f"No handler registered for {t}")
                )
                continue

            try:
                r = handler.apply(eff, ctx)
            except EffectValidationError as ve:
                log.warning("Effect %s rejected: %s", t, ve)
                r = EffectResult(ok=False, type=handler.type, detail={"effect": eff}, error=str(ve))
            except Exception as e:
                log.warning("Effect %s failed: %s", t, e)
                r = EffectResult(ok=False, type=handler.type, detail={"effect": eff}, error=f"Handler error: {e}")
            results.append(r)

        return results


def effect_from_call(name: str, args: Sequence[Any] | None = None) -> dict[str, Any]:
    """Normalize an executor call (`EXPLOSION 4 10 64 -3`) to a canonical effect dict."""
    return {"type": str(name or "").strip().upper(), "args": list(args or [])}
