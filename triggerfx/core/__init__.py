"""Core package.

Effect system is implemented under `triggerfx.core.effects`.
"""

from .effects.engine import EffectEngine, effect_from_call
from .effects.types import EffectContext, EffectResult

__all__ = ["EffectEngine", "effect_from_call", "EffectContext", "EffectResult"]
