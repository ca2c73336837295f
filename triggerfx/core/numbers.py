from __future__ import annotations


def clamp(number: float, min_value: float, max_value: float) -> float:
    """Restrict `number` to the inclusive range [min_value, max_value]."""
    return max(min_value, min(number, max_value))
