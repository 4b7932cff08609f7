"""Pure math utilities - no external dependencies."""

from __future__ import annotations
import math


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def saturating_ratio(x: float, scale: float) -> float:
    """x / (x + scale) for x >= 0, rising from 0 toward 1.

    Infinite x maps to exactly 1.0 instead of inf/inf.
    """
    if x <= 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0
    return x / (x + scale)


def decay_peaks(decay: float) -> tuple[float, float]:
    """Suprema of d * exp(-d/decay) and d^2 * exp(-d/decay) over d >= 0."""
    return decay / math.e, (2.0 * decay) ** 2 * math.exp(-2.0)
