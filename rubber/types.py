"""Core data types for rubber banding."""

from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Tuple

from .config import DEFAULT_RESPONSE, DEFAULT_DAMPING_FRACTION, PRESET_VALUES


class DampingRegime(Enum):
    """Qualitative shape of the resistance curve."""
    UNDERDAMPED = auto()  # damping_fraction < 1.0, bouncy
    CRITICAL = auto()     # damping_fraction == 1.0, smooth
    OVERDAMPED = auto()   # damping_fraction > 1.0, viscous


@dataclass(frozen=True)
class SpringConfig:
    """Spring parameters for the rubber band curve.

    Attributes:
        response: Spring stiffness. Larger values build resistance faster
            and raise the displacement ceiling.
        damping_fraction: Curve shape. Below 1.0 is underdamped (bouncy),
            1.0 is critically damped (smooth), above 1.0 is overdamped.
    """
    response: float = DEFAULT_RESPONSE
    damping_fraction: float = DEFAULT_DAMPING_FRACTION

    def __post_init__(self) -> None:
        for name in ("response", "damping_fraction"):
            v = getattr(self, name)
            if not isinstance(v, numbers.Real) or isinstance(v, bool):
                raise TypeError(f"{name} must be a real number, got {type(v).__name__}")
            v = float(v)
            if not math.isfinite(v) or v <= 0:
                raise ValueError(f"{name} must be finite and > 0, got {v!r}")
            object.__setattr__(self, name, v)

    @property
    def regime(self) -> DampingRegime:
        """Damping regime selected by damping_fraction."""
        if self.damping_fraction < 1.0:
            return DampingRegime.UNDERDAMPED
        if self.damping_fraction == 1.0:
            return DampingRegime.CRITICAL
        return DampingRegime.OVERDAMPED

    @classmethod
    def preset(cls, name: str) -> SpringConfig:
        """Look up a named preset (case-insensitive)."""
        try:
            return PRESETS[name.lower()]
        except KeyError:
            known = ", ".join(sorted(PRESETS))
            raise KeyError(f"Unknown preset {name!r} (known: {known})") from None


BOUNCY = SpringConfig(*PRESET_VALUES["bouncy"])
SMOOTH = SpringConfig(*PRESET_VALUES["smooth"])
SNAPPY = SpringConfig(*PRESET_VALUES["snappy"])
LOOSE = SpringConfig(*PRESET_VALUES["loose"])
FIRM = SpringConfig(*PRESET_VALUES["firm"])
ELASTIC = SpringConfig(*PRESET_VALUES["elastic"])

PRESETS: Dict[str, SpringConfig] = {
    "bouncy": BOUNCY,
    "smooth": SMOOTH,
    "snappy": SNAPPY,
    "loose": LOOSE,
    "firm": FIRM,
    "elastic": ELASTIC,
}


@dataclass(frozen=True)
class Interval:
    """Bounds for a rubber banded value.

    Closed and half-open intervals behave the same: the upper bound is the
    effective maximum in both cases.
    """
    lower: Any
    upper: Any
    closed: bool = True

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError(
                f"Inverted interval: lower {self.lower!r} > upper {self.upper!r}"
            )

    @classmethod
    def closed_range(cls, lower: Any, upper: Any) -> Interval:
        """Interval including both ends (lower...upper)."""
        return cls(lower, upper, closed=True)

    @classmethod
    def half_open(cls, lower: Any, upper: Any) -> Interval:
        """Interval excluding the upper end (lower..<upper)."""
        return cls(lower, upper, closed=False)

    @property
    def bounds(self) -> Tuple[Any, Any]:
        return (self.lower, self.upper)

    def __contains__(self, value: Any) -> bool:
        # Both variants accept the upper bound itself.
        return self.lower <= value <= self.upper


def as_interval(interval: Any) -> Interval:
    """Normalize an Interval, (lo, hi) tuple or step-1 range to an Interval.

    Args:
        interval: An Interval, a 2-item tuple/list (closed), or a range
            with step 1 (half-open).

    Returns:
        Interval instance.

    Raises:
        ValueError: Inverted bounds or a range with step other than 1.
        TypeError: Unsupported interval object.
    """
    if isinstance(interval, Interval):
        return interval
    if isinstance(interval, range):
        if interval.step != 1:
            raise ValueError(f"range step must be 1, got {interval.step}")
        return Interval.half_open(interval.start, interval.stop)
    if isinstance(interval, (tuple, list)):
        if len(interval) != 2:
            raise ValueError(f"Interval needs exactly 2 bounds, got {len(interval)}")
        return Interval.closed_range(interval[0], interval[1])
    raise TypeError(f"Unsupported interval type: {type(interval).__name__}")


@dataclass
class ViewParams:
    """View transformation parameters (scale and offset)."""
    scale: float = 1.0
    offx: float = 0.0
    offy: float = 0.0

    def copy(self) -> ViewParams:
        """Create a copy of this ViewParams."""
        return ViewParams(self.scale, self.offx, self.offy)
