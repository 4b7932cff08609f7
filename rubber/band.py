"""Rubber band functions and the numeric type adapter table.

``rubber_band`` is the single double-precision path. ``rubber`` wraps it for
any registered ordered numeric type: the value and bounds are converted to
float, banded, and converted back to the value's own type. Values inside the
interval are returned untouched, without a float round-trip.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Dict, Optional

import numpy as np

from .logging import log
from .resistance import calculate_resistance
from .types import SpringConfig, SMOOTH, as_interval


def rubber_band(
    value: float,
    min_value: float,
    max_value: float,
    config: SpringConfig
) -> float:
    """Apply the rubber band effect to a float.

    Args:
        value: Raw input value.
        min_value: Lower bound.
        max_value: Upper bound. Behaviour is undefined when
            min_value > max_value; no check is made here.
        config: Spring configuration.

    Returns:
        value itself when inside [min_value, max_value], otherwise a value
        strictly outside the bound it crossed, pulled back toward it.
    """
    if min_value <= value <= max_value:
        return value
    if math.isnan(value):
        return value

    if value > max_value:
        return max_value + calculate_resistance(value - max_value, config)
    return min_value - calculate_resistance(min_value - value, config)


@dataclass(frozen=True)
class NumericAdapter:
    """Conversion pair letting a type take part in rubber banding."""
    to_float: Callable[[Any], float]
    from_float: Callable[[float], Any]


_adapters: Dict[type, NumericAdapter] = {}


def register_numeric_type(
    tp: type,
    to_float: Callable[[Any], float] = float,
    from_float: Optional[Callable[[float], Any]] = None
) -> None:
    """Register conversions for an ordered numeric type.

    Registering a base class covers its subclasses.

    Args:
        tp: The value type.
        to_float: Converts an instance to float.
        from_float: Builds an instance from a float result. Defaults to
            calling tp itself.
    """
    _adapters[tp] = NumericAdapter(to_float, from_float if from_float is not None else tp)
    log(f"[RUBBER] Registered numeric type {tp.__module__}.{tp.__qualname__}")


def get_adapter(tp: type) -> Optional[NumericAdapter]:
    """Find the adapter for tp, walking its MRO. None if unsupported."""
    if tp is bool or issubclass(tp, np.bool_):
        return None
    for klass in tp.__mro__:
        adapter = _adapters.get(klass)
        if adapter is not None:
            return adapter
    return None


def is_rubber_bandable(value: Any) -> bool:
    """Whether rubber() accepts values of this type."""
    return get_adapter(type(value)) is not None


def _require_adapter(value: Any) -> NumericAdapter:
    adapter = get_adapter(type(value))
    if adapter is None:
        raise TypeError(f"Type {type(value).__name__} is not registered for rubber banding")
    return adapter


def rubber(value: Any, interval: Any, config: SpringConfig = SMOOTH) -> Any:
    """Apply the rubber band effect to a value of any registered type.

    Args:
        value: Value of a registered numeric type.
        interval: Interval, (lo, hi) tuple (closed) or step-1 range
            (half-open). Both kinds use the upper bound as the maximum.
        config: Spring configuration, SMOOTH (critically damped) by default.

    Returns:
        Result of the same type as value.

    Raises:
        TypeError: value or a bound has an unregistered type.
        ValueError: Inverted interval or bad range step.
        OverflowError: Result does not fit a fixed-width integer type.
    """
    adapter = _require_adapter(value)
    bounds = as_interval(interval)
    if value in bounds:
        return value

    result = rubber_band(
        adapter.to_float(value),
        _require_adapter(bounds.lower).to_float(bounds.lower),
        _require_adapter(bounds.upper).to_float(bounds.upper),
        config,
    )
    return adapter.from_float(result)


def _np_int_factory(tp: type) -> Callable[[float], Any]:
    info = np.iinfo(tp)

    def convert(x: float) -> Any:
        truncated = math.trunc(x)
        if truncated < info.min or truncated > info.max:
            raise OverflowError(
                f"{x!r} out of range for {info.dtype} [{info.min}, {info.max}]"
            )
        return tp(truncated)

    return convert


def _register_numpy_types() -> None:
    # Every concrete scalar type, including platform aliases like longlong
    for tp in {np.dtype(c).type for c in np.typecodes["AllInteger"]}:
        register_numeric_type(tp, float, _np_int_factory(tp))
    for tp in {np.dtype(c).type for c in np.typecodes["Float"]}:
        register_numeric_type(tp, float, tp)


register_numeric_type(float, float, float)
register_numeric_type(int, float, int)
register_numeric_type(Fraction, float, Fraction)
register_numeric_type(Decimal, float, Decimal)
_register_numpy_types()
