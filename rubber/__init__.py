"""Rubber band (elastic overscroll) transform for bounded values."""

from .types import (
    DampingRegime,
    SpringConfig,
    Interval,
    ViewParams,
    as_interval,
    BOUNCY,
    SMOOTH,
    SNAPPY,
    LOOSE,
    FIRM,
    ELASTIC,
    PRESETS,
)
from .resistance import calculate_resistance, max_displacement
from .band import (
    NumericAdapter,
    rubber_band,
    rubber,
    register_numeric_type,
    get_adapter,
    is_rubber_bandable,
)
from .view_math import compute_pan_bounds, clamp_pan, rubber_pan, overscroll_amount

__version__ = "1.0.0"

__all__ = [
    'DampingRegime',
    'SpringConfig',
    'Interval',
    'ViewParams',
    'as_interval',
    'BOUNCY',
    'SMOOTH',
    'SNAPPY',
    'LOOSE',
    'FIRM',
    'ELASTIC',
    'PRESETS',
    'calculate_resistance',
    'max_displacement',
    'NumericAdapter',
    'rubber_band',
    'rubber',
    'register_numeric_type',
    'get_adapter',
    'is_rubber_bandable',
    'compute_pan_bounds',
    'clamp_pan',
    'rubber_pan',
    'overscroll_amount',
]
