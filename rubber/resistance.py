"""Resistance curve - distance past a boundary to bounded displacement.

A textbook spring solution is neither globally monotone nor tightly bounded,
so the curve is built from a saturating ratio instead::

    ceiling  = 25 + 15 * response
    progress = distance / (distance + 20 / response)
    base     = ceiling * progress

and the damping regime only scales ``base`` by a spring factor:

- underdamped: ``1 + a * sin(w * d / 10) * exp(-d / 50)`` with
  ``w = sqrt(1 - damping^2)``
- critically damped: ``1``
- overdamped: ``1 - 0.15 * (damping - 1) / (damping + 1)``

The wobble amplitude ``a`` is 0.1, capped for stiff springs so the product
stays strictly increasing (see ``oscillation_amplitude``).
"""

from __future__ import annotations
import math

from .config import (
    MAX_DISPLACEMENT_BASE, MAX_DISPLACEMENT_GAIN, PROGRESS_SCALE,
    OSCILLATION_AMPLITUDE, OSCILLATION_WAVELENGTH, OSCILLATION_DECAY,
    OSCILLATION_SAFETY, OVERDAMPED_REDUCTION,
)
from .math_utils import clamp, saturating_ratio, decay_peaks
from .types import SpringConfig, DampingRegime

_PEAK_D1, _PEAK_D2 = decay_peaks(OSCILLATION_DECAY)
# Upper bound on |d/dd (sin(w*d/L) * exp(-d/D))| / exp(-d/D) for w <= 1
_SLOPE_BOUND = 1.0 / OSCILLATION_WAVELENGTH + 1.0 / OSCILLATION_DECAY


def max_displacement(config: SpringConfig) -> float:
    """Asymptotic ceiling of the resistance for this config."""
    return MAX_DISPLACEMENT_BASE + MAX_DISPLACEMENT_GAIN * config.response


def progress_scale(config: SpringConfig) -> float:
    """Distance at which the critically damped curve reaches half its ceiling."""
    return PROGRESS_SCALE / config.response


def oscillation_amplitude(config: SpringConfig) -> float:
    """Wobble amplitude for an underdamped config.

    With base b(d) = M*d/(d+c) and factor f = 1 + a*s(d)*exp(-d/D), the
    product is increasing whenever a/(1-a) < c / (k * (P2 + c*P1)), where
    P1, P2 are the peaks of d*exp(-d/D) and d^2*exp(-d/D) and k bounds the
    slope of the oscillation. Every preset sits below the cap.
    """
    c = progress_scale(config)
    r = c / (_SLOPE_BOUND * (_PEAK_D2 + c * _PEAK_D1))
    return min(OSCILLATION_AMPLITUDE, OSCILLATION_SAFETY * r / (1.0 + r))


def spring_factor(distance: float, config: SpringConfig) -> float:
    """Multiplicative shape factor for the damping regime."""
    regime = config.regime
    if regime is DampingRegime.CRITICAL:
        return 1.0

    damping = config.damping_fraction
    if regime is DampingRegime.OVERDAMPED:
        return 1.0 - OVERDAMPED_REDUCTION * (damping - 1.0) / (damping + 1.0)

    # Underdamped: decaying wobble, gone once exp() underflows
    decay = math.exp(-distance / OSCILLATION_DECAY)
    if decay == 0.0:
        return 1.0
    frequency = math.sqrt(1.0 - damping * damping)
    wobble = math.sin(frequency * distance / OSCILLATION_WAVELENGTH)
    return 1.0 + oscillation_amplitude(config) * wobble * decay


def calculate_resistance(distance: float, config: SpringConfig) -> float:
    """Convert distance past a boundary into bounded displacement.

    Args:
        distance: How far the raw value is beyond the nearest bound (>= 0).
            Negative input is treated as 0.
        config: Spring configuration.

    Returns:
        Displacement in [0, max_displacement(config)), 0 at distance 0 and
        strictly increasing with distance.
    """
    if not distance > 0.0:
        return 0.0

    ceiling = max_displacement(config)
    base = ceiling * saturating_ratio(distance, progress_scale(config))
    resistance = base * spring_factor(distance, config)

    if not math.isfinite(resistance):
        return ceiling
    return clamp(resistance, 0.0, ceiling)
