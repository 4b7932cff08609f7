"""Library configuration constants."""

from __future__ import annotations

# Spring defaults (critically damped, same as the SMOOTH preset)
DEFAULT_RESPONSE = 0.55
DEFAULT_DAMPING_FRACTION = 1.0

# Resistance curve
# Ceiling: MAX_DISPLACEMENT_BASE + MAX_DISPLACEMENT_GAIN * response
MAX_DISPLACEMENT_BASE = 25.0
MAX_DISPLACEMENT_GAIN = 15.0
# Progress: distance / (distance + PROGRESS_SCALE / response)
PROGRESS_SCALE = 20.0

# Underdamped wobble
OSCILLATION_AMPLITUDE = 0.1
OSCILLATION_WAVELENGTH = 10.0
OSCILLATION_DECAY = 50.0
# Amplitude cap headroom (< 1.0 keeps the curve strictly increasing)
OSCILLATION_SAFETY = 0.9

# Overdamped softening
OVERDAMPED_REDUCTION = 0.15

# Presets: name -> (response, damping_fraction)
PRESET_VALUES = {
    "bouncy": (0.4, 0.6),
    "smooth": (0.55, 1.0),
    "snappy": (0.8, 1.0),
    "loose": (0.3, 0.8),
    "firm": (0.7, 1.2),
    "elastic": (0.35, 0.4),
}

# Logging (library is silent unless enabled)
LOG_ENABLED = False
