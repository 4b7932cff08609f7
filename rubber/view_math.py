"""Pure view calculation functions - elastic panning, no state mutation."""

from __future__ import annotations
from typing import Tuple

from .types import ViewParams, SpringConfig, SMOOTH
from .math_utils import clamp
from .band import rubber_band
from .logging import log

Bounds = Tuple[float, float]


def compute_pan_bounds(
    view: ViewParams,
    img_w: int,
    img_h: int,
    screen_w: int,
    screen_h: int
) -> Tuple[Bounds, Bounds]:
    """Compute the allowed offset ranges for a view.

    Uses center-based limits so zooming stays smooth:
    - For small images: center stays within screen bounds
    - For large images: center can move far enough to show edges

    Args:
        view: Current view parameters.
        img_w: Image width in pixels.
        img_h: Image height in pixels.
        screen_w: Screen width in pixels.
        screen_h: Screen height in pixels.

    Returns:
        ((min_offx, max_offx), (min_offy, max_offy)).
    """
    vw = img_w * view.scale
    vh = img_h * view.scale

    # Max deviation of image center from screen center, either case
    max_dev_x = abs(screen_w - vw) / 2
    max_dev_y = abs(screen_h - vh) / 2

    # Offset that puts the image center on the screen center
    center_offx = (screen_w - vw) / 2
    center_offy = (screen_h - vh) / 2

    return (
        (center_offx - max_dev_x, center_offx + max_dev_x),
        (center_offy - max_dev_y, center_offy + max_dev_y),
    )


def clamp_pan(
    view: ViewParams,
    img_w: int,
    img_h: int,
    screen_w: int,
    screen_h: int
) -> ViewParams:
    """Hard-clamp view offsets into the pan bounds.

    This is the resting position a released overscroll settles back to.
    """
    (x_lo, x_hi), (y_lo, y_hi) = compute_pan_bounds(view, img_w, img_h, screen_w, screen_h)
    result = view.copy()
    result.offx = clamp(view.offx, x_lo, x_hi)
    result.offy = clamp(view.offy, y_lo, y_hi)
    return result


def rubber_pan(
    view: ViewParams,
    img_w: int,
    img_h: int,
    screen_w: int,
    screen_h: int,
    config: SpringConfig = SMOOTH,
    verbose: bool = False
) -> ViewParams:
    """Apply elastic resistance to offsets dragged past the pan bounds.

    Each axis is banded independently. Offsets inside the bounds are kept
    as they are.

    Args:
        view: View with raw (drag-driven) offsets.
        img_w: Image width in pixels.
        img_h: Image height in pixels.
        screen_w: Screen width in pixels.
        screen_h: Screen height in pixels.
        config: Spring configuration.
        verbose: Whether to log corrections.

    Returns:
        New ViewParams with banded offsets.
    """
    (x_lo, x_hi), (y_lo, y_hi) = compute_pan_bounds(view, img_w, img_h, screen_w, screen_h)
    result = view.copy()
    result.offx = rubber_band(view.offx, x_lo, x_hi, config)
    result.offy = rubber_band(view.offy, y_lo, y_hi, config)

    if verbose and (result.offx != view.offx or result.offy != view.offy):
        log(f"[PAN] Overscroll ({view.offx:.1f},{view.offy:.1f}) "
            f"at scale={view.scale:.3f} -> banded to "
            f"({result.offx:.1f},{result.offy:.1f})")
    return result


def overscroll_amount(
    view: ViewParams,
    img_w: int,
    img_h: int,
    screen_w: int,
    screen_h: int
) -> Tuple[float, float]:
    """Signed distance of each offset past its bounds (0 when inside)."""
    settled = clamp_pan(view, img_w, img_h, screen_w, screen_h)
    return (view.offx - settled.offx, view.offy - settled.offy)
