"""
Tests for elastic panning helpers.
"""

import pytest

from rubber import ViewParams, SMOOTH, BOUNCY, rubber_band
from rubber.view_math import compute_pan_bounds, clamp_pan, rubber_pan, overscroll_amount
from rubber.logging import set_enabled

SCREEN = (200, 200)


class TestPanBounds:
    """Center-based pan limits."""

    def test_small_image_stays_on_screen(self):
        view = ViewParams(scale=1.0, offx=50.0, offy=50.0)
        (x_lo, x_hi), (y_lo, y_hi) = compute_pan_bounds(view, 100, 100, *SCREEN)
        assert (x_lo, x_hi) == (0.0, 100.0)
        assert (y_lo, y_hi) == (0.0, 100.0)

    def test_large_image_can_show_edges(self):
        view = ViewParams(scale=2.0)
        (x_lo, x_hi), _ = compute_pan_bounds(view, 200, 100, *SCREEN)
        # 400px wide on a 200px screen: left edge at 0, right edge at -200
        assert (x_lo, x_hi) == (-200.0, 0.0)

    def test_exact_fit_has_no_slack(self):
        view = ViewParams(scale=1.0)
        (x_lo, x_hi), _ = compute_pan_bounds(view, 200, 200, *SCREEN)
        assert x_lo == x_hi == 0.0


class TestClampPan:
    """Hard clamping, the settle target."""

    def test_clamps_both_axes(self):
        view = ViewParams(scale=1.0, offx=150.0, offy=-30.0)
        result = clamp_pan(view, 100, 100, *SCREEN)
        assert (result.offx, result.offy) == (100.0, 0.0)
        assert result.scale == 1.0

    def test_does_not_mutate_input(self):
        view = ViewParams(scale=1.0, offx=150.0, offy=-30.0)
        clamp_pan(view, 100, 100, *SCREEN)
        assert (view.offx, view.offy) == (150.0, -30.0)


class TestRubberPan:
    """Elastic overscroll of view offsets."""

    def test_in_bounds_unchanged(self):
        view = ViewParams(scale=1.0, offx=40.0, offy=60.0)
        result = rubber_pan(view, 100, 100, *SCREEN)
        assert result == view
        assert result is not view

    def test_overscroll_is_resisted(self):
        view = ViewParams(scale=1.0, offx=150.0, offy=-50.0)
        result = rubber_pan(view, 100, 100, *SCREEN, config=SMOOTH)
        assert 100.0 < result.offx < 150.0
        assert -50.0 < result.offy < 0.0

    def test_matches_rubber_band_per_axis(self):
        view = ViewParams(scale=1.0, offx=130.0, offy=70.0)
        result = rubber_pan(view, 100, 100, *SCREEN, config=BOUNCY)
        assert result.offx == rubber_band(130.0, 0.0, 100.0, BOUNCY)
        assert result.offy == 70.0

    def test_drag_further_moves_further(self):
        near = rubber_pan(ViewParams(1.0, 120.0, 50.0), 100, 100, *SCREEN)
        far = rubber_pan(ViewParams(1.0, 180.0, 50.0), 100, 100, *SCREEN)
        assert far.offx > near.offx

    def test_verbose_logs_correction(self, capsys):
        set_enabled(True)
        try:
            rubber_pan(ViewParams(1.0, 150.0, 50.0), 100, 100, *SCREEN, verbose=True)
        finally:
            set_enabled(False)
        assert "[PAN] Overscroll" in capsys.readouterr().out

    def test_quiet_when_in_bounds(self, capsys):
        set_enabled(True)
        try:
            rubber_pan(ViewParams(1.0, 50.0, 50.0), 100, 100, *SCREEN, verbose=True)
        finally:
            set_enabled(False)
        assert capsys.readouterr().out == ""


class TestOverscrollAmount:

    def test_zero_inside(self):
        assert overscroll_amount(ViewParams(1.0, 50.0, 50.0), 100, 100, *SCREEN) == (0.0, 0.0)

    def test_signed_outside(self):
        dx, dy = overscroll_amount(ViewParams(1.0, 130.0, -20.0), 100, 100, *SCREEN)
        assert dx == pytest.approx(30.0)
        assert dy == pytest.approx(-20.0)
