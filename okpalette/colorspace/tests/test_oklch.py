"""Tests for Oklab <-> Oklch."""

import numpy as np
import pytest

from okpalette.colorspace import Oklab, Oklch, normalize_hue, to_cylindrical, to_rectangular


class TestToCylindrical:
    """Oklab -> Oklch."""

    @pytest.mark.parametrize("a, b, hue", [
        (0.1, 0.0, 0.0),
        (0.0, 0.1, 90.0),
        (-0.1, 0.0, 180.0),
        (0.0, -0.1, 270.0),
    ])
    def test_axis_hues(self, a, b, hue):
        lch = to_cylindrical(Oklab(0.5, a, b))
        assert lch.L == 0.5
        assert lch.C == pytest.approx(0.1)
        assert lch.h == pytest.approx(hue)

    def test_negative_zero_b(self):
        """atan2(-0.0, -a) gives -180, which wraps to 180."""
        lch = to_cylindrical(Oklab(0.5, -0.1, -0.0))
        assert lch.h == pytest.approx(180.0)

    def test_hue_range(self):
        rng = np.random.default_rng(42)
        for a, b in rng.uniform(-0.3, 0.3, size=(200, 2)):
            h = to_cylindrical(Oklab(0.5, a, b)).h
            assert 0.0 <= h < 360.0

    def test_achromatic_hue_is_zero(self):
        """Below the 1e-4 chroma threshold hue is pinned to exactly 0."""
        lch = to_cylindrical(Oklab(0.5, -5e-5, -5e-5))
        assert lch.C < 1e-4
        assert lch.h == 0.0

    def test_just_above_threshold(self):
        lch = to_cylindrical(Oklab(0.5, 0.0, 2e-4))
        assert lch.h == pytest.approx(90.0)


class TestToRectangular:
    """Oklch -> Oklab."""

    def test_zero_chroma(self):
        """Zero chroma gives a=b=0 whatever the hue."""
        lab = to_rectangular(Oklch(0.5, 0.0, 123.0))
        assert lab.L == 0.5
        np.testing.assert_allclose((lab.a, lab.b), (0.0, 0.0), atol=1e-12)

    def test_roundtrip(self):
        lab = Oklab(0.7, 0.1, -0.05)
        back = to_rectangular(to_cylindrical(lab))
        np.testing.assert_allclose(tuple(back), tuple(lab), atol=1e-12)

    def test_hue_outside_range(self):
        """Hues outside [0, 360) describe the same point."""
        a = to_rectangular(Oklch(0.6, 0.1, -90.0))
        b = to_rectangular(Oklch(0.6, 0.1, 270.0))
        np.testing.assert_allclose(tuple(a), tuple(b), atol=1e-12)


class TestNormalizeHue:

    @pytest.mark.parametrize("h, expected", [
        (0.0, 0.0),
        (359.5, 359.5),
        (360.0, 0.0),
        (720.0, 0.0),
        (-90.0, 270.0),
        (-1e-17, 0.0),
    ])
    def test_wraps(self, h, expected):
        assert normalize_hue(h) == pytest.approx(expected)
        assert 0.0 <= normalize_hue(h) < 360.0
