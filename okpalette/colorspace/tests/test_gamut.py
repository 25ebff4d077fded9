"""Tests for gamut checking and chroma clamping."""

import pytest

from okpalette.colorspace import RGB, in_gamut, clamp_to_gamut, max_chroma, reverse


class TestInGamut:

    def test_unit_cube(self):
        assert in_gamut(RGB(0.0, 0.0, 0.0))
        assert in_gamut(RGB(1.0, 1.0, 1.0))
        assert in_gamut(RGB(0.3, 0.6, 0.9))

    @pytest.mark.parametrize("rgb", [
        RGB(-1e-9, 0.5, 0.5),
        RGB(0.5, 1.0 + 1e-9, 0.5),
        RGB(0.5, 0.5, 2.0),
    ])
    def test_outside(self, rgb):
        assert not in_gamut(rgb)

    def test_tolerance(self):
        assert in_gamut(RGB(-1e-5, 0.5, 1.0 + 1e-5), tolerance=1e-4)


class TestClampToGamut:
    """Chroma reduction at fixed lightness and hue."""

    CASES = [
        (0.5, 0.4, 150.0),
        (0.9, 0.3, 120.0),
        (0.1, 0.3, 240.0),
        (0.7, 0.1, 30.0),
        (0.02, 0.2, 0.0),
        (0.98, 0.2, 300.0),
        (1.0, 0.2, 120.0),
        (1.0, 0.1, 300.0),
    ]

    @pytest.mark.parametrize("L, C, h", CASES)
    def test_result_in_gamut_and_not_above_request(self, L, C, h):
        rgb, chroma = clamp_to_gamut(L, C, h)
        assert in_gamut(rgb)
        assert 0.0 <= chroma <= C
        assert rgb == reverse(L, chroma, h)

    def test_in_gamut_request_untouched(self):
        """A color that already fits keeps its exact chroma."""
        rgb, chroma = clamp_to_gamut(0.7, 0.05, 200.0)
        assert chroma == 0.05
        assert rgb == reverse(0.7, 0.05, 200.0)

    def test_walks_in_fixed_steps(self):
        """Linear search lands on a whole number of steps below the request."""
        _, chroma = clamp_to_gamut(0.5, 0.4, 150.0, step=0.01)
        steps_taken = (0.4 - chroma) / 0.01
        assert steps_taken == pytest.approx(round(steps_taken), abs=1e-6)

    def test_one_step_short_is_out_of_gamut(self):
        """The clamped chroma is the first in-gamut value on the walk."""
        _, chroma = clamp_to_gamut(0.5, 0.4, 150.0)
        assert not in_gamut(reverse(0.5, chroma + 0.001, 150.0))

    def test_negative_chroma_is_zero(self):
        rgb, chroma = clamp_to_gamut(0.5, -0.1, 40.0)
        assert chroma == 0.0
        assert in_gamut(rgb)

    def test_zero_chroma_gray(self):
        rgb, chroma = clamp_to_gamut(0.5, 0.0, 0.0)
        assert chroma == 0.0
        assert rgb.r == rgb.g == rgb.b

    @pytest.mark.parametrize("method", ["linear", "bisect"])
    @pytest.mark.parametrize("L", [0.0, 0.98, 0.99, 0.999, 1.0])
    def test_lightness_extremes_land_in_gamut(self, L, method):
        """Clamping at the ends of the lightness axis, white included, fits the cube."""
        rgb, chroma = clamp_to_gamut(L, 0.2, 120.0, method=method)
        assert in_gamut(rgb)
        assert 0.0 <= chroma <= 0.2

    def test_bisect_agrees_with_linear(self):
        for L, C, h in self.CASES:
            _, c_linear = clamp_to_gamut(L, C, h, method='linear')
            rgb, c_bisect = clamp_to_gamut(L, C, h, method='bisect')
            assert in_gamut(rgb)
            assert c_bisect <= C
            assert c_bisect == pytest.approx(c_linear, abs=1.1e-3)

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            clamp_to_gamut(0.5, 0.1, 0.0, step=0.0)
        with pytest.raises(ValueError, match="Unknown gamut method"):
            clamp_to_gamut(0.5, 0.1, 0.0, method='nearest')


class TestMaxChroma:
    """Binary search for the gamut boundary."""

    def test_result_in_gamut(self):
        for h in range(0, 360, 30):
            c = max_chroma(0.6, float(h))
            assert in_gamut(reverse(0.6, c, float(h)))

    def test_mid_lightness_red_headroom(self):
        """Around red's lightness there is plenty of chroma available."""
        assert max_chroma(0.6, 30.0) > 0.15

    def test_black_has_no_headroom(self):
        assert max_chroma(0.0, 90.0) < 0.05
