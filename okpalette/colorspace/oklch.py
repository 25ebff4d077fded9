"""Oklab <-> Oklch (polar/rectangular)."""

from math import atan2, cos, pi, sin, sqrt

from okpalette import defaults
from .types import Oklab, Oklch


def normalize_hue(h: float) -> float:
    """Wrap any angle in degrees to [0, 360)."""
    h = h % 360
    # -1e-17 % 360 rounds up to 360.0
    if h >= 360:
        h = 0.0
    return h


def to_cylindrical(lab: Oklab) -> Oklch:
    """Oklab -> Oklch. Hue is pinned to 0 for achromatic colors."""
    L, a, b = lab
    C = sqrt(a * a + b * b)
    if C < defaults.ACHROMATIC_THRESHOLD:
        return Oklch(L, C, 0.0)
    h = atan2(b, a) * (180 / pi)
    return Oklch(L, C, normalize_hue(h))


def to_rectangular(lch: Oklch) -> Oklab:
    """Oklch -> Oklab. Lossy only at the pinned achromatic hue."""
    L, C, h = lch
    h_rad = h * (pi / 180)
    return Oklab(L, C * cos(h_rad), C * sin(h_rad))
