"""sRGB transfer function (IEC 61966-2-1).

Piecewise linear segment near black plus a 2.4 power law. A plain 2.2 gamma
is not a substitute. Both directions accept any real so out-of-gamut values
pass through during gamut search.
"""

from .types import RGB

# Breakpoints live in different domains: encoded vs linear
_ENCODED_THRESHOLD = 0.04045
_LINEAR_THRESHOLD = 0.0031308


def linearize(v: float) -> float:
    """sRGB encoded channel -> linear light."""
    if v <= _ENCODED_THRESHOLD:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def delinearize(v: float) -> float:
    """Linear light channel -> sRGB encoded."""
    if v <= _LINEAR_THRESHOLD:
        return 12.92 * v
    return 1.055 * v ** (1 / 2.4) - 0.055


def linearize_rgb(rgb: RGB) -> RGB:
    return RGB(linearize(rgb.r), linearize(rgb.g), linearize(rgb.b))


def delinearize_rgb(rgb: RGB) -> RGB:
    return RGB(delinearize(rgb.r), delinearize(rgb.g), delinearize(rgb.b))
