"""Gamut mapping for out-of-gamut OKLCH values.

Not all (L, C, h) combinations produce valid sRGB. High chroma at extreme
lightness is particularly problematic.

Both strategies reduce chroma at fixed L and h until the color fits:
- linear: walk down in fixed steps (default, step-limited precision)
- bisect: binary search for the boundary, then take min(C, boundary)
"""

from __future__ import annotations

import logging
from typing import Literal

from okpalette import defaults
from .types import RGB
from .pipeline import reverse

logger = logging.getLogger(__name__)


# === Gamut checking ===

def in_gamut(rgb: RGB, tolerance: float = defaults.DEFAULT_GAMUT_TOLERANCE) -> bool:
    """True when every channel lies in [0, 1] (widened by tolerance)."""
    return all(-tolerance <= v <= 1 + tolerance for v in rgb)


# === Max chroma ===

def max_chroma(
    L: float,
    h: float,
    iterations: int = defaults.DEFAULT_BISECT_ITERATIONS,
) -> float:
    """Largest in-gamut chroma for (L, h) via binary search.

    Returns the low end of the final bracket, so the result is always in
    gamut (or 0).
    """
    lo = 0.0
    hi = defaults.BISECT_CHROMA_CEILING

    for _ in range(iterations):
        mid = (lo + hi) / 2
        if in_gamut(reverse(L, mid, h)):
            lo = mid
        else:
            hi = mid

    return lo


# === Clamping ===

def _clamp_linear(L: float, C: float, h: float, step: float) -> tuple[RGB, float]:
    chroma = C
    rgb = reverse(L, chroma, h)
    while not in_gamut(rgb) and chroma > 0:
        chroma = max(chroma - step, 0.0)
        rgb = reverse(L, chroma, h)
    return rgb, chroma


def _clamp_bisect(L: float, C: float, h: float) -> tuple[RGB, float]:
    rgb = reverse(L, C, h)
    if in_gamut(rgb):
        return rgb, C
    chroma = min(C, max_chroma(L, h))
    return reverse(L, chroma, h), chroma


def clamp_to_gamut(
    L: float,
    C: float,
    h: float,
    step: float = defaults.DEFAULT_CHROMA_STEP,
    method: Literal['linear', 'bisect'] = 'linear',
) -> tuple[RGB, float]:
    """Reduce chroma at fixed L and h until the sRGB result is in gamut.

    Args:
        L: Lightness (0-1)
        C: Requested chroma; negative values are treated as 0
        h: Hue in degrees
        step: Chroma decrement for the linear walk
        method: 'linear' for the fixed-step walk, 'bisect' for binary search

    Returns:
        (rgb, chroma) where chroma <= max(C, 0). At chroma 0 the result is
        the gray for L, returned even if L lies outside [0, 1].
    """
    if step <= 0:
        raise ValueError(f"Chroma step must be positive, got {step}")
    C = max(C, 0.0)

    if method == 'linear':
        rgb, chroma = _clamp_linear(L, C, h, step)
    elif method == 'bisect':
        rgb, chroma = _clamp_bisect(L, C, h)
    else:
        raise ValueError(f"Unknown gamut method: {method}")

    if chroma < C:
        logger.debug("Clamped chroma %.4f -> %.4f at L=%.4f h=%.2f", C, chroma, L, h)
    return rgb, chroma
