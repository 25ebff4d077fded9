"""Lightness-step palettes around a fixed hue/chroma anchor."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from okpalette import defaults
from .types import RGB, Oklch
from .oklch import normalize_hue
from .pipeline import encode_hex, forward
from .gamut import clamp_to_gamut

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaletteEntry:
    """One swatch. chroma is the gamut-clamped value actually used."""
    lightness: float
    chroma: float
    hue: float
    rgb: RGB
    is_anchor: bool = False
    requested_chroma: float = 0.0

    @property
    def oklch(self) -> Oklch:
        return Oklch(self.lightness, self.chroma, self.hue)

    @property
    def hex(self) -> str:
        return encode_hex(self.rgb)

    @property
    def clamped(self) -> bool:
        return self.chroma < self.requested_chroma


def palette_lightness(
    steps: int,
    lo: float = defaults.PALETTE_MIN_LIGHTNESS,
    hi: float = defaults.PALETTE_MAX_LIGHTNESS,
) -> list[float]:
    """Evenly spaced lightness targets from lo to hi inclusive."""
    if steps < defaults.MIN_PALETTE_STEPS:
        raise ValueError(f"Palette needs at least {defaults.MIN_PALETTE_STEPS} steps, got {steps}")
    span = (hi - lo) / (steps - 1)
    return [lo + i * span for i in range(steps)]


def _nearest_index(values: list[float], target: float) -> int:
    # Strict < keeps the first of equally close entries
    best = 0
    best_diff = abs(values[0] - target)
    for i, v in enumerate(values[1:], start=1):
        diff = abs(v - target)
        if diff < best_diff:
            best, best_diff = i, diff
    return best


def generate_palette(
    anchor_L: float,
    anchor_C: float,
    anchor_h: float,
    steps: int = defaults.DEFAULT_PALETTE_STEPS,
    step: float = defaults.DEFAULT_CHROMA_STEP,
    method: Literal['linear', 'bisect'] = 'linear',
) -> list[PaletteEntry]:
    """Build a dark-to-light palette at the anchor's hue and chroma.

    Each entry's chroma is reduced until it fits in sRGB at that lightness.
    The entry whose lightness is nearest anchor_L is flagged is_anchor.

    Raises:
        ValueError: steps < 2.
    """
    lightness = palette_lightness(steps)
    hue = normalize_hue(anchor_h)
    anchor_index = _nearest_index(lightness, anchor_L)

    entries = []
    for i, L in enumerate(lightness):
        rgb, chroma = clamp_to_gamut(L, anchor_C, hue, step=step, method=method)
        entries.append(PaletteEntry(
            lightness=L,
            chroma=chroma,
            hue=hue,
            rgb=rgb,
            is_anchor=(i == anchor_index),
            requested_chroma=anchor_C,
        ))

    logger.debug(
        "Built %d-step palette for C=%.4f h=%.2f, anchor at index %d",
        steps, anchor_C, hue, anchor_index,
    )
    return entries


def generate_palette_from_hex(
    text: str,
    steps: int = defaults.DEFAULT_PALETTE_STEPS,
    method: Literal['linear', 'bisect'] = 'linear',
) -> list[PaletteEntry]:
    """Palette anchored on a hex color.

    Raises:
        MalformedHex: text is not a valid hex color.
        ValueError: steps < 2.
    """
    L, C, h = forward(text).oklch
    return generate_palette(L, C, h, steps=steps, method=method)
