"""End-to-end conversions: hex -> Oklch and Oklch -> sRGB.

forward() runs the full decode chain and keeps every intermediate stage so
callers can show them:

    hex -> RGB -> linear RGB -> XYZ -> LMS -> (cube root) -> Oklab -> Oklch

reverse() walks the chain backwards, going from LMS straight to linear RGB
so grays stay exactly neutral (the XYZ stage is derived from linear RGB).
It does no validation, so colors outside the sRGB gamut come back with
channels outside [0, 1].
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from math import floor
from typing import Iterable

from okpalette import defaults
from okpalette.errors import MalformedHex
from .types import RGB, XYZ, LMS, Oklab, Oklch
from .transfer import linearize_rgb, delinearize_rgb
from .matrices import (
    linear_rgb_to_xyz,
    xyz_to_lms,
    lms_to_linear_rgb,
    compress_lms,
    expand_lms,
    lms_prime_to_oklab,
    oklab_to_lms_prime,
)
from .oklch import to_cylindrical, to_rectangular

logger = logging.getLogger(__name__)

_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]+")


@dataclass(frozen=True)
class ConversionResult:
    """Every stage of a hex -> Oklch conversion."""
    rgb: RGB
    linear_rgb: RGB
    xyz: XYZ
    lms: LMS
    oklab: Oklab
    oklch: Oklch


@dataclass(frozen=True)
class ReverseResult:
    """Every stage of an Oklch -> sRGB conversion."""
    oklch: Oklch
    oklab: Oklab
    lms: LMS
    xyz: XYZ
    linear_rgb: RGB
    rgb: RGB


# === Hex codec ===

def decode_hex(text: str) -> RGB:
    """Parse '#RGB' or '#RRGGBB' (hash optional, any case) to normalized RGB.

    Raises:
        MalformedHex: wrong length or a non-hex character.
    """
    if not isinstance(text, str):
        raise MalformedHex(repr(text), "expected a string")

    digits = text[1:] if text.startswith("#") else text
    if len(digits) == defaults.HEX_SHORT_LENGTH:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != defaults.HEX_LONG_LENGTH:
        logger.debug("Rejected hex %r: bad length", text)
        raise MalformedHex(text, "expected 3 or 6 hex digits")
    # int(..., 16) alone would also accept signs, underscores and whitespace
    if not _HEX_DIGITS_RE.fullmatch(digits):
        logger.debug("Rejected hex %r: non-hex character", text)
        raise MalformedHex(text, "contains a non-hex character")

    value = int(digits, 16)
    r = (value >> 16) & 0xFF
    g = (value >> 8) & 0xFF
    b = value & 0xFF
    return RGB(r / 255.0, g / 255.0, b / 255.0)


def _channel_to_byte(v: float) -> int:
    v = min(max(v, 0.0), 1.0)
    # Round half up, not Python's round-half-even
    return int(floor(v * 255 + 0.5))


def encode_hex(rgb: RGB) -> str:
    """Normalized RGB -> '#rrggbb'. Channels are clamped to [0, 1] first."""
    return "#" + "".join(f"{_channel_to_byte(v):02x}" for v in rgb)


# === Pipelines ===

def forward(text: str) -> ConversionResult:
    """Hex string -> every stage down to Oklch.

    Raises:
        MalformedHex: propagated from decode_hex before any math runs.
    """
    rgb = decode_hex(text)
    linear = linearize_rgb(rgb)
    xyz = linear_rgb_to_xyz(linear)
    lms = xyz_to_lms(xyz)
    lab = lms_prime_to_oklab(compress_lms(lms))
    lch = to_cylindrical(lab)
    return ConversionResult(rgb=rgb, linear_rgb=linear, xyz=xyz, lms=lms, oklab=lab, oklch=lch)


def try_forward(text: str) -> ConversionResult | None:
    """Like forward(), but returns None for malformed input."""
    try:
        return forward(text)
    except MalformedHex:
        return None


def reverse_stages(L: float, C: float, h: float) -> ReverseResult:
    """Oklch -> every stage back up to encoded sRGB."""
    lch = Oklch(L, C, h)
    lab = to_rectangular(lch)
    lms = expand_lms(oklab_to_lms_prime(lab))
    linear = lms_to_linear_rgb(lms)
    xyz = linear_rgb_to_xyz(linear)
    rgb = delinearize_rgb(linear)
    return ReverseResult(oklch=lch, oklab=lab, lms=lms, xyz=xyz, linear_rgb=linear, rgb=rgb)


def reverse(L: float, C: float, h: float) -> RGB:
    """Oklch -> encoded sRGB. May be outside [0, 1] when out of gamut."""
    return reverse_stages(L, C, h).rgb


# === Display formatting ===

def format_oklch(lch: Oklch) -> str:
    """CSS-style 'oklch(66.12% 0.1234 255.00)'."""
    L, C, h = lch
    return (
        f"oklch({L * 100:.{defaults.OKLCH_LIGHTNESS_DECIMALS}f}% "
        f"{C:.{defaults.OKLCH_CHROMA_DECIMALS}f} "
        f"{h:.{defaults.OKLCH_HUE_DECIMALS}f})"
    )


def format_stage(values: Iterable[float], labels: str = "RGB") -> str:
    """Diagnostic line such as 'R:0.3922 G:0.5804 B:0.9294'."""
    return " ".join(
        f"{label}:{v:.{defaults.STAGE_DECIMALS}f}" for label, v in zip(labels, values)
    )
