"""Immutable color value types.

Every type is a frozen dataclass of three floats that unpacks like a tuple:

    L, C, h = oklch
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterator


class _Triple:
    """Tuple-style unpacking for the three-channel dataclasses."""

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def as_tuple(self) -> tuple[float, float, float]:
        return astuple(self)


@dataclass(frozen=True)
class RGB(_Triple):
    """Normalized RGB. Nominally [0, 1]; out-of-range values are allowed.

    Used for both gamma-encoded sRGB and linear-light RGB.
    """
    r: float
    g: float
    b: float


@dataclass(frozen=True)
class XYZ(_Triple):
    """CIE XYZ tristimulus values, D65 white."""
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class LMS(_Triple):
    """Oklab cone response (linear, before cube-root compression)."""
    l: float
    m: float
    s: float


@dataclass(frozen=True)
class Oklab(_Triple):
    L: float
    a: float
    b: float


@dataclass(frozen=True)
class Oklch(_Triple):
    """Cylindrical Oklab. C >= 0, h in degrees [0, 360)."""
    L: float
    C: float
    h: float
