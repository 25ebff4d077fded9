"""Fixed 3x3 transforms between linear sRGB, XYZ, LMS and Oklab.

Reference: https://bottosson.github.io/posts/oklab/

Coefficients are load-bearing: round trips drift visibly below ~7
significant digits.
"""

import numpy as np

from .types import RGB, XYZ, LMS, Oklab

Matrix = tuple[tuple[float, float, float], ...]

# === Linear sRGB <-> XYZ (D65) ===

LINEAR_RGB_TO_XYZ: Matrix = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

XYZ_TO_LINEAR_RGB: Matrix = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

# === XYZ <-> LMS (sharpened cone response) ===

XYZ_TO_LMS: Matrix = (
    (0.8189330101, 0.3618667424, -0.1288597137),
    (0.0329845436, 0.9293118715, 0.0361456387),
    (0.0482003018, 0.2643662691, 0.6338517070),
)

# Exact inverse of XYZ_TO_LMS, derived once at import
LMS_TO_XYZ: Matrix = tuple(
    tuple(float(c) for c in row) for row in np.linalg.inv(np.array(XYZ_TO_LMS))
)

# LMS straight to linear sRGB (XYZ_TO_LINEAR_RGB folded in). Rows sum to 1
LMS_TO_LINEAR_RGB: Matrix = (
    (+4.0767416621, -3.3077115913, +0.2309699292),
    (-1.2684380046, +2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, +1.7076147010),
)

# === LMS' (cube root) <-> Oklab ===

LMS_PRIME_TO_OKLAB: Matrix = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

OKLAB_TO_LMS_PRIME: Matrix = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)


def _apply(m: Matrix, x: float, y: float, z: float) -> tuple[float, float, float]:
    return (
        m[0][0]*x + m[0][1]*y + m[0][2]*z,
        m[1][0]*x + m[1][1]*y + m[1][2]*z,
        m[2][0]*x + m[2][1]*y + m[2][2]*z,
    )


def _apply_white_anchored(m: Matrix, x: float, y: float, z: float) -> tuple[float, float, float]:
    # Rows of m sum to 1, so x == y == z maps to itself exactly
    return (
        x + m[0][1]*(y - x) + m[0][2]*(z - x),
        x + m[1][1]*(y - x) + m[1][2]*(z - x),
        x + m[2][1]*(y - x) + m[2][2]*(z - x),
    )


def linear_rgb_to_xyz(rgb: RGB) -> XYZ:
    return XYZ(*_apply(LINEAR_RGB_TO_XYZ, rgb.r, rgb.g, rgb.b))


def xyz_to_linear_rgb(xyz: XYZ) -> RGB:
    return RGB(*_apply(XYZ_TO_LINEAR_RGB, xyz.x, xyz.y, xyz.z))


def xyz_to_lms(xyz: XYZ) -> LMS:
    return LMS(*_apply(XYZ_TO_LMS, xyz.x, xyz.y, xyz.z))


def lms_to_xyz(lms: LMS) -> XYZ:
    return XYZ(*_apply(LMS_TO_XYZ, lms.l, lms.m, lms.s))


def lms_to_linear_rgb(lms: LMS) -> RGB:
    """Fused LMS -> linear sRGB, skipping the XYZ stage. Grays stay neutral."""
    return RGB(*_apply_white_anchored(LMS_TO_LINEAR_RGB, lms.l, lms.m, lms.s))


def compress_lms(lms: LMS) -> LMS:
    """LMS -> LMS'. Sign-preserving cube root; saturated colors can go negative."""
    l_, m_, s_ = np.cbrt((lms.l, lms.m, lms.s))
    return LMS(float(l_), float(m_), float(s_))


def expand_lms(lms_: LMS) -> LMS:
    """LMS' -> LMS (cube)."""
    return LMS(lms_.l**3, lms_.m**3, lms_.s**3)


def lms_prime_to_oklab(lms_: LMS) -> Oklab:
    return Oklab(*_apply(LMS_PRIME_TO_OKLAB, lms_.l, lms_.m, lms_.s))


def oklab_to_lms_prime(lab: Oklab) -> LMS:
    return LMS(*_apply(OKLAB_TO_LMS_PRIME, lab.L, lab.a, lab.b))
