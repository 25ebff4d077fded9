"""Hex / Oklab / Oklch conversions, gamut clamping and lightness palettes.

This module provides:
- hex <-> sRGB <-> linear RGB <-> XYZ <-> Oklab <-> Oklch, both directions
- Gamut clamping by chroma reduction (fixed-step walk or bisection)
- Lightness-step palettes around a hue/chroma anchor

Example:
    from okpalette.colorspace import forward, generate_palette, format_oklch

    result = forward("#6495ED")
    print(format_oklch(result.oklch))

    for entry in generate_palette(*result.oklch, steps=10):
        print(entry.hex, "*" if entry.is_anchor else "")
"""

from .types import RGB, XYZ, LMS, Oklab, Oklch

from .transfer import (
    linearize,
    delinearize,
    linearize_rgb,
    delinearize_rgb,
)

from .matrices import (
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    xyz_to_lms,
    lms_to_xyz,
    lms_to_linear_rgb,
    compress_lms,
    expand_lms,
    lms_prime_to_oklab,
    oklab_to_lms_prime,
)

from .oklch import (
    normalize_hue,
    to_cylindrical,
    to_rectangular,
)

from .pipeline import (
    ConversionResult,
    ReverseResult,
    decode_hex,
    encode_hex,
    forward,
    try_forward,
    reverse,
    reverse_stages,
    format_oklch,
    format_stage,
)

from .gamut import (
    in_gamut,
    max_chroma,
    clamp_to_gamut,
)

from .palette import (
    PaletteEntry,
    palette_lightness,
    generate_palette,
    generate_palette_from_hex,
)

__all__ = [
    # Value types
    'RGB',
    'XYZ',
    'LMS',
    'Oklab',
    'Oklch',
    # Transfer function
    'linearize',
    'delinearize',
    'linearize_rgb',
    'delinearize_rgb',
    # Matrix transforms
    'linear_rgb_to_xyz',
    'xyz_to_linear_rgb',
    'xyz_to_lms',
    'lms_to_xyz',
    'lms_to_linear_rgb',
    'compress_lms',
    'expand_lms',
    'lms_prime_to_oklab',
    'oklab_to_lms_prime',
    # Cylindrical mapping
    'normalize_hue',
    'to_cylindrical',
    'to_rectangular',
    # Pipeline
    'ConversionResult',
    'ReverseResult',
    'decode_hex',
    'encode_hex',
    'forward',
    'try_forward',
    'reverse',
    'reverse_stages',
    'format_oklch',
    'format_stage',
    # Gamut mapping
    'in_gamut',
    'max_chroma',
    'clamp_to_gamut',
    # Palettes
    'PaletteEntry',
    'palette_lightness',
    'generate_palette',
    'generate_palette_from_hex',
]
