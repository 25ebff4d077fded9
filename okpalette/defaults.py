"""Central place for okpalette default settings."""

# Hex input
HEX_SHORT_LENGTH: int = 3
HEX_LONG_LENGTH: int = 6

# Cylindrical mapping
ACHROMATIC_THRESHOLD: float = 1e-4  # Below this chroma the hue is pinned to 0

# Gamut mapping
DEFAULT_CHROMA_STEP: float = 0.001  # Linear search decrement along the chroma axis
DEFAULT_GAMUT_TOLERANCE: float = 0.0  # Strict [0, 1] per channel
DEFAULT_GAMUT_METHOD: str = "linear"
GAMUT_METHODS: tuple[str, ...] = ("linear", "bisect")
DEFAULT_BISECT_ITERATIONS: int = 20
BISECT_CHROMA_CEILING: float = 0.5  # No sRGB color reaches this chroma

# Palette generation
DEFAULT_PALETTE_STEPS: int = 10
MIN_PALETTE_STEPS: int = 2
PALETTE_MIN_LIGHTNESS: float = 0.02  # Stay clear of pure black
PALETTE_MAX_LIGHTNESS: float = 0.98  # Stay clear of pure white

# Display precision
OKLCH_LIGHTNESS_DECIMALS: int = 2  # Applied to L * 100
OKLCH_CHROMA_DECIMALS: int = 4
OKLCH_HUE_DECIMALS: int = 2
STAGE_DECIMALS: int = 4
