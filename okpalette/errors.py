"""Color parsing errors."""


class ColorError(Exception):
    """Base class for okpalette errors."""
    pass


class MalformedHex(ColorError, ValueError):
    """Input is not a 3- or 6-digit hexadecimal color."""

    def __init__(self, text: str, reason: str = "not a 3 or 6 digit hex color"):
        self.text = text
        self.reason = reason
        super().__init__(f"Malformed hex color {text!r}: {reason}")
