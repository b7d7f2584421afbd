"""
Color model - 24-bit RGB colour as used by palettes and LED strips

Palette entries are stored as packed 0xRRGGBB ints (cheap to look up from the
tick); Color wraps one for the LED transport side.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """
    Immutable RGB colour

    Examples:
        color = Color.from_rgb(255, 0, 0)
        color = Color.from_int(0xFF0000)
    """

    r: int = 0
    g: int = 0
    b: int = 0

    # === CONSTRUCTORS ===

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        return cls(r & 0xFF, g & 0xFF, b & 0xFF)

    @classmethod
    def from_int(cls, value: int) -> 'Color':
        """Create from packed 24-bit 0xRRGGBB value"""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def black(cls) -> 'Color':
        return cls(0, 0, 0)

    # === BRIGHTNESS SCALING ===

    @staticmethod
    def apply_brightness(r: int, g: int, b: int, brightness: int) -> Tuple[int, int, int]:
        """
        Apply brightness scaling to RGB values.

        Args:
            r, g, b: RGB values (0-255)
            brightness: Brightness (0-255)

        Returns:
            Scaled (r, g, b) tuple
        """
        scale = max(0, min(255, brightness)) / 255
        return (int(r * scale), int(g * scale), int(b * scale))

    def with_brightness(self, brightness: int) -> 'Color':
        return Color(*Color.apply_brightness(self.r, self.g, self.b, brightness))
