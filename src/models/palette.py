"""
Palette model - GIF colour tables
"""

from dataclasses import dataclass, field
from typing import List

MAX_PALETTE_DEPTH = 8


@dataclass
class Palette:
    """
    Ordered table of packed 0xRRGGBB entries.

    Length is always 2**depth for palettes read from a stream (depth 1-8).
    Lookups past the end return black instead of raising, since pixel
    indices come from untrusted image data.
    """

    colours: List[int] = field(default_factory=list)

    @classmethod
    def from_rgb_bytes(cls, data: bytes) -> 'Palette':
        """Build from consecutive R, G, B byte triples."""
        return cls([
            (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
            for i in range(0, len(data) - len(data) % 3, 3)
        ])

    @classmethod
    def default(cls) -> 'Palette':
        """Eight-entry palette used when a stream carries no global table."""
        return cls([
            0x000000,   # Black
            0xFF0000,   # Red
            0xFFFF00,   # Yellow
            0x00FF00,   # Green
            0x00FFFF,   # Cyan
            0x0000FF,   # Blue
            0xFF00FF,   # Violet
            0xFFFFFF,   # White
        ])

    def __len__(self) -> int:
        return len(self.colours)

    def __getitem__(self, index: int) -> int:
        if 0 <= index < len(self.colours):
            return self.colours[index]
        return 0
