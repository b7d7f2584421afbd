"""
Logical screen descriptor
"""

from dataclasses import dataclass, field

from models.palette import Palette


@dataclass
class ScreenDescriptor:
    """
    Logical screen read from the stream header.

    palette is the global colour table when the stream has one, otherwise
    the default eight-colour table; has_palette records which.
    """

    width: int = 0
    height: int = 0
    has_palette: bool = False
    color_resolution: int = 0
    sorted: bool = False
    palette_depth: int = 0
    background_index: int = 0
    aspect: int = 0
    palette: Palette = field(default_factory=Palette.default)
