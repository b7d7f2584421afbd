"""
Picture model - one of the two fixed frame buffers

A Picture owns a column-major grid of palette indices sized to the display
geometry (the POV strip shows one column at a time), plus the metadata of the
image block most recently decoded into it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from models.enums import BufferSlot, DisposalMethod
from models.palette import Palette


@dataclass(frozen=True)
class Rect:
    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def fits_within(self, width: int, height: int) -> bool:
        return (self.left >= 0 and self.top >= 0
                and self.right <= width and self.bottom <= height)


@dataclass
class GraphicControl:
    """Fields of the graphic control extension applying to the next image."""
    disposal: int = DisposalMethod.UNSPECIFIED
    user_input: bool = False
    delay_ms: int = 0
    transparent_index: Optional[int] = None


@dataclass
class Picture:
    """
    Frame buffer plus the metadata of the image decoded into it.

    The grid is allocated once; pictures are re-primed and overwritten,
    never reallocated.
    """

    slot: BufferSlot
    width: int
    height: int
    pixels: bytearray = field(init=False, repr=False)

    rect: Rect = field(default_factory=Rect)
    interlaced: bool = False
    sorted: bool = False
    palette: Optional[Palette] = None      # table the image was decoded with
    control: GraphicControl = field(default_factory=GraphicControl)

    def __post_init__(self):
        self.pixels = bytearray(self.width * self.height)

    # === Graphic control shortcuts ===

    @property
    def delay_ms(self) -> int:
        return self.control.delay_ms

    @delay_ms.setter
    def delay_ms(self, value: int) -> None:
        self.control.delay_ms = value

    @property
    def disposal(self) -> int:
        return self.control.disposal

    @property
    def transparent_index(self) -> Optional[int]:
        return self.control.transparent_index

    def reset_control(self) -> None:
        self.control = GraphicControl()

    # === Pixel access ===

    def _offset(self, x: int, y: int) -> int:
        return x * self.height + y

    def get_pixel(self, x: int, y: int) -> int:
        return self.pixels[self._offset(x, y)]

    def set_pixel(self, x: int, y: int, value: int) -> None:
        self.pixels[self._offset(x, y)] = value

    def column(self, x: int) -> bytes:
        start = x * self.height
        return bytes(self.pixels[start:start + self.height])

    def fill(self, value: int) -> None:
        self.pixels[:] = bytes([value & 0xFF]) * len(self.pixels)

    def write_row(self, y: int, left: int, line: bytes, transparent: Optional[int] = None) -> None:
        """Write one decoded scanline, skipping pixels equal to transparent."""
        pixels = self.pixels
        offset = self._offset(left, y)
        stride = self.height
        for value in line:
            if value != transparent:
                pixels[offset] = value
            offset += stride

    # === Block operations (compositor) ===

    def copy_from(self, other: Picture) -> None:
        self.pixels[:] = other.pixels

    def copy_border_from(self, other: Picture, rect: Rect) -> None:
        """Copy every pixel of other lying outside rect."""
        h = self.height
        top = max(0, rect.top)
        bottom = min(h, rect.bottom)
        for x in range(self.width):
            start = x * h
            if rect.left <= x < rect.right and top < bottom:
                self.pixels[start:start + top] = other.pixels[start:start + top]
                self.pixels[start + bottom:start + h] = other.pixels[start + bottom:start + h]
            else:
                self.pixels[start:start + h] = other.pixels[start:start + h]

    def fill_rect(self, rect: Rect, value: int) -> None:
        h = self.height
        top = max(0, rect.top)
        bottom = min(h, rect.bottom)
        if top >= bottom:
            return
        run = bytes([value & 0xFF]) * (bottom - top)
        for x in range(max(0, rect.left), min(self.width, rect.right)):
            start = x * h
            self.pixels[start + top:start + bottom] = run

    def copy_columns(self, src_x: int, dst_x: int, count: int) -> None:
        """Copy count full columns starting at src_x to dst_x (clipped to width)."""
        h = self.height
        count = min(count, self.width - dst_x, self.width - src_x)
        if count <= 0:
            return
        self.pixels[dst_x * h:(dst_x + count) * h] = self.pixels[src_x * h:(src_x + count) * h]
