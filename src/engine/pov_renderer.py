"""
PovRenderer — active picture to LED strip

The strip is one vertical column of LEDs (one per display row) spinning
around the cylinder. Each rotation the renderer walks all display columns,
starting at the current scroll offset, and pushes each column to the strip.
The offset advances by rotation_increment columns every rotation_interval
rotations, which scrolls the picture around the cylinder.
"""

from __future__ import annotations

from typing import List

from engine.display_session import DisplaySession
from hardware.led.strip_interface import IPhysicalStrip
from models.color import Color
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.HARDWARE)


class PovRenderer:
    """
    Args:
        session: Display session providing the active-picture pixel sink
        strip: LED transport, led_count should equal the display height
        brightness: Global brightness 0-255
    """

    def __init__(self, session: DisplaySession, strip: IPhysicalStrip, brightness: int = 255):
        self.session = session
        self.strip = strip
        self.brightness = brightness

        self.rotation_offset = 0
        self.rotation_increment = 0
        self.rotation_interval = 0
        self.rotations = 0

        if strip.led_count < session.display.height:
            log.warn("Strip shorter than display height", leds=strip.led_count, rows=session.display.height)

    def set_scroll(self, increment: int, interval: int) -> None:
        """Scroll parameters of the picture being shown (from the catalog)."""
        self.rotation_increment = increment
        self.rotation_interval = interval
        self.rotation_offset = 0

    def column_colors(self, x: int) -> List[Color]:
        session = self.session
        palette = session.active_palette()
        column = session.frames.active.column(x)
        colors = [Color.from_int(palette[index]) for index in column]
        if self.brightness < 255:
            colors = [c.with_brightness(self.brightness) for c in colors]
        return colors

    def render_rotation(self) -> None:
        """Tick listener: output one full rotation, then advance the scroll."""
        width = self.session.display.width
        for col in range(width):
            self.strip.apply_frame(self.column_colors((col + self.rotation_offset) % width))

        self.rotations += 1
        if self.rotation_interval > 0 and self.rotations % self.rotation_interval == 0:
            self.rotation_offset = (self.rotation_offset + self.rotation_increment) % width
