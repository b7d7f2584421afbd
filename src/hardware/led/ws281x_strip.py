# hardware/led/ws281x_strip.py
"""
WS281xStrip - rpi_ws281x hardware driver
==========================================
Concrete IPhysicalStrip for the POV column strip.

Features:
- Color order handled by the driver (strip_type constant)
- Internal buffer (_buffer) as source of truth
- apply_frame() for atomic single-DMA push of one column
"""

from __future__ import annotations

from typing import List

from rpi_ws281x import PixelStrip, ws

from hardware.led.strip_interface import IPhysicalStrip
from models.color import Color
from models.config import StripConfig
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.HARDWARE)


STRIP_TYPES = {
    "RGB": ws.WS2811_STRIP_RGB,
    "RBG": ws.WS2811_STRIP_RBG,
    "GRB": ws.WS2811_STRIP_GRB,
    "GBR": ws.WS2811_STRIP_GBR,
    "BRG": ws.WS2811_STRIP_BRG,
    "BGR": ws.WS2811_STRIP_BGR,
}


class WS281xStrip(IPhysicalStrip):
    """
    WS281x hardware driver using rpi_ws281x library.

    - _buffer: List[Color] is canonical source of truth
    - All reads (get_pixel) use _buffer (no hardware query)
    - apply_frame() pushes the whole buffer in a single DMA transfer
    """

    def __init__(self, config: StripConfig, led_count: int) -> None:
        if config.gpio_pin is None:
            raise ValueError("WS281xStrip requires a GPIO pin")
        if config.color_order not in STRIP_TYPES:
            raise ValueError(f"Unsupported color order: {config.color_order}")

        self.config = config
        self._led_count = led_count
        self._pixel_strip = PixelStrip(
            led_count,
            config.gpio_pin,
            config.frequency_hz,
            config.dma_channel,
            False,
            config.brightness,
            config.pwm_channel,
            STRIP_TYPES[config.color_order],
        )
        self._pixel_strip.begin()

        self._buffer: List[Color] = [Color.black() for _ in range(led_count)]

        log.info(
            "WS281xStrip initialized",
            gpio=config.gpio_pin,
            count=led_count,
            order=config.color_order,
            dma=config.dma_channel,
            pwm=config.pwm_channel,
        )

    # ==================== IPhysicalStrip API ====================

    @property
    def led_count(self) -> int:
        return self._led_count

    def set_pixel(self, index: int, color: Color) -> None:
        if 0 <= index < self._led_count:
            self._buffer[index] = color
            self._pixel_strip.setPixelColorRGB(index, color.r, color.g, color.b)
        else:
            log.debug("set_pixel: index out of range", index=index)

    def get_pixel(self, index: int) -> Color:
        if 0 <= index < self._led_count:
            return self._buffer[index]
        return Color.black()

    def get_frame(self) -> List[Color]:
        return list(self._buffer)

    def apply_frame(self, pixels: List[Color]) -> None:
        """
        Atomic push of one full frame (single DMA transfer).

        Pixels beyond the frame length are cleared.
        """
        length = min(len(pixels), self._led_count)
        black = Color.black()
        for i in range(self._led_count):
            color = pixels[i] if i < length else black
            self._buffer[i] = color
            self._pixel_strip.setPixelColorRGB(i, color.r, color.g, color.b)
        self.show()

    def show(self) -> None:
        try:
            self._pixel_strip.show()
        except Exception as ex:
            log.error("show failed", error=str(ex))

    def clear(self) -> None:
        """Turn off all LEDs (black + show)."""
        self.apply_frame([])

    def shutdown(self) -> None:
        log.info(f"Shutting down WS281xStrip GPIO {self.config.gpio_pin}")
        self.clear()
