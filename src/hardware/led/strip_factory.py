# hardware/led/strip_factory.py

from models.config import StripConfig
from models.enums import LogCategory
from runtime.runtime_info import RuntimeInfo
from hardware.led.strip_interface import IPhysicalStrip
from hardware.led.virtual_strip import VirtualStrip
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.HARDWARE)


def create_strip(config: StripConfig, pixel_count: int) -> IPhysicalStrip:
    """
    Factory that never crashes the app on a PC / WSL.

    The rpi_ws281x driver is only imported on a Raspberry Pi that has it
    installed and a GPIO pin configured; everywhere else a VirtualStrip is used.
    """
    if config.gpio_pin is not None and RuntimeInfo.is_raspberry_pi() and RuntimeInfo.has_ws281x():
        from hardware.led.ws281x_strip import WS281xStrip
        return WS281xStrip(config, pixel_count)

    log.info("Using virtual LED strip", leds=pixel_count)
    return VirtualStrip(pixel_count)
