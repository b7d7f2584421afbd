"""
Configuration models

Typed views of config.yaml sections, built by ConfigManager.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from models.enums import LogLevel


@dataclass(frozen=True)
class DisplayConfig:
    """Display geometry and timing"""
    width: int = 151
    height: int = 40
    tick_period_ms: int = 50           # one rotation of the cylinder at 20 Hz
    replication_gap: int = 5           # blank columns between image copies
    poll_interval_ms: int = 1          # producer wait granularity
    simulate_ticks: bool = False       # producer drives tick() itself while waiting

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DisplayConfig':
        defaults = cls()
        return cls(
            width=int(data.get("width", defaults.width)),
            height=int(data.get("height", defaults.height)),
            tick_period_ms=int(data.get("tick_period_ms", defaults.tick_period_ms)),
            replication_gap=int(data.get("replication_gap", defaults.replication_gap)),
            poll_interval_ms=int(data.get("poll_interval_ms", defaults.poll_interval_ms)),
            simulate_ticks=bool(data.get("simulate_ticks", defaults.simulate_ticks)),
        )


@dataclass(frozen=True)
class StripConfig:
    """LED strip transport settings (one LED per display row)"""
    gpio_pin: Optional[int] = 18
    color_order: str = "GRB"
    brightness: int = 255
    dma_channel: int = 10
    pwm_channel: int = 0
    frequency_hz: int = 800_000

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StripConfig':
        defaults = cls()
        gpio = data.get("gpio_pin", defaults.gpio_pin)
        return cls(
            gpio_pin=int(gpio) if gpio is not None else None,
            color_order=str(data.get("color_order", defaults.color_order)).upper(),
            brightness=int(data.get("brightness", defaults.brightness)),
            dma_channel=int(data.get("dma_channel", defaults.dma_channel)),
            pwm_channel=int(data.get("pwm_channel", defaults.pwm_channel)),
            frequency_hz=int(data.get("frequency_hz", defaults.frequency_hz)),
        )


@dataclass(frozen=True)
class CatalogEntryConfig:
    """One picture of the catalog as configured (file not loaded yet)"""
    name: str
    path: Path
    rotation_increment: int = 0     # columns scrolled per step
    rotation_interval: int = 10     # rotations between scroll steps


@dataclass(frozen=True)
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    use_colors: bool = True


@dataclass(frozen=True)
class AppConfig:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    strip: StripConfig = field(default_factory=StripConfig)
    catalog: List[CatalogEntryConfig] = field(default_factory=list)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
