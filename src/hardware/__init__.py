"""
Hardware Layer

Low-level collaborators of the display engine:

- LED strip transport (IPhysicalStrip, VirtualStrip, WS281xStrip)
- Diagnostics channel (fatal-error text output)

WS281xStrip is not imported here: rpi_ws281x only exists on the device.
"""
from .diagnostics import DiagnosticsSink, MemoryDiagnostics, StreamDiagnostics
from .led.strip_interface import IPhysicalStrip
from .led.virtual_strip import VirtualStrip
from .led.strip_factory import create_strip

__all__ = [
    "DiagnosticsSink",
    "MemoryDiagnostics",
    "StreamDiagnostics",
    "IPhysicalStrip",
    "VirtualStrip",
    "create_strip",
]
