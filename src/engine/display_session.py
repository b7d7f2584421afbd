"""
DisplaySession — explicit context for one POV display
------------------------------------------------------

Owns everything the decode pipeline and the tick share:
    - FrameStore (two picture slots + pending flag)
    - LZW decoder tables (allocated once, reused for every image)
    - ContainerParser, FrameCompositor, SwapScheduler

show_gif() is the top-level driver. Decode errors are fatal: the session
writes a diagnostic, freezes the trace and halts. The tick side keeps
working on whatever frame was last active; the producer never advances
again (further show_gif() calls raise SessionHalted).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from decoder.container_parser import ContainerParser
from decoder.errors import GifDecodeError
from decoder.lzw_codes import LzwCodeDecoder
from engine.frame_compositor import FrameCompositor
from engine.swap_scheduler import SwapScheduler
from hardware.diagnostics import DiagnosticsSink, StreamDiagnostics
from models.config import DisplayConfig
from models.enums import LogCategory
from models.frame_store import FrameStore
from models.palette import Palette
from models.screen import ScreenDescriptor
from utils.logger import get_logger
from utils.trace import Trace, get_trace

log = get_logger().for_category(LogCategory.SYSTEM)


class SessionHalted(RuntimeError):
    """Raised when the producer is asked to run after a fatal error."""


@dataclass(frozen=True)
class ShowResult:
    images: int
    error: Optional[GifDecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DisplaySession:
    """
    Args:
        display: Geometry and timing
        diagnostics: Where fatal errors are reported
        trace: Trace ring buffer (global one by default)

    Example:
        session = DisplaySession(DisplayConfig(), StreamDiagnostics())
        result = await session.show_gif(data)
        rgb = session.get_active_pixel_color(10, 5)
    """

    def __init__(
        self,
        display: Optional[DisplayConfig] = None,
        diagnostics: Optional[DiagnosticsSink] = None,
        trace: Optional[Trace] = None,
    ):
        self.display = display or DisplayConfig()
        self.diagnostics = diagnostics or StreamDiagnostics()
        self.trace = trace if trace is not None else get_trace()

        self.frames = FrameStore(self.display.width, self.display.height)
        self.codes = LzwCodeDecoder()
        self.parser = ContainerParser(self.frames, self.codes)
        self.scheduler = SwapScheduler(
            self.frames,
            tick_period_ms=self.display.tick_period_ms,
            poll_interval_ms=self.display.poll_interval_ms,
            simulate_ticks=self.display.simulate_ticks,
            trace=self.trace,
        )
        self.compositor = FrameCompositor(
            self.frames,
            self.scheduler,
            replication_gap=self.display.replication_gap,
            trace=self.trace,
        )

        self.halted = False
        self.error: Optional[GifDecodeError] = None

    @property
    def screen(self) -> ScreenDescriptor:
        return self.parser.screen

    # ==================== Producer ====================

    async def show_gif(self, data: bytes) -> ShowResult:
        """
        Decode every image of a GIF held in memory and present each one.

        Returns after the last image has been promoted to active.
        """
        if self.halted:
            raise SessionHalted(f"session halted after: {self.error}")

        images = 0
        try:
            for picture in self.parser.iter_images(data):
                await self.compositor.present(picture, self.parser.screen)
                images += 1
        except GifDecodeError as ex:
            self.halt(ex)
            return ShowResult(images=images, error=ex)

        return ShowResult(images=images)

    def halt(self, error: GifDecodeError) -> None:
        self.halted = True
        self.error = error
        self.trace.log('E', self.frames.active_slot)
        self.trace.stop()

        log.error("Fatal decode error, display halted", error=str(error), error_type=type(error).__name__)
        self.diagnostics.write(f"\n\n{error}!\nSYSTEM HALTED!\n")
        self.trace.dump(self.diagnostics)
        log.with_category(LogCategory.TRACE).debug("Trace dumped", entries=len(self.trace))

    # ==================== Pixel sink (tick side) ====================

    def active_palette(self) -> Palette:
        active = self.frames.active
        return active.palette if active.palette is not None else self.parser.screen.palette

    def get_active_pixel(self, x: int, y: int) -> int:
        return self.frames.active.get_pixel(x, y)

    def get_active_pixel_color(self, x: int, y: int) -> int:
        """24-bit 0xRRGGBB colour of an active pixel."""
        return self.active_palette()[self.frames.active.get_pixel(x, y)]
