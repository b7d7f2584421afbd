#!/usr/bin/env python3
"""
main.py — Application entry point for the POV GIF display
--------------------------------------------------------

Responsible for:
- loading configuration and the picture catalog
- wiring strip, display session, renderer and tick loop
- showing every catalog picture in turn
- graceful shutdown on Ctrl+C

After a fatal decode error the tick loop keeps spinning the last frame
until the process is stopped.
"""

import sys

# Set UTF-8 encoding for output BEFORE logging starts (fixes Unicode symbol rendering)
if hasattr(sys.stdout, 'reconfigure') and (sys.stdout.encoding or '').lower() != 'utf-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and (sys.stderr.encoding or '').lower() != 'utf-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import argparse
import asyncio
from typing import List, Optional

from engine import DisplaySession, PovRenderer, TickLoop
from hardware import StreamDiagnostics, create_strip
from managers import ConfigManager, PictureCatalog
from models.config import AppConfig
from models.enums import LogCategory
from utils.logger import configure_logger, get_logger
from utils.trace import get_trace

log = get_logger().for_category(LogCategory.SYSTEM)


async def show_catalog(session: DisplaySession, renderer: PovRenderer, catalog: PictureCatalog, once: bool) -> None:
    """Show pictures until a fatal error (or after one pass with once=True)."""
    while True:
        for entry in catalog:
            renderer.set_scroll(entry.rotation_increment, entry.rotation_interval)
            log.info(f"Showing '{entry.name}'", bytes=entry.length)

            result = await session.show_gif(entry.data)
            if not result.ok:
                return
            log.debug(f"'{entry.name}' done", images=result.images)

        if once:
            return


async def run(config: AppConfig, once: bool = False) -> int:
    catalog = PictureCatalog.load(config.catalog)
    if len(catalog) == 0:
        log.error("Picture catalog is empty, nothing to show")
        return 1

    trace = get_trace()
    session = DisplaySession(config.display, StreamDiagnostics(), trace)
    strip = create_strip(config.strip, config.display.height)
    renderer = PovRenderer(session, strip, brightness=config.strip.brightness)

    tick_loop = TickLoop(session.scheduler)
    tick_loop.add_listener(renderer.render_rotation)
    trace.rotation_counter = lambda: renderer.rotations

    trace.start()
    await tick_loop.start()
    try:
        await show_catalog(session, renderer, catalog, once)
        if session.halted and not once:
            log.warn("Display halted, spinning last frame (Ctrl+C to exit)")
            await asyncio.Event().wait()
    finally:
        await tick_loop.stop()
        strip.clear()

    return 2 if session.halted else 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="POV GIF display")
    parser.add_argument("--config", default="config/config.yaml", help="config.yaml path (relative to src/)")
    parser.add_argument("--once", action="store_true", help="stop after one pass through the catalog")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = ConfigManager(args.config).load()
    configure_logger(config.logging.level, config.logging.use_colors)

    try:
        return asyncio.run(run(config, once=args.once))
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
        return 0


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
