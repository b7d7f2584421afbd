"""
TickLoop — fixed-period consumer
--------------------------------

Calls SwapScheduler.tick() once per rotation period, then every registered
listener (e.g. the POV renderer). Runs as an asyncio task next to the decode
pipeline; scheduling is drift-free (absolute deadlines on the loop clock).
"""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional

from engine.swap_scheduler import SwapScheduler
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SCHEDULER)

TickListener = Callable[[], None]


class TickLoop:
    """
    Args:
        scheduler: Swap scheduler to tick
        period_ms: Tick period (defaults to the scheduler's)
    """

    def __init__(self, scheduler: SwapScheduler, period_ms: Optional[int] = None):
        self.scheduler = scheduler
        self.period_ms = period_ms or scheduler.tick_period_ms
        self.listeners: List[TickListener] = []

        self.running = False
        self.task: Optional[asyncio.Task] = None
        self.late_ticks = 0

    def add_listener(self, listener: TickListener) -> None:
        if listener not in self.listeners:
            self.listeners.append(listener)

    # === Lifecycle ===

    async def start(self) -> None:
        if self.running:
            log.warn("TickLoop already running")
            return
        self.running = True
        self.task = asyncio.create_task(self._run())
        log.info(f"Tick loop started @ {self.period_ms} ms")

    async def stop(self) -> None:
        if not self.running:
            return
        self.running = False
        if self.task:
            self.task.cancel()
            try:
                await self.task
            except asyncio.CancelledError:
                pass
        log.info(
            "Tick loop stopped",
            ticks=self.scheduler.tick_count,
            promotions=self.scheduler.promotions,
            late_ticks=self.late_ticks,
        )

    # === Core loop ===

    def run_once(self) -> bool:
        """One tick: promote if due, then notify listeners."""
        promoted = self.scheduler.tick()
        for listener in self.listeners:
            try:
                listener()
            except Exception as ex:
                log.error("Tick listener failed", listener=getattr(listener, "__qualname__", listener), error=str(ex))
        return promoted

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        period = self.period_ms / 1000
        deadline = loop.time() + period

        while self.running:
            await asyncio.sleep(max(0.0, deadline - loop.time()))
            self.run_once()

            deadline += period
            now = loop.time()
            if now > deadline:
                # Producer hogged the loop for more than a period; skip ahead
                self.late_ticks += 1
                deadline = now + period
