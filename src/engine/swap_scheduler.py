"""
SwapScheduler - producer/consumer handshake on the FrameStore

Consumer: tick(), called once per rotation period from the tick loop. It
counts down the active picture's display time and promotes standby once
that time is used up *and* standby has been published.

Producer: publish() + wait_for_promotion(), called by the compositor.

Both sides run on one asyncio event loop, so the pending flag is a plain
bool: publish() is the only writer of True, tick() the only writer of
False. The wait never holds a lock and yields on every poll.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from models.enums import LogCategory
from models.frame_store import FrameStore
from utils.logger import get_logger
from utils.trace import Trace, get_trace

log = get_logger().for_category(LogCategory.SCHEDULER)


class SwapScheduler:
    """
    Paces promotions of the standby picture.

    Args:
        frames: Double buffer shared with the decode pipeline
        tick_period_ms: Time represented by one tick() call
        poll_interval_ms: Producer wait granularity
        simulate_ticks: When True the producer's wait loop calls tick()
            itself instead of relying on a running tick loop (host
            simulation / tests; no wall-clock pacing)
    """

    def __init__(
        self,
        frames: FrameStore,
        tick_period_ms: int = 50,
        poll_interval_ms: int = 1,
        simulate_ticks: bool = False,
        trace: Optional[Trace] = None,
    ):
        self.frames = frames
        self.tick_period_ms = tick_period_ms
        self.poll_interval_ms = poll_interval_ms
        self.simulate_ticks = simulate_ticks
        self.trace = trace if trace is not None else get_trace()

        self.tick_count = 0
        self.promotions = 0

    @property
    def pending(self) -> bool:
        return self.frames.pending

    # ==================== Consumer side ====================

    def tick(self) -> bool:
        """
        One rotation period has elapsed.

        Returns:
            True if standby was promoted on this tick
        """
        self.tick_count += 1
        active = self.frames.active

        if active.delay_ms > 0:
            active.delay_ms -= self.tick_period_ms

        if active.delay_ms <= 0 and self.frames.pending:
            slot = self.frames.swap()
            self.frames.pending = False
            self.promotions += 1
            self.trace.log('T', int(slot))
            return True
        return False

    # ==================== Producer side ====================

    def publish(self) -> None:
        """Mark standby complete; it becomes eligible for promotion."""
        if self.frames.pending:
            raise RuntimeError("standby picture is already pending")
        self.frames.pending = True

    async def wait_for_promotion(self) -> None:
        """Yield until the consumer has promoted the published picture."""
        delay = self.poll_interval_ms / 1000
        while self.frames.pending:
            if self.simulate_ticks:
                self.tick()
                await asyncio.sleep(0)
            else:
                await asyncio.sleep(delay)
