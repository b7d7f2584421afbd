"""
FrameCompositor - turns each decoded image into a displayable frame

Per image, after the LZW data is in the standby picture:

    1. replicate   tile the image across the cylinder circumference
    2. publish     hand standby to the scheduler, wait for promotion
    3. re-prime    prepare the freed slot for the next image according to
                   the disposal method of the picture now on display
"""

from __future__ import annotations

from typing import Optional

from engine.swap_scheduler import SwapScheduler
from models.enums import DisposalMethod, LogCategory
from models.frame_store import FrameStore
from models.picture import Picture
from models.screen import ScreenDescriptor
from utils.logger import get_logger
from utils.trace import Trace, get_trace

log = get_logger().for_category(LogCategory.COMPOSITOR)

DEFAULT_REPLICATION_GAP = 5


class FrameCompositor:
    """
    Args:
        frames: Double buffer
        scheduler: Swap scheduler used for publish/wait
        replication_gap: Blank columns between two copies of the image
    """

    def __init__(
        self,
        frames: FrameStore,
        scheduler: SwapScheduler,
        replication_gap: int = DEFAULT_REPLICATION_GAP,
        trace: Optional[Trace] = None,
    ):
        self.frames = frames
        self.scheduler = scheduler
        self.replication_gap = replication_gap
        self.trace = trace if trace is not None else get_trace()
        self.frames_presented = 0

    # ==================== Replication ====================

    def replication_count(self, image_width: int) -> int:
        """Number of image copies that fit around the display."""
        pitch = image_width + self.replication_gap
        if pitch <= 0:
            return 1
        return self.frames.width // pitch

    def replicate(self, picture: Picture, image_width: int) -> int:
        """
        Copy columns [0, image_width) to every further slot around the
        circumference. Returns the total copy count (original included).
        """
        copies = self.replication_count(image_width)
        pitch = image_width + self.replication_gap
        for i in range(1, copies):
            picture.copy_columns(0, i * pitch, image_width)
        return copies

    # ==================== Disposal ====================

    def reprime(self, background_index: int) -> None:
        """
        Prepare standby (the previously displayed frame) for the next image.

        The disposal method and rectangle are those of the picture that just
        went on display.
        """
        shown = self.frames.active
        target = self.frames.standby

        if shown.disposal == DisposalMethod.RESTORE_TO_PREVIOUS:
            target.copy_border_from(shown, shown.rect)
        else:
            target.copy_from(shown)

        if shown.disposal == DisposalMethod.RESTORE_TO_BACKGROUND:
            target.fill_rect(shown.rect, background_index)

        target.reset_control()

    # ==================== Pipeline ====================

    async def present(self, picture: Picture, screen: ScreenDescriptor) -> None:
        """Replicate, publish and wait, then re-prime the freed slot."""
        if picture is not self.frames.standby:
            raise RuntimeError("only the standby picture can be presented")

        copies = self.replicate(picture, screen.width)

        delay_ms = picture.delay_ms
        self.trace.log('R', delay_ms)
        self.scheduler.publish()
        await self.scheduler.wait_for_promotion()
        self.trace.log('r', 0)

        self.reprime(screen.background_index)
        self.frames_presented += 1

        log.debug(
            "Frame presented",
            slot=picture.slot.name,
            copies=copies,
            delay_ms=delay_ms,
            disposal=picture.disposal,
        )
