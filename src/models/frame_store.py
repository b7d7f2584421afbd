"""
FrameStore - the two picture slots and which of them is on display

Promotion flips an index; picture data is never copied between slots by
the store itself.
"""

from __future__ import annotations

from typing import Tuple

from models.enums import BufferSlot
from models.picture import Picture


class FrameStore:
    """
    Double buffer of two fixed Pictures.

    active  - read by the tick/rendering side
    standby - written by the decode pipeline
    pending - set by the producer when standby is complete, cleared by the
              consumer when it promotes standby; the only shared flag
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.slots: Tuple[Picture, Picture] = (
            Picture(BufferSlot.SLOT_0, width, height),
            Picture(BufferSlot.SLOT_1, width, height),
        )
        self.active_slot = BufferSlot.SLOT_0
        self.pending = False

    @property
    def active(self) -> Picture:
        return self.slots[self.active_slot]

    @property
    def standby(self) -> Picture:
        return self.slots[self.active_slot.other()]

    def swap(self) -> BufferSlot:
        """Make standby the active picture; returns the new active slot."""
        self.active_slot = self.active_slot.other()
        return self.active_slot
