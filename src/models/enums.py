"""
Enums for the POV GIF display
"""

from enum import Enum, IntEnum, auto


class BlockIntroducer(IntEnum):
    """GIF block introducer bytes"""
    IMAGE = 0x2C        # Image descriptor + LZW data
    EXTENSION = 0x21    # Extension block (label + sub-blocks)
    TRAILER = 0x3B      # End of stream


class ExtensionLabel(IntEnum):
    """Extension labels following the 0x21 introducer"""
    PLAIN_TEXT = 0x01
    GRAPHIC_CONTROL = 0xF9
    COMMENT = 0xFE
    APPLICATION = 0xFF


class DisposalMethod(IntEnum):
    """
    What happens to a frame's pixels before the next frame is drawn.

    Values 4-7 are reserved by GIF89a; they are kept as raw ints and treated
    like UNSPECIFIED (full copy).
    """
    UNSPECIFIED = 0
    LEAVE_IN_PLACE = 1
    RESTORE_TO_BACKGROUND = 2
    RESTORE_TO_PREVIOUS = 3

    @classmethod
    def parse(cls, value: int) -> "DisposalMethod | int":
        try:
            return cls(value)
        except ValueError:
            return value


class BufferSlot(IntEnum):
    """The two fixed picture storage slots"""
    SLOT_0 = 0
    SLOT_1 = 1

    def other(self) -> "BufferSlot":
        return BufferSlot(1 - self.value)


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    DECODER = auto()     # Container parsing, LZW decoding
    COMPOSITOR = auto()  # Replication, disposal, publish/wait
    SCHEDULER = auto()   # Tick loop, buffer promotion
    HARDWARE = auto()    # LED strip, diagnostics channel
    CATALOG = auto()     # Picture catalog loading
    SYSTEM = auto()      # Startup, shutdown, fatal errors
    TRACE = auto()       # Trace ring buffer dumps
