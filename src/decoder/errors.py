"""
Decoder errors

Every decode failure is fatal for the stream being shown: a corrupted
in-memory asset cannot be retried. Components raise, DisplaySession halts.
"""


class GifDecodeError(Exception):
    """Base class for all fatal decode errors."""


class TruncatedInput(GifDecodeError):
    """Byte source exhausted before a requested read completed."""

    def __init__(self, requested: int, position: int, length: int):
        self.requested = requested
        self.position = position
        self.length = length
        super().__init__(
            f"Truncated input: wanted {requested} byte(s) at offset {position} of {length}"
        )


class BadHeader(GifDecodeError):
    """Signature bytes are not 'GIF'."""

    def __init__(self, signature: bytes):
        self.signature = signature
        super().__init__(f"Wrong GIF header {signature!r}")


class ScreenSizeOutOfRange(GifDecodeError):
    """Declared screen or image rectangle exceeds the display geometry."""

    def __init__(self, width: int, height: int, max_width: int, max_height: int):
        self.width = width
        self.height = height
        super().__init__(
            f"GIF size {width}x{height} out of range (display is {max_width}x{max_height})"
        )


class PaletteDepthOutOfRange(GifDecodeError):
    """Declared colour-table depth exceeds 8 bits."""

    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(f"GIF palette depth {depth} out of range")


class ImageDefect(GifDecodeError):
    """LZW table inconsistency, invalid code or misplaced end code."""
