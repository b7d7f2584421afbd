"""
GIF decoding: byte source, LZW codes, scanline expansion, container grammar
"""

from .byte_source import ByteSource
from .container_parser import ContainerParser
from .errors import (
    BadHeader,
    GifDecodeError,
    ImageDefect,
    PaletteDepthOutOfRange,
    ScreenSizeOutOfRange,
    TruncatedInput,
)
from .lzw_codes import LZ_BITS, LZ_MAX_CODE, NO_CODE, LzwCodeDecoder
from .pixel_stream import PixelStreamExpander, interlaced_rows

__all__ = [
    'ByteSource',
    'ContainerParser',
    'BadHeader',
    'GifDecodeError',
    'ImageDefect',
    'PaletteDepthOutOfRange',
    'ScreenSizeOutOfRange',
    'TruncatedInput',
    'LZ_BITS',
    'LZ_MAX_CODE',
    'NO_CODE',
    'LzwCodeDecoder',
    'PixelStreamExpander',
    'interlaced_rows',
]
