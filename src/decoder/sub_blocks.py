"""
GIF data sub-blocks

Image data and extensions are split into length-prefixed sub-blocks of at
most 255 bytes, terminated by a zero-length sub-block.
"""

from typing import Iterator

from decoder.byte_source import ByteSource

MAX_SUB_BLOCK = 255


def read_sub_block(source: ByteSource, size: int) -> bytes:
    """
    Read one sub-block payload of the given size.

    A payload cut short by the end of the buffer is zero-filled up to size,
    so malformed trailing blocks still parse; the next read fails instead.
    """
    data = source.read_available(size)
    if len(data) < size:
        data += bytes(size - len(data))
    return data


def iter_sub_blocks(source: ByteSource) -> Iterator[bytes]:
    """Yield sub-block payloads up to (and consuming) the terminator."""
    while True:
        size = source.next_byte()
        if size == 0:
            return
        yield read_sub_block(source, size)


class SubBlockReader:
    """
    Byte reader over the sub-blocks of one image's LZW data.

    Returns 0 for every read once the terminator sub-block has been seen,
    so the code reader can run past a short stream without special cases.
    """

    def __init__(self):
        self._source = None
        self._buf = b""
        self._pos = 0
        self._complete = True

    def start(self, source: ByteSource) -> None:
        self._source = source
        self._buf = b""
        self._pos = 0
        self._complete = False

    @property
    def complete(self) -> bool:
        return self._complete

    def read_byte(self) -> int:
        if self._complete:
            return 0
        if self._pos == len(self._buf):
            size = self._source.next_byte()
            if size == 0:
                self._complete = True
                return 0
            self._buf = read_sub_block(self._source, size)
            self._pos = 0
        value = self._buf[self._pos]
        self._pos += 1
        return value

    def finish(self) -> None:
        """Skip the rest of the image data, including the terminator."""
        while not self._complete:
            size = self._source.next_byte()
            if size == 0:
                self._complete = True
                break
            read_sub_block(self._source, size)
        self._buf = b""
        self._pos = 0
