"""
Sequential reader over an in-memory GIF buffer.
"""

from decoder.errors import TruncatedInput


class ByteSource:
    """
    Cursor over a complete, resident byte buffer.

    Every read past the end raises TruncatedInput; nothing is padded here.
    """

    def __init__(self, data: bytes):
        self._data = memoryview(bytes(data))
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def next_byte(self) -> int:
        if self._pos >= len(self._data):
            raise TruncatedInput(1, self._pos, len(self._data))
        value = self._data[self._pos]
        self._pos += 1
        return value

    def read_block(self, n: int) -> bytes:
        if n > self.remaining:
            raise TruncatedInput(n, self._pos, len(self._data))
        block = self._data[self._pos:self._pos + n].tobytes()
        self._pos += n
        return block

    def read_available(self, n: int) -> bytes:
        """Read up to n bytes; returns fewer only at end of buffer."""
        n = min(n, self.remaining)
        block = self._data[self._pos:self._pos + n].tobytes()
        self._pos += n
        return block

    def read_le16(self) -> int:
        if self.remaining < 2:
            raise TruncatedInput(2, self._pos, len(self._data))
        lo = self._data[self._pos]
        hi = self._data[self._pos + 1]
        self._pos += 2
        return lo | (hi << 8)
