"""
Tests for ByteSource and the sub-block readers.
"""

import pytest

from decoder.byte_source import ByteSource
from decoder.errors import GifDecodeError, TruncatedInput
from decoder.sub_blocks import SubBlockReader, iter_sub_blocks, read_sub_block


class TestByteSource:
    """Sequential reads over a resident buffer."""

    def test_next_byte_advances(self):
        source = ByteSource(b"\x01\x02")
        assert source.next_byte() == 1
        assert source.next_byte() == 2
        assert source.position == 2
        assert source.remaining == 0

    def test_read_past_end_raises(self):
        source = ByteSource(b"\x01")
        source.next_byte()
        with pytest.raises(TruncatedInput) as exc:
            source.next_byte()
        assert exc.value.position == 1
        assert isinstance(exc.value, GifDecodeError)

    def test_read_block_never_pads(self):
        source = ByteSource(b"abc")
        with pytest.raises(TruncatedInput):
            source.read_block(4)
        assert source.position == 0
        assert source.read_block(3) == b"abc"

    def test_read_le16(self):
        source = ByteSource(b"\x97\x00\x28")
        assert source.read_le16() == 151
        with pytest.raises(TruncatedInput):
            source.read_le16()

    def test_read_available_stops_at_end(self):
        source = ByteSource(b"xy")
        assert source.read_available(5) == b"xy"
        assert source.read_available(5) == b""


class TestSubBlocks:
    """Length-prefixed sub-block framing."""

    def test_iter_sub_blocks_consumes_terminator(self):
        source = ByteSource(b"\x02ab\x01c\x00\x3b")
        assert list(iter_sub_blocks(source)) == [b"ab", b"c"]
        assert source.next_byte() == 0x3B

    def test_short_sub_block_is_zero_filled(self):
        source = ByteSource(b"ab")
        assert read_sub_block(source, 4) == b"ab\x00\x00"
        assert source.remaining == 0

    def test_reader_returns_zero_after_terminator(self):
        source = ByteSource(b"\x01\x7f\x00")
        reader = SubBlockReader()
        reader.start(source)
        assert reader.read_byte() == 0x7F
        assert reader.read_byte() == 0
        assert reader.complete
        assert reader.read_byte() == 0

    def test_finish_drains_remaining_blocks(self):
        source = ByteSource(b"\x02\x01\x02\x03\x04\x05\x06\x00\x3b")
        reader = SubBlockReader()
        reader.start(source)
        reader.read_byte()
        reader.finish()
        assert reader.complete
        assert source.next_byte() == 0x3B

    def test_missing_terminator_is_truncation(self):
        source = ByteSource(b"\x01\x05")
        reader = SubBlockReader()
        reader.start(source)
        reader.read_byte()
        with pytest.raises(TruncatedInput):
            reader.finish()
