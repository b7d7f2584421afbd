"""
LZW code decoder

Unpacks the variable-width code stream of one image block. Code width
starts at min_code_size + 1 bits and grows up to 12 bits as the string
table fills; a clear code resets it.

The string table (prefix/suffix) and the trace-back stack live here so the
whole decoder state is allocated once and reused for every image.
"""

from decoder.byte_source import ByteSource
from decoder.errors import ImageDefect
from decoder.sub_blocks import SubBlockReader

LZ_MAX_CODE = 4095      # largest 12 bit code
LZ_BITS = 12
NO_CODE = 4098          # impossible code, marks an empty table slot

_EMPTY_PREFIX = [NO_CODE] * (LZ_MAX_CODE + 1)


class LzwCodeDecoder:
    """
    Bit-level code reader plus the string table of one image block.

    Usage:
        codes.start(source)        # reads min code size, resets the table
        code = codes.read_code()
        ...
        codes.finish()             # drains remaining data sub-blocks
    """

    def __init__(self):
        self.prefix = list(_EMPTY_PREFIX)
        self.suffix = bytearray(LZ_MAX_CODE + 1)
        self.stack = bytearray(LZ_MAX_CODE + 1)
        self.stack_ptr = 0
        self.prev_code = NO_CODE

        self.depth = 0
        self.clear_code = 0
        self.eof_code = 0
        self.running_code = 0
        self.running_bits = 0
        self.max_code_plus_one = 0

        self._shift_state = 0
        self._shift_data = 0
        self._reader = SubBlockReader()

    @property
    def code_width(self) -> int:
        return self.running_bits

    def start(self, source: ByteSource) -> None:
        """Begin a new image block: read the LZW minimum code size."""
        depth = source.next_byte()
        if not 1 <= depth < LZ_BITS:
            raise ImageDefect(f"Image defect: LZW minimum code size {depth}")

        self._reader.start(source)
        self.depth = depth
        self.clear_code = 1 << depth
        self.eof_code = self.clear_code + 1
        self.stack_ptr = 0
        self.prev_code = NO_CODE
        self._shift_state = 0
        self._shift_data = 0
        self.reset_table()

    def reset_table(self) -> None:
        """Clear-code handling: empty the string table, restore initial width."""
        self.prefix[:] = _EMPTY_PREFIX
        self.running_code = self.eof_code + 1
        self.running_bits = self.depth + 1
        self.max_code_plus_one = 1 << self.running_bits

    def read_code(self) -> int:
        """
        Read the next code at the current width.

        After every code the running code advances; once it no longer fits
        in running_bits the width grows (never past 12 bits). The running
        code saturates when the table is full so a deferred clear code still
        decodes.
        """
        while self._shift_state < self.running_bits:
            self._shift_data |= self._reader.read_byte() << self._shift_state
            self._shift_state += 8

        code = self._shift_data & ((1 << self.running_bits) - 1)
        self._shift_data >>= self.running_bits
        self._shift_state -= self.running_bits

        if self.running_code < LZ_MAX_CODE + 2:
            self.running_code += 1
            if self.running_code > self.max_code_plus_one and self.running_bits < LZ_BITS:
                self.max_code_plus_one <<= 1
                self.running_bits += 1
        return code

    def trace_prefix(self, code: int) -> int:
        """
        Follow the prefix chain of code down to its first pixel.

        A defective table could loop forever, so the walk is bounded by the
        table size.
        """
        clear_code = self.clear_code
        prefix = self.prefix
        steps = 0
        while clear_code < code <= LZ_MAX_CODE and steps <= LZ_MAX_CODE:
            code = prefix[code]
            steps += 1
        if code >= clear_code:
            raise ImageDefect("Image defect: broken prefix chain")
        return code

    def finish(self) -> None:
        self._reader.finish()
