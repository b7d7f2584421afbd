"""
Pixel stream expander

Turns LZW codes into scanlines of palette indices. A code expands to a
string of pixels by walking its prefix chain backwards and pushing each
suffix onto the trace-back stack; popping the stack yields the pixels in
order. Strings may straddle scanlines, so whatever is left on the stack
is emitted at the start of the next call.
"""

from typing import Iterator

from decoder.errors import ImageDefect
from decoder.lzw_codes import LZ_MAX_CODE, NO_CODE, LzwCodeDecoder

INTERLACE_START = (0, 4, 2, 1)
INTERLACE_STEP = (8, 8, 4, 2)


def interlaced_rows(height: int, interlaced: bool) -> Iterator[int]:
    """Row visiting order of an image block."""
    if not interlaced:
        yield from range(height)
        return
    for start, step in zip(INTERLACE_START, INTERLACE_STEP):
        yield from range(start, height, step)


class PixelStreamExpander:
    """
    Scanline producer on top of an LzwCodeDecoder.

    Args:
        codes: Code decoder holding the string table and stack
        max_line_length: Longest scanline that will be requested
    """

    def __init__(self, codes: LzwCodeDecoder, max_line_length: int):
        self.codes = codes
        self._line = bytearray(max_line_length)

    def decode_scanline(self, length: int, last: bool = False) -> memoryview:
        """
        Decode the next scanline of length pixels.

        An end code is only tolerated in place of the very last pixel of the
        very last scanline (last=True); the line returned is then one pixel
        short and that pixel keeps its previous value.

        Returns a view into an internal buffer, valid until the next call.
        """
        if length > len(self._line):
            raise ImageDefect(f"Image defect: scanline of {length} pixels")

        codes = self.codes
        prefix = codes.prefix
        suffix = codes.suffix
        stack = codes.stack
        line = self._line
        clear_code = codes.clear_code
        eof_code = codes.eof_code
        prev_code = codes.prev_code
        stack_ptr = codes.stack_ptr
        i = 0

        while stack_ptr and i < length:
            stack_ptr -= 1
            line[i] = stack[stack_ptr]
            i += 1

        while i < length:
            code = codes.read_code()

            if code == eof_code:
                if i != length - 1 or not last:
                    raise ImageDefect("Unexpected end of GIF data")
                break

            if code == clear_code:
                codes.reset_table()
                prev_code = NO_CODE
                continue

            if code < clear_code:
                line[i] = code
                i += 1
            else:
                if code > LZ_MAX_CODE:
                    raise ImageDefect(f"Image defect: code {code} out of range")

                if prefix[code] == NO_CODE:
                    # Unseen code: only legal as the entry about to be added
                    # (KwKwK); its last pixel is the first pixel of prev_code.
                    if code != codes.running_code - 2 or prev_code == NO_CODE:
                        raise ImageDefect(f"Image defect: undefined code {code}")
                    current_prefix = prev_code
                    first = codes.trace_prefix(prev_code)
                    suffix[code] = first
                    stack[stack_ptr] = first
                    stack_ptr += 1
                else:
                    current_prefix = code

                steps = 0
                while steps <= LZ_MAX_CODE and clear_code < current_prefix <= LZ_MAX_CODE:
                    steps += 1
                    stack[stack_ptr] = suffix[current_prefix]
                    stack_ptr += 1
                    current_prefix = prefix[current_prefix]
                if steps >= LZ_MAX_CODE or current_prefix >= clear_code:
                    raise ImageDefect("Image defect: runaway prefix trace")

                stack[stack_ptr] = current_prefix
                stack_ptr += 1

                while stack_ptr and i < length:
                    stack_ptr -= 1
                    line[i] = stack[stack_ptr]
                    i += 1

            if prev_code != NO_CODE:
                running_code = codes.running_code
                if running_code < 2 or running_code > LZ_MAX_CODE + 2:
                    raise ImageDefect("Image defect: invalid table growth")
                slot = running_code - 2
                if slot <= LZ_MAX_CODE and prefix[slot] == NO_CODE:
                    prefix[slot] = prev_code
                    if code == slot:
                        suffix[slot] = codes.trace_prefix(prev_code)
                    else:
                        suffix[slot] = codes.trace_prefix(code)
            prev_code = code

        codes.prev_code = prev_code
        codes.stack_ptr = stack_ptr
        return memoryview(line)[:i]
