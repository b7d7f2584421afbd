"""
Container parser - top level GIF grammar

    header  "GIF" + version
    screen  logical screen descriptor [+ global colour table]
    blocks  0x2C image | 0x21 extension | 0x3B trailer

Image data is decoded straight into the standby picture of a FrameStore.
iter_images() yields after each image so the caller can composite and
publish it before the next block is read; the parser keeps no state
between images except the screen descriptor.
"""

from __future__ import annotations

from typing import Iterator, Optional

from decoder.byte_source import ByteSource
from decoder.errors import BadHeader, PaletteDepthOutOfRange, ScreenSizeOutOfRange
from decoder.lzw_codes import LzwCodeDecoder
from decoder.pixel_stream import PixelStreamExpander, interlaced_rows
from decoder.sub_blocks import iter_sub_blocks
from models.enums import BlockIntroducer, DisposalMethod, ExtensionLabel, LogCategory
from models.frame_store import FrameStore
from models.palette import MAX_PALETTE_DEPTH, Palette
from models.picture import GraphicControl, Picture, Rect
from models.screen import ScreenDescriptor
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.DECODER)

SIGNATURE = b"GIF"


class ContainerParser:
    """
    Parses one in-memory GIF stream into a FrameStore.

    Args:
        frames: Double buffer; images land in frames.standby
        codes: Session-owned LZW decoder (tables reused across images)

    Example:
        parser = ContainerParser(frames, LzwCodeDecoder())
        for picture in parser.iter_images(data):
            ...  # composite + publish picture
    """

    def __init__(self, frames: FrameStore, codes: Optional[LzwCodeDecoder] = None):
        self.frames = frames
        self.codes = codes or LzwCodeDecoder()
        self.expander = PixelStreamExpander(self.codes, frames.width)
        self.screen = ScreenDescriptor()
        self.version = b""
        self.block_count = 0

    # ==================== Header / screen ====================

    def read_header(self, source: ByteSource) -> None:
        header = source.read_block(6)
        if header[:3] != SIGNATURE:
            raise BadHeader(header[:3])
        self.version = header[3:]

    def read_palette(self, source: ByteSource, depth: int) -> Palette:
        if depth > MAX_PALETTE_DEPTH:
            raise PaletteDepthOutOfRange(depth)
        return Palette.from_rgb_bytes(source.read_block(3 * (1 << depth)))

    def read_screen(self, source: ByteSource) -> ScreenDescriptor:
        screen = ScreenDescriptor()
        screen.width = source.read_le16()
        screen.height = source.read_le16()
        if screen.width > self.frames.width or screen.height > self.frames.height:
            raise ScreenSizeOutOfRange(screen.width, screen.height, self.frames.width, self.frames.height)

        info = source.next_byte()
        screen.has_palette = bool(info & 0x80)
        screen.color_resolution = ((info & 0x70) >> 4) + 1
        screen.sorted = bool(info & 0x08)
        screen.palette_depth = (info & 0x07) + 1
        if screen.palette_depth > MAX_PALETTE_DEPTH:
            raise PaletteDepthOutOfRange(screen.palette_depth)

        screen.background_index = source.next_byte()
        screen.aspect = source.next_byte()

        if screen.has_palette:
            screen.palette = self.read_palette(source, screen.palette_depth)

        self.frames.standby.fill(screen.background_index)
        self.screen = screen

        log.debug(
            "Screen descriptor read",
            size=f"{screen.width}x{screen.height}",
            global_palette=len(screen.palette) if screen.has_palette else None,
            background=screen.background_index,
        )
        return screen

    # ==================== Blocks ====================

    def read_extension(self, source: ByteSource, picture: Picture) -> None:
        label = source.next_byte()
        blocks = iter_sub_blocks(source)
        first = next(blocks, None)

        if label == ExtensionLabel.GRAPHIC_CONTROL and first is not None:
            data = first.ljust(4, b"\0")
            packed = data[0]
            picture.control = GraphicControl(
                disposal=DisposalMethod.parse((packed >> 2) & 0x07),
                user_input=bool((packed >> 1) & 0x01),
                delay_ms=10 * (data[1] | (data[2] << 8)),
                transparent_index=data[3] if packed & 0x01 else None,
            )

        for _ in blocks:
            pass

    def read_image(self, source: ByteSource, picture: Picture) -> None:
        left = source.read_le16()
        top = source.read_le16()
        width = source.read_le16()
        height = source.read_le16()
        rect = Rect(left, top, width, height)
        if not rect.fits_within(self.frames.width, self.frames.height):
            raise ScreenSizeOutOfRange(rect.right, rect.bottom, self.frames.width, self.frames.height)

        info = source.next_byte()
        picture.rect = rect
        picture.interlaced = bool(info & 0x40)
        picture.sorted = bool(info & 0x20)
        local = self.read_palette(source, (info & 0x07) + 1) if info & 0x80 else None
        picture.palette = local if local is not None else self.screen.palette

        self.read_image_data(source, picture)

        log.debug(
            "Image block decoded",
            slot=picture.slot.name,
            rect=f"{rect.left},{rect.top} {rect.width}x{rect.height}",
            interlaced=picture.interlaced,
            local_palette=local is not None,
            delay_ms=picture.delay_ms,
        )

    def read_image_data(self, source: ByteSource, picture: Picture) -> None:
        """Decode the LZW data of one image into picture's rectangle."""
        rect = picture.rect
        transparent = picture.transparent_index
        self.codes.start(source)

        rows = list(interlaced_rows(rect.height, picture.interlaced))
        last_row = len(rows) - 1
        for n, row in enumerate(rows):
            line = self.expander.decode_scanline(rect.width, last=(n == last_row))
            picture.write_row(rect.top + row, rect.left, line, transparent)

        self.codes.finish()

    def iter_images(self, data: bytes) -> Iterator[Picture]:
        """
        Parse the stream, yielding the standby picture after each image.

        Ends on the trailer or on any unknown introducer (treated as the end
        of decodable content). Decode errors propagate.
        """
        source = ByteSource(data)
        self.block_count = 0
        self.read_header(source)
        self.read_screen(source)

        while True:
            intro = source.next_byte()
            picture = self.frames.standby

            if intro == BlockIntroducer.IMAGE:
                self.block_count += 1
                self.read_image(source, picture)
                yield picture
            elif intro == BlockIntroducer.EXTENSION:
                self.block_count += 1
                self.read_extension(source, picture)
            elif intro == BlockIntroducer.TRAILER:
                break
            else:
                log.warn("Unknown block introducer, stopping", intro=f"0x{intro:02X}", offset=source.position - 1)
                break

        log.debug("GIF stream finished", blocks=self.block_count, bytes=source.position)
