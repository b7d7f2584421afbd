"""
Tests for ContainerParser: header, screen descriptor, extensions and
image blocks decoded into the standby picture.
"""

import pytest

from decoder.byte_source import ByteSource
from decoder.container_parser import ContainerParser
from decoder.errors import (
    BadHeader,
    ImageDefect,
    PaletteDepthOutOfRange,
    ScreenSizeOutOfRange,
    TruncatedInput,
)
from models.enums import DisposalMethod
from models.palette import Palette

from gif_builder import MINIMUM_GIF, GifBuilder, le16, solid

RGB = [0x000000, 0xFF0000, 0x00FF00, 0x0000FF]


@pytest.fixture
def parser(frames):
    return ContainerParser(frames)


def first_image(parser, data):
    return next(parser.iter_images(data))


class TestHeaderAndScreen:
    """Signature, logical screen and global colour table."""

    def test_minimum_gif(self, parser):
        images = list(parser.iter_images(MINIMUM_GIF))

        assert len(images) == 1
        assert parser.version == b"89a"
        assert parser.screen.width == 1
        assert parser.screen.height == 1
        assert parser.screen.has_palette
        assert parser.screen.palette.colours == [0xFFFFFF, 0x000000]
        assert images[0].get_pixel(0, 0) == 0

    def test_bad_signature(self, parser):
        with pytest.raises(BadHeader, match="Wrong GIF header"):
            first_image(parser, b"PNG89a" + MINIMUM_GIF[6:])

    def test_short_header(self, parser):
        with pytest.raises(TruncatedInput):
            first_image(parser, b"GIF8")

    @pytest.mark.parametrize("width,height", [(152, 40), (151, 41)])
    def test_screen_larger_than_display(self, parser, width, height):
        data = GifBuilder(width, height, palette=RGB).build()
        with pytest.raises(ScreenSizeOutOfRange):
            first_image(parser, data)

    def test_full_size_screen_accepted(self, parser):
        data = GifBuilder(151, 40, palette=RGB).image(solid(151, 40, 2)).build()
        picture = first_image(parser, data)
        assert picture.get_pixel(150, 39) == 2

    def test_palette_depth_limit(self, parser):
        with pytest.raises(PaletteDepthOutOfRange):
            parser.read_palette(ByteSource(bytes(3 * 512)), 9)

    def test_no_global_palette_uses_default(self, parser):
        data = GifBuilder(2, 1).image([[1, 7]]).build()
        first_image(parser, data)
        assert not parser.screen.has_palette
        assert parser.screen.palette == Palette.default()

    def test_background_fills_standby(self, parser, frames):
        data = GifBuilder(4, 4, palette=RGB, background=3).image([[1]]).build()
        picture = first_image(parser, data)
        assert picture.get_pixel(0, 0) == 1
        assert picture.get_pixel(3, 3) == 3
        assert picture.get_pixel(150, 39) == 3


class TestExtensions:
    """Graphic control parsing; other extensions are skipped."""

    def test_graphic_control_fields(self, parser):
        data = (GifBuilder(2, 2, palette=RGB)
                .graphic_control(delay_cs=25, disposal=2, transparent=3, user_input=True)
                .image(solid(2, 2, 1))
                .build())
        picture = first_image(parser, data)

        assert picture.delay_ms == 250
        assert picture.disposal == DisposalMethod.RESTORE_TO_BACKGROUND
        assert picture.transparent_index == 3
        assert picture.control.user_input is True

    def test_transparent_flag_off_ignores_index(self, parser):
        data = (GifBuilder(2, 2, palette=RGB)
                .raw(b"\x21\xf9\x04\x04\x0a\x00\x02\x00")
                .image(solid(2, 2, 1))
                .build())
        picture = first_image(parser, data)
        assert picture.transparent_index is None
        assert picture.disposal == DisposalMethod.LEAVE_IN_PLACE
        assert picture.delay_ms == 100

    def test_reserved_disposal_kept_as_int(self, parser):
        data = GifBuilder(1, 1, palette=RGB).graphic_control(disposal=5).image([[1]]).build()
        picture = first_image(parser, data)
        assert picture.disposal == 5

    def test_other_extensions_skipped(self, parser):
        data = (GifBuilder(1, 1, palette=RGB)
                .extension(0xFE, b"a comment that spans " * 20)
                .extension(0xFF, b"NETSCAPE2.0\x03\x01\x00\x00")
                .image([[2]])
                .build())
        picture = first_image(parser, data)
        assert picture.get_pixel(0, 0) == 2
        assert picture.delay_ms == 0

    def test_transparent_pixels_keep_previous_value(self, parser, frames):
        data = (GifBuilder(3, 1, palette=RGB, background=0)
                .graphic_control(transparent=0)
                .image([[1, 0, 2]])
                .build())
        source = ByteSource(data)
        parser.read_header(source)
        parser.read_screen(source)
        frames.standby.fill(3)
        assert source.next_byte() == 0x21
        parser.read_extension(source, frames.standby)
        assert source.next_byte() == 0x2C
        parser.read_image(source, frames.standby)

        assert [frames.standby.get_pixel(x, 0) for x in range(3)] == [1, 3, 2]


class TestImages:
    """Image descriptor and pixel placement."""

    def test_rect_offset(self, parser):
        data = GifBuilder(10, 10, palette=RGB).image([[1, 2], [3, 1]], left=4, top=6).build()
        picture = first_image(parser, data)

        assert picture.rect.left == 4 and picture.rect.top == 6
        assert picture.get_pixel(4, 6) == 1
        assert picture.get_pixel(5, 6) == 2
        assert picture.get_pixel(4, 7) == 3
        assert picture.get_pixel(3, 6) == 0

    def test_rect_outside_display(self, parser):
        data = GifBuilder(10, 10, palette=RGB).image([[1, 1]], left=150).build()
        with pytest.raises(ScreenSizeOutOfRange):
            first_image(parser, data)

    def test_interlaced_matches_progressive(self, frames):
        rows = [[(x + y) % 4 for x in range(5)] for y in range(11)]
        progressive = ContainerParser(frames)
        expected = bytes(first_image(progressive, GifBuilder(5, 11, palette=RGB).image(rows).build()).pixels)

        frames.standby.fill(0)
        interlaced = ContainerParser(frames)
        picture = first_image(interlaced, GifBuilder(5, 11, palette=RGB).image(rows, interlaced=True).build())

        assert picture.interlaced
        assert bytes(picture.pixels) == expected

    def test_local_palette(self, parser):
        local = [0x111111, 0x222222]
        data = GifBuilder(2, 1, palette=RGB).image([[0, 1]], palette=local).build()
        picture = first_image(parser, data)
        assert picture.palette is not None
        assert picture.palette.colours == local

    def test_global_palette_bound_to_picture(self, parser):
        data = GifBuilder(1, 1, palette=RGB).image([[1]]).build()
        picture = first_image(parser, data)
        assert picture.palette is parser.screen.palette

    def test_multiple_images_yielded_in_order(self, parser):
        data = (GifBuilder(1, 1, palette=RGB)
                .image([[1]])
                .graphic_control(delay_cs=5)
                .image([[2]])
                .build())
        values = [p.get_pixel(0, 0) for p in parser.iter_images(data)]
        assert values == [1, 2]
        assert parser.block_count == 3

    def test_unknown_introducer_ends_stream(self, parser):
        data = (GifBuilder(1, 1, palette=RGB)
                .image([[1]])
                .raw(b"\x00garbage")
                .image([[2]])
                .build())
        assert len(list(parser.iter_images(data))) == 1

    def test_missing_trailer_is_truncation(self, parser):
        data = GifBuilder(1, 1, palette=RGB).image([[1]]).build(trailer=False)
        images = parser.iter_images(data)
        next(images)
        with pytest.raises(TruncatedInput):
            next(images)

    def test_invalid_min_code_size(self, parser):
        data = GifBuilder(1, 1, palette=RGB).raw_image(b"\x00", 12, 1, 1).build()
        with pytest.raises(ImageDefect):
            first_image(parser, data)

    def test_truncated_image_data(self, parser):
        gif = GifBuilder(8, 8, palette=RGB).image(solid(8, 8, 1))
        data = gif.build(trailer=False)
        # descriptor, code size, sub-block length and one data byte
        cut = len(gif.header()) + 10 + 1 + 1 + 1
        with pytest.raises(TruncatedInput):
            first_image(parser, data[:cut])

    def test_sorted_flag_recorded_before_data(self, parser):
        data = GifBuilder(3, 2, palette=RGB).raw(
            b"\x2c" + le16(0) + le16(0) + le16(3) + le16(2) + b"\x20\x02\x02\x4c\x01\x00"
        ).build()
        with pytest.raises(ImageDefect):
            first_image(parser, data)
        assert parser.frames.standby.sorted is True
