"""
Tests for PovRenderer: column output per rotation and scrolling.
"""

from unittest.mock import MagicMock

import pytest

from engine.pov_renderer import PovRenderer
from hardware.led.virtual_strip import VirtualStrip
from models.color import Color

from gif_builder import GifBuilder

RGB = [0x000000, 0xFF0000, 0x00FF00, 0x0000FF]


@pytest.fixture
def strip():
    strip = MagicMock()
    strip.led_count = 40
    return strip


def mark_columns(session):
    """Give every active column a distinct first pixel."""
    active = session.frames.active
    for x in range(session.display.width):
        active.set_pixel(x, 0, x % 4)


class TestColumns:
    """Palette lookup per column."""

    @pytest.mark.asyncio
    async def test_column_colors_use_active_palette(self, session, strip):
        data = GifBuilder(2, 2, palette=RGB).image([[1, 2], [3, 0]]).build()
        await session.show_gif(data)
        renderer = PovRenderer(session, strip)

        column = renderer.column_colors(0)

        assert len(column) == 40
        assert column[0] == Color.from_int(0xFF0000)
        assert column[1] == Color.from_int(0x0000FF)

    def test_brightness_scaling(self, session, strip):
        session.frames.active.set_pixel(0, 0, 7)
        renderer = PovRenderer(session, strip, brightness=128)
        assert renderer.column_colors(0)[0] == Color(128, 128, 128)


class TestRotation:
    """One rotation pushes every column once."""

    def test_every_column_pushed(self, session):
        strip = VirtualStrip(40)
        renderer = PovRenderer(session, strip)
        renderer.render_rotation()
        assert strip.frames_shown == session.display.width
        assert renderer.rotations == 1

    def test_no_scroll_by_default(self, session, strip):
        mark_columns(session)
        renderer = PovRenderer(session, strip)
        renderer.render_rotation()
        renderer.render_rotation()
        assert renderer.rotation_offset == 0
        first = strip.apply_frame.call_args_list[0].args[0]
        assert first == renderer.column_colors(0)

    def test_scroll_advances_every_interval(self, session, strip):
        mark_columns(session)
        renderer = PovRenderer(session, strip)
        renderer.set_scroll(increment=3, interval=2)

        renderer.render_rotation()
        assert renderer.rotation_offset == 0
        renderer.render_rotation()
        assert renderer.rotation_offset == 3

        strip.apply_frame.reset_mock()
        renderer.render_rotation()
        first = strip.apply_frame.call_args_list[0].args[0]
        assert first == renderer.column_colors(3)

    def test_scroll_wraps(self, session, strip):
        renderer = PovRenderer(session, strip)
        renderer.set_scroll(increment=100, interval=1)
        renderer.render_rotation()
        renderer.render_rotation()
        assert renderer.rotation_offset == 200 % session.display.width

    def test_set_scroll_resets_offset(self, session, strip):
        renderer = PovRenderer(session, strip)
        renderer.set_scroll(5, 1)
        renderer.render_rotation()
        renderer.set_scroll(1, 1)
        assert renderer.rotation_offset == 0
