"""
Tests for the application entry point.
"""

from unittest.mock import patch

import pytest

import main
from hardware.led.virtual_strip import VirtualStrip
from models.config import AppConfig, CatalogEntryConfig, DisplayConfig

from gif_builder import MINIMUM_GIF


def app_config(path):
    return AppConfig(
        display=DisplayConfig(tick_period_ms=5, simulate_ticks=True),
        catalog=[CatalogEntryConfig("dot", path, rotation_increment=1, rotation_interval=1)],
    )


class TestRun:
    """One pass over the catalog."""

    @pytest.mark.asyncio
    async def test_once_shows_catalog(self, tmp_path):
        path = tmp_path / "dot.gif"
        path.write_bytes(MINIMUM_GIF)
        strip = VirtualStrip(40)

        with patch.object(main, "create_strip", return_value=strip):
            code = await main.run(app_config(path), once=True)

        assert code == 0

    @pytest.mark.asyncio
    async def test_halt_returns_error_code(self, tmp_path, capsys):
        path = tmp_path / "bad.gif"
        path.write_bytes(b"not a gif")

        with patch.object(main, "create_strip", return_value=VirtualStrip(40)):
            code = await main.run(app_config(path), once=True)

        assert code == 2
        assert "SYSTEM HALTED!" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_empty_catalog(self, tmp_path):
        config = AppConfig(catalog=[CatalogEntryConfig("gone", tmp_path / "gone.gif")])
        assert await main.run(config, once=True) == 1


class TestArgs:
    def test_defaults(self):
        args = main.parse_args([])
        assert args.config == "config/config.yaml"
        assert args.once is False

    def test_flags(self):
        args = main.parse_args(["--once", "--config", "/tmp/x.yaml"])
        assert args.once is True
        assert args.config == "/tmp/x.yaml"
