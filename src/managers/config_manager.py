"""
Config Manager

Loads config.yaml (falling back to factory_defaults.yaml) and turns it into
typed AppConfig dataclasses.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from models.config import AppConfig, CatalogEntryConfig, DisplayConfig, LoggingConfig, StripConfig
from models.enums import LogCategory, LogLevel
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).parent.parent


class ConfigManager:
    """
    Main configuration manager

    Example:
        config = ConfigManager().load()
        config.display.width           # 151
        for entry in config.catalog:   # CatalogEntryConfig
            ...
    """

    def __init__(
        self,
        config_path: Union[str, Path] = "config/config.yaml",
        defaults_path: Union[str, Path] = "config/factory_defaults.yaml",
    ):
        """
        Args:
            config_path: Path to main config.yaml (relative paths resolve against src/)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = self._resolve(Path(config_path))
        self.factory_defaults_path = self._resolve(Path(defaults_path))
        self.source_path: Optional[Path] = None
        self.data: Dict[str, Any] = {}
        self.config: Optional[AppConfig] = None

    @staticmethod
    def _resolve(path: Path) -> Path:
        return path if path.is_absolute() else SRC_DIR / path

    def load(self) -> AppConfig:
        """
        Load YAML configuration

        Process:
        1. Load main config.yaml
        2. Parse sections into dataclasses
        3. Fallback to factory_defaults.yaml if reading or parsing fails

        Raises:
            OSError / yaml.YAMLError if the factory defaults cannot be read either
        """
        try:
            self.data = self._read_yaml(self.config_path)
            self.config = self._parse(self.data, self.config_path.parent)
            self.source_path = self.config_path
            log.info("Loaded configuration", path=str(self.config_path))

        except (OSError, yaml.YAMLError, ValueError, KeyError, TypeError) as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            self.data = self._read_yaml(self.factory_defaults_path)
            self.source_path = self.factory_defaults_path
            self.config = self._parse(self.data, self.source_path.parent)

        log.info(
            "Configuration ready",
            display=f"{self.config.display.width}x{self.config.display.height}",
            tick_ms=self.config.display.tick_period_ms,
            pictures=len(self.config.catalog),
        )
        return self.config

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{path.name}: top level must be a mapping")
        return data

    def _parse(self, data: Dict[str, Any], base_dir: Path) -> AppConfig:
        logging_data = data.get("logging") or {}
        return AppConfig(
            display=DisplayConfig.from_dict(data.get("display") or {}),
            strip=StripConfig.from_dict(data.get("strip") or {}),
            catalog=self._parse_catalog(data.get("catalog") or [], base_dir),
            logging=LoggingConfig(
                level=LogLevel[str(logging_data.get("level", "INFO")).upper()],
                use_colors=bool(logging_data.get("use_colors", True)),
            ),
        )

    def _parse_catalog(self, items: List[Dict[str, Any]], base_dir: Path) -> List[CatalogEntryConfig]:
        entries = []
        for item in items:
            path = Path(item["path"])
            if not path.is_absolute():
                path = base_dir / path
            entries.append(CatalogEntryConfig(
                name=str(item.get("name", path.stem)),
                path=path,
                rotation_increment=int(item.get("rotation_increment", 0)),
                rotation_interval=int(item.get("rotation_interval", 10)),
            ))
        return entries
