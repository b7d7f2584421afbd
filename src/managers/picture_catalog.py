"""
Picture Catalog

Loads the configured GIF files into memory, in display order.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

from models.config import CatalogEntryConfig
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CATALOG)


@dataclass(frozen=True)
class CatalogEntry:
    """A GIF held in memory plus its scroll parameters"""
    name: str
    data: bytes
    rotation_increment: int = 0
    rotation_interval: int = 10

    @property
    def length(self) -> int:
        return len(self.data)


class PictureCatalog:
    """
    Ordered collection of in-memory pictures.

    Example:
        catalog = PictureCatalog.load(config.catalog)
        for entry in catalog:
            renderer.set_scroll(entry.rotation_increment, entry.rotation_interval)
            await session.show_gif(entry.data)
    """

    def __init__(self, entries: List[CatalogEntry]):
        self.entries = list(entries)

    @classmethod
    def load(cls, configs: List[CatalogEntryConfig]) -> 'PictureCatalog':
        """Read every configured file; missing or unreadable files are skipped with an error."""
        entries = []
        for cfg in configs:
            try:
                data = Path(cfg.path).read_bytes()
            except OSError as ex:
                log.error(f"Cannot read picture '{cfg.name}'", path=str(cfg.path), error=str(ex))
                continue

            entries.append(CatalogEntry(
                name=cfg.name,
                data=data,
                rotation_increment=cfg.rotation_increment,
                rotation_interval=cfg.rotation_interval,
            ))
            log.debug(f"Loaded picture '{cfg.name}'", bytes=len(data))

        log.info("Picture catalog loaded", pictures=len(entries), configured=len(configs))
        return cls(entries)

    def get(self, name: str) -> CatalogEntry:
        for entry in self.entries:
            if entry.name == name:
                return entry
        raise KeyError(name)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
