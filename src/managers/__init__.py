from managers.config_manager import ConfigManager
from managers.picture_catalog import CatalogEntry, PictureCatalog

__all__ = [
    "ConfigManager",
    "CatalogEntry",
    "PictureCatalog",
]
