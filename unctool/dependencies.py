from functools import lru_cache
from typing import Any, Dict

from .config import Settings
from .services.mount_table import MountTableReader
from .services.paths import PathResolver

# Global singleton instances
_singletons: Dict[str, Any] = {}


@lru_cache
def get_settings() -> Settings:
    """Get Settings singleton instance."""
    return Settings()


def get_mount_table_reader() -> MountTableReader:
    if "mount_table_reader" not in _singletons:
        settings = get_settings()
        _singletons["mount_table_reader"] = MountTableReader(
            mounts_file=settings.mounts_file,
            fs_type=settings.mount_fs_type,
        )
    return _singletons["mount_table_reader"]


def get_path_resolver() -> PathResolver:
    if "path_resolver" not in _singletons:
        _singletons["path_resolver"] = PathResolver(
            mount_source=get_mount_table_reader(),
            require_segment_boundary=get_settings().require_segment_boundary,
        )
    return _singletons["path_resolver"]


def reset_singletons() -> None:
    """Drop all singletons and cached settings (used by tests)."""
    _singletons.clear()
    get_settings.cache_clear()
