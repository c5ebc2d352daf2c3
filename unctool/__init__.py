"""
unctool - convert between Linux and Windows UNC paths.

Converts a locally mounted CIFS path to a Windows/Linux UNC path and back,
and converts between the two UNC conventions.
"""

from .core.exceptions import (
    ErrorKind,
    InvalidPathFormatError,
    LocalPathNotFoundError,
    ReadMountTableFailedError,
    RemotePathNotFoundError,
    UncToolError,
)
from .dependencies import get_path_resolver
from .models import MountEntry, PathType
from .services.paths import convert_unc


def local_path(path: str) -> str:
    """Convert a Windows/Linux UNC path to the local mounted filesystem path."""
    return get_path_resolver().local_path(path)


def remote_path(path: str, path_type: PathType) -> str:
    """Convert a local mounted filesystem path to a Windows/Linux UNC path."""
    return get_path_resolver().remote_path(path, path_type)


__all__ = [
    "convert_unc",
    "local_path",
    "remote_path",
    "PathType",
    "MountEntry",
    "ErrorKind",
    "UncToolError",
    "InvalidPathFormatError",
    "LocalPathNotFoundError",
    "RemotePathNotFoundError",
    "ReadMountTableFailedError",
]
