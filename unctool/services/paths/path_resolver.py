"""
Path Resolver - maps UNC paths to local mountpoints and back.

Matching is a plain string prefix test against the mount entries, first
entry in table order wins.
"""

import logging
from typing import Callable, List, Optional, Protocol

from ...core.exceptions import LocalPathNotFoundError, RemotePathNotFoundError
from ...models import MountEntry, PathType
from .path_normalizer import (
    OS_SEP_LINUX,
    intermediate_path_to_remote,
    remote_path_to_intermediate,
)


class MountEntrySource(Protocol):
    def read_entries(self) -> List[MountEntry]:
        ...


def has_path_prefix(path: str, prefix: str, require_segment_boundary: bool = False) -> bool:
    """
    Check whether prefix is a prefix of path.

    With require_segment_boundary the match must end at a separator or at the
    end of path, so "//mynas" matches "//mynas/share" but not "//mynasX".
    """
    if not path.startswith(prefix):
        return False
    if not require_segment_boundary:
        return True
    if len(path) == len(prefix) or prefix.endswith(OS_SEP_LINUX):
        return True
    return path[len(prefix)] == OS_SEP_LINUX


def find_mount_entry(
    path: str,
    entries: List[MountEntry],
    key: Callable[[MountEntry], str],
    require_segment_boundary: bool = False,
) -> Optional[MountEntry]:
    """Return the first entry whose key(entry) prefixes path."""
    for entry in entries:
        if has_path_prefix(path, key(entry), require_segment_boundary):
            return entry
    return None


class PathResolver:
    """Translates between local mounted paths and UNC paths using the live mount table."""

    def __init__(self, mount_source: MountEntrySource, require_segment_boundary: bool = False):
        self._mount_source = mount_source
        self.require_segment_boundary = require_segment_boundary

    def local_path(self, path: str) -> str:
        """
        Convert a Windows/Linux UNC path to a local mounted filesystem path.

        Raises:
            InvalidPathFormatError: path is in neither UNC format
            LocalPathNotFoundError: no mounted share covers the path
            ReadMountTableFailedError: mount table could not be read
        """
        im_path = remote_path_to_intermediate(path)
        entries = self._mount_source.read_entries()

        entry = find_mount_entry(
            im_path, entries, lambda e: e.remote_path, self.require_segment_boundary
        )
        if entry is None:
            logging.debug(f"No mount entry covers remote path {im_path}")
            raise LocalPathNotFoundError()

        logging.debug(f"Matched {im_path} to mount {entry.remote_path} -> {entry.local_path}")
        return im_path.replace(entry.remote_path, entry.local_path, 1)

    def remote_path(self, path: str, path_type: PathType) -> str:
        """
        Convert a local mounted filesystem path to a Windows/Linux UNC path.

        The path must already be absolute and canonical.

        Raises:
            RemotePathNotFoundError: path is not below any share mountpoint
            ReadMountTableFailedError: mount table could not be read
        """
        entries = self._mount_source.read_entries()

        entry = find_mount_entry(
            path, entries, lambda e: e.local_path, self.require_segment_boundary
        )
        if entry is None:
            logging.debug(f"No mount entry covers local path {path}")
            raise RemotePathNotFoundError()

        logging.debug(f"Matched {path} to mount {entry.local_path} -> {entry.remote_path}")
        im_path = path.replace(entry.local_path, entry.remote_path, 1)
        return intermediate_path_to_remote(im_path, path_type)
