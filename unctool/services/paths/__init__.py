"""
Path conversion module.

Components:
- path_normalizer: UNC <-> intermediate form, pure string conversion
- PathResolver: UNC <-> local mountpoint via the mount table
"""

from .path_normalizer import (
    convert_unc,
    intermediate_path_to_remote,
    remote_path_to_intermediate,
)
from .path_resolver import PathResolver, find_mount_entry, has_path_prefix

__all__ = [
    "convert_unc",
    "intermediate_path_to_remote",
    "remote_path_to_intermediate",
    "PathResolver",
    "find_mount_entry",
    "has_path_prefix",
]
