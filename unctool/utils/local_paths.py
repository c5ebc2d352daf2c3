"""
Local path preparation for local -> UNC conversion.

The resolver only does string prefix matching, so local paths are expanded
and canonicalized here first.
"""

import logging
import os
from pathlib import Path
from typing import Optional


def expand_local_path(path: str) -> str:
    """Expand ~ and environment variables in path."""
    return os.path.expandvars(os.path.expanduser(path))


def local_path_exists(path: str) -> bool:
    return Path(expand_local_path(path)).exists()


def absolute_local_path(path: str) -> Optional[str]:
    """
    Resolve path to an absolute path with symlinks and relative segments removed.

    Returns:
        Optional[str]: Canonical path, or None if it cannot be resolved
    """
    try:
        return str(Path(expand_local_path(path)).resolve(strict=True))
    except (OSError, RuntimeError) as e:
        logging.debug(f"Could not resolve absolute path for {path}: {e}")
        return None
