"""
Path Normalizer - converts between Windows UNC and smb:// paths.

Every conversion goes through the intermediate form: forward slashes,
``//`` prefix, no scheme (``//mynas/some/path``).
"""

from ...core.exceptions import InvalidPathFormatError
from ...models import PathType

OS_SEP_WINDOWS = "\\"
OS_SEP_LINUX = "/"

UNC_PREFIX_WINDOWS = "\\\\"
UNC_PREFIX_LINUX = "smb://"

# "smb:" - the scheme part of the Linux prefix, without the two slashes
_SMB_SCHEME = UNC_PREFIX_LINUX[:-2]


def remote_path_to_intermediate(path: str) -> str:
    """Normalize a Windows or Linux UNC path. Raises InvalidPathFormatError."""
    if path.startswith(UNC_PREFIX_WINDOWS):
        return path.replace(OS_SEP_WINDOWS, OS_SEP_LINUX)
    elif path.startswith(UNC_PREFIX_LINUX):
        return path[len(_SMB_SCHEME):]
    else:
        raise InvalidPathFormatError()


def intermediate_path_to_remote(path: str, path_type: PathType) -> str:
    """Serialize an intermediate path in the requested UNC convention."""
    if path_type == PathType.WINDOWS:
        return path.replace(OS_SEP_LINUX, OS_SEP_WINDOWS)
    return _SMB_SCHEME + path


def convert_unc(path: str, path_type: PathType) -> str:
    """
    Convert between Windows UNC and Linux UNC paths.

    Example:
        convert_unc(r"\\\\mynas\\some\\path", PathType.LINUX) -> "smb://mynas/some/path"

    Raises:
        InvalidPathFormatError: path is in neither UNC format
    """
    return intermediate_path_to_remote(remote_path_to_intermediate(path), path_type)
