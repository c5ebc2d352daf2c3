# unctool/core/exceptions.py
from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failures a conversion can end with."""

    INVALID_PATH_FORMAT = "InvalidPathFormat"
    LOCAL_PATH_NOT_FOUND = "LocalPathNotFound"
    REMOTE_PATH_NOT_FOUND = "RemotePathNotFound"
    READ_MOUNT_TABLE_FAILED = "ReadMountTableFailed"


class UncToolError(Exception):
    """Base exception for conversion failures. Carries its kind and nothing else."""

    kind: ErrorKind

    def __init__(self):
        super().__init__(self.kind.value)


class InvalidPathFormatError(UncToolError):
    """Raised when a path is neither in \\\\server\\ nor smb://server/ form."""

    kind = ErrorKind.INVALID_PATH_FORMAT


class LocalPathNotFoundError(UncToolError):
    """Raised when no mounted share covers the given remote path."""

    kind = ErrorKind.LOCAL_PATH_NOT_FOUND


class RemotePathNotFoundError(UncToolError):
    """Raised when the given local path is not below any share mountpoint."""

    kind = ErrorKind.REMOTE_PATH_NOT_FOUND


class ReadMountTableFailedError(UncToolError):
    """Raised when the system mount table cannot be read."""

    kind = ErrorKind.READ_MOUNT_TABLE_FAILED
