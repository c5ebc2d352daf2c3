"""User-facing messages for conversion failures."""

from .core.exceptions import ErrorKind

_ERROR_MESSAGES = {
    ErrorKind.INVALID_PATH_FORMAT: r"Provided path is not in \\windows-share\ or smb://linux-share/ format",
    ErrorKind.LOCAL_PATH_NOT_FOUND: "Local mountpoint is not found for this share path",
    ErrorKind.REMOTE_PATH_NOT_FOUND: "Remote share is not found for this path",
    ErrorKind.READ_MOUNT_TABLE_FAILED: "Failed to read the system mount table",
}


def describe_error(kind: ErrorKind) -> str:
    """Return the user-facing message for an error kind."""
    return _ERROR_MESSAGES[kind]
