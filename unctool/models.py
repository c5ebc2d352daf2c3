from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PathType(str, Enum):
    """Destination UNC convention for a converted path."""

    WINDOWS = "windows"  # \\server\share\path
    LINUX = "linux"  # smb://server/share/path

    @classmethod
    def parse(cls, value: str) -> "PathType":
        """Parse a path type name, ignoring case."""
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError("Path type must be 'windows' or 'linux'") from None


class MountEntry(BaseModel):
    """
    One active network share mount read from the system mount table.

    Built fresh for every resolution and thrown away afterwards. Both paths
    are stored decoded and compared as plain string prefixes.
    """

    model_config = ConfigDict(frozen=True)

    local_path: str = Field(
        ..., min_length=1, description="Mountpoint in the local filesystem, e.g. /mnt/mynas"
    )
    remote_path: str = Field(
        ..., min_length=1, description="Share in intermediate form, e.g. //mynas"
    )
