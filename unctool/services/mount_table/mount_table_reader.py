"""
Mount Table Reader - parses active network share mounts.

Reads the system mount table (``/proc/mounts`` format: one mount per line,
space separated fields ``source mountpoint fstype options ...``) and returns
the CIFS entries in the order they appear.
"""

import logging
from pathlib import Path
from typing import List

from ...core.exceptions import ReadMountTableFailedError
from ...models import MountEntry

CIFS = "cifs"
MOUNTS_FILE = "/proc/mounts"

# The kernel escapes these characters in mount table fields.
# Backslash must come last, otherwise "\\040" would decode twice.
_OCTAL_ESCAPES = (
    ("\\040", " "),
    ("\\011", "\t"),
    ("\\012", "\n"),
    ("\\\\", "\\"),
)


def decode_octal_symbols(encoded: str) -> str:
    """Decode the escape sequences used in mount table fields."""
    decoded = encoded
    for sequence, char in _OCTAL_ESCAPES:
        decoded = decoded.replace(sequence, char)
    return decoded


def parse_mount_table(content: str, fs_type: str = CIFS) -> List[MountEntry]:
    """
    Extract mount entries of the given filesystem type.

    One mount per line, fields separated by single spaces. Lines with fewer
    than 3 fields, an empty source or mountpoint, or another filesystem type
    are skipped.

    Args:
        content: Raw mount table text
        fs_type: Filesystem type token to keep (3rd field)

    Returns:
        List[MountEntry]: Entries in table order
    """
    entries = []
    for line in content.split("\n"):
        fields = line.split(" ")
        if len(fields) < 3 or fields[2] != fs_type:
            continue
        if not fields[0] or not fields[1]:
            continue

        entries.append(
            MountEntry(
                local_path=decode_octal_symbols(fields[1]),
                remote_path=decode_octal_symbols(fields[0]),
            )
        )

    return entries


class MountTableReader:
    """Reads network share entries from the mount table on every call. No caching."""

    def __init__(self, mounts_file: str = MOUNTS_FILE, fs_type: str = CIFS):
        self.mounts_file = Path(mounts_file)
        self.fs_type = fs_type

    def read_entries(self) -> List[MountEntry]:
        """Read and parse the mount table. Raises ReadMountTableFailedError."""
        content = self._read_mount_table()
        entries = parse_mount_table(content, self.fs_type)
        logging.debug(
            f"Found {len(entries)} {self.fs_type} mount(s) in {self.mounts_file}"
        )
        return entries

    def _read_mount_table(self) -> str:
        try:
            # newline="" keeps a raw \r inside a field intact
            with open(self.mounts_file, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logging.error(f"Failed to read mount table {self.mounts_file}: {e}")
            raise ReadMountTableFailedError() from e
