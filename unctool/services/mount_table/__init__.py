"""
Mount Table Module

Components:
- MountTableReader: reads the live system mount table
- parse_mount_table: pure parser for mount table text
- decode_octal_symbols: field unescaping
"""

from .mount_table_reader import (
    MountTableReader,
    parse_mount_table,
    decode_octal_symbols,
)

__all__ = ["MountTableReader", "parse_mount_table", "decode_octal_symbols"]
