"""
Tests for MountTableReader and mount table parsing.
"""

import pytest

from unctool.core.exceptions import ErrorKind, ReadMountTableFailedError
from unctool.models import MountEntry
from unctool.services.mount_table import (
    MountTableReader,
    decode_octal_symbols,
    parse_mount_table,
)


class TestDecodeOctalSymbols:
    """Test decode_octal_symbols function."""

    def test_space(self):
        assert decode_octal_symbols(r"/mnt/my\040nas") == "/mnt/my nas"

    def test_tab_and_newline(self):
        assert decode_octal_symbols(r"/mnt/a\011b\012c") == "/mnt/a\tb\nc"

    def test_backslash(self):
        assert decode_octal_symbols(r"//srv\\share") == r"//srv\share"

    def test_backslash_decoded_last(self):
        """An escaped backslash before 040 must not be turned into a second space escape."""
        assert decode_octal_symbols(r"a\\040b") == "a\\ b"

    def test_plain_field_unchanged(self):
        assert decode_octal_symbols("/mnt/mynas") == "/mnt/mynas"


class TestParseMountTable:
    """Test parse_mount_table function."""

    def test_only_cifs_lines_kept_in_order(self):
        content = (
            "//nas1/share /mnt/nas1 cifs rw 0 0\n"
            "/dev/sda1 / ext4 rw 0 0\n"
            "server:/export /mnt/nfs nfs4 rw 0 0\n"
            "//nas2/share /mnt/nas2 cifs rw 0 0\n"
        )

        entries = parse_mount_table(content)

        assert entries == [
            MountEntry(local_path="/mnt/nas1", remote_path="//nas1/share"),
            MountEntry(local_path="/mnt/nas2", remote_path="//nas2/share"),
        ]

    def test_short_and_empty_lines_skipped(self):
        content = "\n//nas /mnt/nas\ncifs\n//nas /mnt/nas cifs\n"

        entries = parse_mount_table(content)

        assert entries == [MountEntry(local_path="/mnt/nas", remote_path="//nas")]

    def test_fields_are_decoded(self):
        content = r"//srv/my\040share /mnt/my\040share cifs rw 0 0"

        entries = parse_mount_table(content)

        assert entries[0].local_path == "/mnt/my share"
        assert entries[0].remote_path == "//srv/my share"

    def test_fs_type_must_match_exactly(self):
        content = "//nas /mnt/nas smb3 rw 0 0\n//nas2 /mnt/nas2 CIFS rw 0 0\n"

        assert parse_mount_table(content) == []
        assert len(parse_mount_table(content, fs_type="smb3")) == 1

    def test_empty_table(self):
        assert parse_mount_table("") == []

    @pytest.mark.parametrize("char", ["\u00a0", "\x0c", "\u2028", "\u0085", "\x0b"])
    def test_unescaped_unicode_whitespace_kept_in_field(self, char):
        """Only single spaces and newlines separate fields and lines."""
        content = f"//nas/a{char}b /mnt/my{char}nas cifs rw 0 0\n"

        entries = parse_mount_table(content)

        assert entries == [
            MountEntry(local_path=f"/mnt/my{char}nas", remote_path=f"//nas/a{char}b")
        ]

    def test_empty_source_field_skipped(self):
        content = " /mnt/nas cifs rw 0 0\n//nas2 /mnt/nas2 cifs rw 0 0\n"

        entries = parse_mount_table(content)

        assert entries == [MountEntry(local_path="/mnt/nas2", remote_path="//nas2")]


class TestMountTableReader:
    """Test reading the mount table from a file."""

    def test_read_entries(self, mounts_file):
        reader = MountTableReader(mounts_file=str(mounts_file))

        entries = reader.read_entries()

        assert entries == [MountEntry(local_path="/mnt/mynas", remote_path="//mynas")]

    def test_reads_file_on_every_call(self, mounts_file):
        reader = MountTableReader(mounts_file=str(mounts_file))
        assert len(reader.read_entries()) == 1

        with open(mounts_file, "a", encoding="utf-8") as f:
            f.write("//other /mnt/other cifs rw 0 0\n")

        assert len(reader.read_entries()) == 2

    def test_missing_file(self, tmp_path):
        reader = MountTableReader(mounts_file=str(tmp_path / "no-such-file"))

        with pytest.raises(ReadMountTableFailedError) as exc_info:
            reader.read_entries()

        assert exc_info.value.kind == ErrorKind.READ_MOUNT_TABLE_FAILED
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_directory_instead_of_file(self, tmp_path):
        reader = MountTableReader(mounts_file=str(tmp_path))

        with pytest.raises(ReadMountTableFailedError):
            reader.read_entries()

    def test_raw_control_characters_read_unchanged(self, tmp_path):
        table = tmp_path / "mounts"
        table.write_bytes("//nas/a\rb /mnt/a\u2028b cifs rw 0 0\n".encode("utf-8"))

        reader = MountTableReader(mounts_file=str(table))

        assert reader.read_entries() == [
            MountEntry(local_path="/mnt/a\u2028b", remote_path="//nas/a\rb")
        ]

    def test_custom_fs_type(self, tmp_path):
        table = tmp_path / "mounts"
        table.write_text("//nas /mnt/nas smb3 rw 0 0\n", encoding="utf-8")

        reader = MountTableReader(mounts_file=str(table), fs_type="smb3")

        assert reader.read_entries()[0].local_path == "/mnt/nas"
