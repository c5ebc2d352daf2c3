"""
Pytest configuration and shared fixtures.
"""

import logging

import pytest

from unctool.dependencies import reset_singletons
from unctool.models import MountEntry


@pytest.fixture(autouse=True)
def clean_singletons():
    """Automatically reset singletons before each test."""
    reset_singletons()
    yield
    reset_singletons()


class FakeMountSource:
    """In-memory mount table that counts how often it is read."""

    def __init__(self, entries):
        self.entries = list(entries)
        self.read_count = 0

    def read_entries(self):
        self.read_count += 1
        return list(self.entries)


@pytest.fixture
def make_mount_source():
    """Factory for in-memory mount tables."""
    return FakeMountSource


@pytest.fixture
def mynas_entries():
    """Five mounts where the 3rd one (/mnt/mynas <-> //mynas) is used in tests."""
    entries = [
        MountEntry(local_path=f"/mnt/mynas{i}", remote_path=f"//mynas{i}")
        for i in range(2)
    ]
    entries.append(MountEntry(local_path="/mnt/mynas", remote_path="//mynas"))
    entries.extend(
        MountEntry(local_path=f"/mnt/mynas{i}", remote_path=f"//mynas{i}")
        for i in range(3, 5)
    )
    return entries


@pytest.fixture
def fake_mount_source(mynas_entries):
    return FakeMountSource(mynas_entries)


@pytest.fixture
def mounts_file(tmp_path):
    """Mount table file in /proc/mounts format with one CIFS share."""
    path = tmp_path / "mounts"
    path.write_text(
        "sysfs /sys sysfs rw,nosuid,nodev,noexec,relatime 0 0\n"
        "/dev/sda1 / ext4 rw,relatime 0 0\n"
        "//mynas /mnt/mynas cifs rw,relatime,vers=3.0,cache=strict 0 0\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
