"""Test utilities for the labrender test suite.

This module provides temporary-directory helpers and sink doubles for
exercising write failures.
"""

import shutil
import tempfile
from pathlib import Path


def create_test_temp_dir() -> Path:
    """Create a temporary directory for a test."""
    return Path(tempfile.mkdtemp(prefix="labrender_test_"))


def cleanup_test_dir(path: Path) -> None:
    """Remove a temporary test directory and its contents."""
    shutil.rmtree(path, ignore_errors=True)


class FailingSink:
    """Text sink that accepts a fixed number of writes, then raises.

    Parameters
    ----------
    fail_after : int
        Number of successful writes before every write raises ``OSError``

    Attributes
    ----------
    writes : list of str
        Text of the successful writes
    attempts : int
        Number of write calls, failed ones included

    """

    name = "failing-sink"

    def __init__(self, fail_after: int = 0):
        self.fail_after = fail_after
        self.writes: list[str] = []
        self.attempts = 0

    def write(self, text: str) -> int:
        self.attempts += 1
        if len(self.writes) >= self.fail_after:
            raise OSError("disk full")
        self.writes.append(text)
        return len(text)

    def getvalue(self) -> str:
        return "".join(self.writes)


class RecordingSink:
    """Text sink that records each write separately."""

    def __init__(self):
        self.writes: list[str] = []

    def write(self, text: str) -> int:
        self.writes.append(text)
        return len(text)

    def getvalue(self) -> str:
        return "".join(self.writes)
