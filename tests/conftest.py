"""
Shared pytest configuration and fixtures for the onomasia test suite.
"""

import datetime
import os
import sys

# Add project root to sys.path so the flat modules can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from console_ui import ConsoleUI


@pytest.fixture
def ui():
    """Plain, uncolored console writing to (captured) stdout"""
    return ConsoleUI(force_terminal=False, no_color=True)


@pytest.fixture
def utc():
    return datetime.timezone.utc


@pytest.fixture
def make_files(tmp_path):
    """Create empty files in tmp_path and return their paths"""

    def _make(*names):
        paths = []
        for name in names:
            path = tmp_path / name
            path.write_bytes(b"")
            paths.append(path)
        return paths

    return _make
