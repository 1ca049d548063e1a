"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["virtfs._pytest_plugin"]

This makes the ``vfs`` fixture automatically available::

    def test_something(vfs):
        vfs.add_file("scripts/main.csx", ["print 1"])
        assert vfs.read_file_lines("C:\\\\scripts\\\\main.csx") == ["print 1"]
"""

import pytest

from ._fs import VirtualFileSystem


@pytest.fixture
def vfs() -> VirtualFileSystem:
    """An empty :class:`VirtualFileSystem` rooted at ``C:``.

    Provides an independent instance per test (function scope).
    """
    return VirtualFileSystem("C:")
