import pytest
from virtfs import VirtualFileSystem


@pytest.fixture
def vfs() -> VirtualFileSystem:
    """Default vfs fixture, an empty tree rooted at "C:"."""
    return VirtualFileSystem("C:")
