from ._exceptions import (
    VFSDuplicateEntryError,
    VFSError,
    VFSInvalidPathError,
    VFSIsADirectoryError,
    VFSNotADirectoryError,
    VFSNotFoundError,
    VFSWrongKindError,
)
from ._fs import VirtualFileSystem
from ._path import split_segments
from ._typing import VFSStatResult, VFSStats

__all__ = [
    "VirtualFileSystem",
    "VFSError",
    "VFSNotFoundError",
    "VFSInvalidPathError",
    "VFSWrongKindError",
    "VFSIsADirectoryError",
    "VFSNotADirectoryError",
    "VFSDuplicateEntryError",
    "VFSStats",
    "VFSStatResult",
    "split_segments",
]
__version__ = "0.1.0"
