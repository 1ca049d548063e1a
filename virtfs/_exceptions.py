class VFSError(OSError):
    """Base class for virtfs errors. Subclass of OSError."""
    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class VFSNotFoundError(VFSError, FileNotFoundError):
    """Raised when a path segment does not exist. Subclass of FileNotFoundError."""
    def __init__(self, path: str, message: str | None = None) -> None:
        super().__init__(
            message if message is not None else f"No such file or directory: '{path}'",
            path,
        )


class VFSInvalidPathError(VFSNotFoundError, ValueError):
    """Raised when a path has no segments left or ascends above the root.

    Also a VFSNotFoundError, so lookups that only expect "not found"
    still catch it.
    """
    def __init__(self, path: str, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Invalid path '{path}': {reason}.")


class VFSWrongKindError(VFSError):
    """Raised when a file is found where a directory is expected, or vice versa."""


class VFSIsADirectoryError(VFSWrongKindError, IsADirectoryError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Is a directory: '{path}'", path)


class VFSNotADirectoryError(VFSWrongKindError, NotADirectoryError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Not a directory: '{path}'", path)


class VFSDuplicateEntryError(VFSError, FileExistsError):
    """Raised when inserting at a name already taken in its directory. Subclass of FileExistsError."""
    def __init__(self, path: str, name: str) -> None:
        self.name = name
        super().__init__(f"Entry '{name}' already exists: '{path}'", path)
