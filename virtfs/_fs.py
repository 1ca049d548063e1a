from __future__ import annotations

from collections.abc import Iterable, Mapping

from ._exceptions import VFSIsADirectoryError, VFSNotADirectoryError
from ._path import DEFAULT_ALTSEP, DEFAULT_SEP, split_segments, validate_separators
from ._tree import DirNode, FileNode, Node, NodeTree
from ._typing import VFSStatResult, VFSStats


class VirtualFileSystem:
    """In-memory directory tree of line-based files, for test fixtures.

    Paths that start with the root name (compared case-insensitively, like
    a drive letter) resolve from the root; all other paths resolve from the
    current directory. Entry names below the root are case-sensitive.

    Example
    -------
    >>> vfs = VirtualFileSystem("C:")
    >>> vfs.add_file("scripts/main.csx", ["print 1", "print 2"])
    >>> vfs.get_full_path("scripts/main.csx")
    'C:\\\\scripts\\\\main.csx'
    """

    def __init__(
        self,
        root_name: str,
        sep: str = DEFAULT_SEP,
        altsep: str = DEFAULT_ALTSEP,
    ) -> None:
        if not isinstance(root_name, str) or not root_name:
            raise ValueError(
                f"Invalid root_name value: {root_name!r}. Expected a non-empty string."
            )
        validate_separators(sep, altsep)
        self._sep: str = sep
        self._altsep: str = altsep
        self._tree = NodeTree(root_name, sep)
        self._current: DirNode = self._tree.root

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(root={self.root_name!r}, "
            f"current={self.current_directory!r})"
        )

    @property
    def root_name(self) -> str:
        return self._tree.root.name

    @property
    def sep(self) -> str:
        return self._sep

    @property
    def altsep(self) -> str:
        return self._altsep

    # -- path helpers --

    def _split(self, path: str) -> list[str]:
        return split_segments(path, self._sep, self._altsep)

    def _strip_root(self, path: str) -> str | None:
        """Return what follows the root name, or None if *path* is not rooted."""
        root_name = self._tree.root.name
        if path[: len(root_name)].casefold() != root_name.casefold():
            return None
        return path[len(root_name):]

    def _resolve(self, path: str) -> Node:
        remainder = self._strip_root(path)
        if remainder is None:
            return self._tree.get_item(self._current, self._split(path), path)
        if not remainder:
            return self._tree.root
        return self._tree.get_item(self._tree.root, self._split(remainder), path)

    def _resolve_dir(self, path: str) -> DirNode:
        node = self._resolve(path)
        if not isinstance(node, DirNode):
            raise VFSNotADirectoryError(path)
        return node

    # -- public API --

    def add_file(self, path: str, lines: Iterable[str]) -> None:
        """Create a file at *path*, relative to the current directory.

        Intermediate directories are created as needed. Raises
        VFSDuplicateEntryError if the name is already taken.
        """
        self._tree.add_file(self._current, self._split(path), lines, path)

    def read_file_lines(self, path: str) -> list[str]:
        node = self._resolve(path)
        if isinstance(node, DirNode):
            raise VFSIsADirectoryError(path)
        return list(node.lines)

    def get_full_path(self, path: str) -> str:
        return self._tree.full_path(self._resolve(path))

    def get_working_directory(self, path: str) -> str:
        node: Node | None = self._resolve(path)
        if isinstance(node, FileNode):
            node = self._tree.parent(node)
        assert node is not None
        return self._tree.full_path(node)

    @property
    def current_directory(self) -> str:
        return self._tree.full_path(self._current)

    @current_directory.setter
    def current_directory(self, path: str) -> None:
        self._current = self._resolve_dir(path)

    def listdir(self, path: str | None = None) -> list[str]:
        """Names in a directory (default: the current one), files first."""
        directory = self._current if path is None else self._resolve_dir(path)
        return [node.name for node in self._tree.items(directory)]

    def stat(self, path: str) -> VFSStatResult:
        node = self._resolve(path)
        return VFSStatResult(
            name=node.name,
            full_path=self._tree.full_path(node),
            is_dir=isinstance(node, DirNode),
            line_count=len(node.lines) if isinstance(node, FileNode) else 0,
        )

    def stats(self) -> VFSStats:
        file_count = 0
        dir_count = 0
        for node in self._tree.nodes():
            if isinstance(node, DirNode):
                dir_count += 1
            elif isinstance(node, FileNode):
                file_count += 1
        return VFSStats(file_count=file_count, dir_count=dir_count)

    def export_tree(self, path: str | None = None) -> dict[str, list[str]]:
        """Map the full path of every file under *path* to its lines.

        Defaults to the whole tree. A file path exports just that file.
        """
        node = self._tree.root if path is None else self._resolve(path)
        if isinstance(node, FileNode):
            return {self._tree.full_path(node): list(node.lines)}
        return {
            self._tree.full_path(fnode): list(fnode.lines)
            for fnode in self._tree.iter_files(node)
        }

    def import_tree(self, tree: Mapping[str, Iterable[str]]) -> None:
        """Add every file in *tree*, e.g. the output of :meth:`export_tree`.

        Rooted paths are inserted from the root, others from the current
        directory. Files added before a failing entry are kept.
        """
        for path, lines in tree.items():
            remainder = self._strip_root(path)
            if remainder is None:
                self._tree.add_file(self._current, self._split(path), lines, path)
                continue
            segments = self._split(remainder)
            if segments and segments[0] == "":
                segments = segments[1:]
            self._tree.add_file(self._tree.root, segments, lines, path)
