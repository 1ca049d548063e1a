from __future__ import annotations

from collections.abc import Iterable, Iterator

from ._exceptions import (
    VFSDuplicateEntryError,
    VFSInvalidPathError,
    VFSNotFoundError,
)
from ._path import DEFAULT_SEP, join_segments

CURRENT_DIR = "."
PARENT_DIR = ".."
_RESERVED_NAMES = frozenset(("", CURRENT_DIR, PARENT_DIR))

# ---------------------------------------------------------------------------
#  Node Layer
# ---------------------------------------------------------------------------


class DirNode:
    __slots__ = ("node_id", "name", "parent_id", "children")

    def __init__(self, node_id: int, name: str, parent_id: int | None) -> None:
        self.node_id: int = node_id
        self.name: str = name
        self.parent_id: int | None = parent_id
        self.children: dict[str, int] = {}

    def __repr__(self) -> str:
        return f"DirNode({self.node_id}, {self.name!r}, children={len(self.children)})"


class FileNode:
    __slots__ = ("node_id", "name", "parent_id", "lines")

    def __init__(
        self, node_id: int, name: str, parent_id: int, lines: Iterable[str]
    ) -> None:
        self.node_id: int = node_id
        self.name: str = name
        self.parent_id: int = parent_id
        self.lines: tuple[str, ...] = tuple(lines)

    def __repr__(self) -> str:
        return f"FileNode({self.node_id}, {self.name!r}, lines={len(self.lines)})"


Node = DirNode | FileNode


# ---------------------------------------------------------------------------
#  NodeTree
# ---------------------------------------------------------------------------


class NodeTree:
    """Arena of directory and file nodes addressed by integer id.

    Directories own their children through ``children`` (name to id) and
    every node points back at its parent through ``parent_id``. Both links
    are plain ids into ``_nodes``, so there are no reference cycles.

    The ``path`` argument accepted by the lookup and insert methods is only
    used in error messages; it defaults to the segments joined with the
    tree's separator.
    """

    def __init__(self, root_name: str, sep: str = DEFAULT_SEP) -> None:
        self._sep: str = sep
        self._nodes: dict[int, Node] = {}
        self._next_node_id: int = 0
        self._root = self._alloc_dir(root_name, None)

    @property
    def root(self) -> DirNode:
        return self._root

    @property
    def sep(self) -> str:
        return self._sep

    def __len__(self) -> int:
        return len(self._nodes)

    def nodes(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    # -- node allocation helpers --

    def _next_id(self) -> int:
        nid = self._next_node_id
        self._next_node_id += 1
        return nid

    def _alloc_dir(self, name: str, parent_id: int | None) -> DirNode:
        node = DirNode(self._next_id(), name, parent_id)
        self._nodes[node.node_id] = node
        return node

    def _alloc_file(self, name: str, parent_id: int, lines: Iterable[str]) -> FileNode:
        node = FileNode(self._next_id(), name, parent_id, lines)
        self._nodes[node.node_id] = node
        return node

    # -- navigation helpers --

    def child(self, directory: DirNode, name: str) -> Node | None:
        child_id = directory.children.get(name)
        if child_id is None:
            return None
        return self._nodes[child_id]

    def parent(self, node: Node) -> DirNode | None:
        if node.parent_id is None:
            return None
        parent = self._nodes[node.parent_id]
        assert isinstance(parent, DirNode)
        return parent

    def full_path(self, node: Node) -> str:
        names: list[str] = []
        current: Node | None = node
        while current is not None:
            names.append(current.name)
            current = self.parent(current)
        return self._sep.join(reversed(names))

    def items(self, directory: DirNode) -> list[Node]:
        """Children of *directory*, files first, then directories."""
        children = [self._nodes[child_id] for child_id in directory.children.values()]
        files = [c for c in children if isinstance(c, FileNode)]
        dirs = [c for c in children if isinstance(c, DirNode)]
        return files + dirs

    def iter_files(self, directory: DirNode) -> Iterator[FileNode]:
        """Every file below *directory*, depth first."""
        for child in self.items(directory):
            if isinstance(child, FileNode):
                yield child
            else:
                yield from self.iter_files(child)

    # -- insertion --

    def _check_name(self, name: str, path: str) -> None:
        if name in _RESERVED_NAMES:
            raise VFSInvalidPathError(path, f"{name!r} cannot be used as an entry name")

    def get_or_create_directory(
        self, directory: DirNode, name: str, path: str | None = None
    ) -> DirNode:
        child = self.child(directory, name)
        if isinstance(child, DirNode):
            return child
        if path is None:
            path = self.full_path(directory) + self._sep + name
        if child is not None:
            raise VFSDuplicateEntryError(path, name)
        self._check_name(name, path)
        new_dir = self._alloc_dir(name, directory.node_id)
        directory.children[name] = new_dir.node_id
        return new_dir

    def add_file(
        self,
        directory: DirNode,
        segments: list[str],
        lines: Iterable[str],
        path: str | None = None,
    ) -> FileNode:
        """Insert a file at *segments* below *directory*.

        Missing intermediate directories are created on the way down and
        stay in place if the insert then fails.
        """
        if path is None:
            path = join_segments(segments, self._sep)
        if isinstance(lines, str):
            raise TypeError("lines must be an iterable of str, not a str")
        if not segments:
            raise VFSInvalidPathError(path, "no path segments")
        current = directory
        for name in segments[:-1]:
            current = self.get_or_create_directory(current, name, path)
        name = segments[-1]
        self._check_name(name, path)
        if name in current.children:
            raise VFSDuplicateEntryError(path, name)
        fnode = self._alloc_file(name, current.node_id, lines)
        current.children[name] = fnode.node_id
        return fnode

    # -- lookup --

    def get_file(
        self, directory: DirNode, segments: list[str], path: str | None = None
    ) -> FileNode:
        if path is None:
            path = join_segments(segments, self._sep)
        if not segments:
            raise VFSInvalidPathError(path, "no path segments")
        current = directory
        for name in segments[:-1]:
            child = self.child(current, name)
            if not isinstance(child, DirNode):
                raise VFSNotFoundError(path)
            current = child
        node = self.child(current, segments[-1])
        if not isinstance(node, FileNode):
            raise VFSNotFoundError(path)
        return node

    def get_item(
        self, directory: DirNode, segments: list[str], path: str | None = None
    ) -> Node:
        """Resolve *segments* from *directory*, following ``.`` and ``..``.

        An empty first segment (left by a leading separator) is skipped at
        each step. Every segment but the last must name a directory; the
        last may name either kind.
        """
        if path is None:
            path = join_segments(segments, self._sep)
        current = directory
        remaining = segments
        while True:
            if remaining and remaining[0] == "":
                remaining = remaining[1:]
            if not remaining:
                raise VFSInvalidPathError(path, "no path segments")
            head, remaining = remaining[0], remaining[1:]
            target: Node | None
            if head == CURRENT_DIR:
                target = current
            elif head == PARENT_DIR:
                target = self.parent(current)
                if target is None:
                    raise VFSInvalidPathError(path, "cannot go above the root directory")
            else:
                target = self.child(current, head)
            if not remaining:
                if target is None:
                    raise VFSNotFoundError(path)
                return target
            if not isinstance(target, DirNode):
                raise VFSNotFoundError(path)
            current = target
