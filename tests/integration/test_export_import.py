import pytest
from virtfs import VFSDuplicateEntryError, VirtualFileSystem


def test_export_tree_basic(vfs):
    vfs.add_file("a.txt", ["aaa"])
    vfs.add_file("dir/b.txt", ["bbb"])
    tree = vfs.export_tree()
    assert tree == {"C:\\a.txt": ["aaa"], "C:\\dir\\b.txt": ["bbb"]}


def test_export_tree_empty(vfs):
    assert vfs.export_tree() == {}


def test_export_tree_with_prefix(vfs):
    vfs.add_file("dir/f.txt", ["inside"])
    vfs.add_file("other.txt", ["outside"])
    tree = vfs.export_tree("dir")
    assert "C:\\dir\\f.txt" in tree
    assert "C:\\other.txt" not in tree


def test_export_tree_file_path_returns_single_file(vfs):
    vfs.add_file("dir/f.txt", ["hello"])
    assert vfs.export_tree("dir/f.txt") == {"C:\\dir\\f.txt": ["hello"]}


def test_export_tree_ignores_current_directory_by_default(vfs):
    vfs.add_file("dir/f.txt", [])
    vfs.add_file("g.txt", [])
    vfs.current_directory = "dir"
    assert len(vfs.export_tree()) == 2


def test_export_tree_nonexistent_raises(vfs):
    with pytest.raises(FileNotFoundError):
        vfs.export_tree("nope")


def test_import_tree_rooted_paths(vfs):
    vfs.add_file("dir/inner.txt", [])
    vfs.current_directory = "dir"
    vfs.import_tree({"C:\\a\\b.txt": ["b"], "c:/c.txt": ["c"]})
    assert vfs.read_file_lines("C:\\a\\b.txt") == ["b"]
    assert vfs.read_file_lines("C:\\c.txt") == ["c"]


def test_import_tree_relative_paths_use_current_directory(vfs):
    vfs.add_file("dir/inner.txt", [])
    vfs.current_directory = "dir"
    vfs.import_tree({"sub/x.txt": ["x"]})
    assert vfs.get_full_path("sub/x.txt") == "C:\\dir\\sub\\x.txt"


def test_import_tree_duplicate_keeps_earlier_entries(vfs):
    vfs.add_file("taken.txt", ["original"])
    with pytest.raises(VFSDuplicateEntryError):
        vfs.import_tree({"first.txt": ["1"], "taken.txt": ["new"], "last.txt": ["2"]})
    assert vfs.read_file_lines("first.txt") == ["1"]
    assert vfs.read_file_lines("taken.txt") == ["original"]
    with pytest.raises(FileNotFoundError):
        vfs.read_file_lines("last.txt")


def test_export_import_roundtrip(vfs):
    vfs.add_file("scripts/main.csx", ["print 1", "print 2"])
    vfs.add_file("scripts/lib/util.csx", ["util"])
    vfs.add_file("readme.txt", [])
    exported = vfs.export_tree()
    fresh = VirtualFileSystem("C:")
    fresh.import_tree(exported)
    assert fresh.export_tree() == exported
    assert fresh.stats() == vfs.stats()
