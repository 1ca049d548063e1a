"""VirtualFileSystem constructor options and small accessors."""

import pytest
from virtfs import VirtualFileSystem


def test_defaults_use_windows_separators():
    vfs = VirtualFileSystem("C:")
    assert vfs.root_name == "C:"
    assert vfs.sep == "\\"
    assert vfs.altsep == "/"
    assert vfs.current_directory == "C:"


@pytest.mark.parametrize("root_name", ["", None, 3])
def test_invalid_root_name_raises(root_name):
    with pytest.raises(ValueError, match="root_name"):
        VirtualFileSystem(root_name)


def test_invalid_separators_raise():
    with pytest.raises(ValueError):
        VirtualFileSystem("C:", sep="/", altsep="/")
    with pytest.raises(ValueError):
        VirtualFileSystem("C:", sep="")


def test_posix_style_separators():
    vfs = VirtualFileSystem("root", sep="/", altsep="\\")
    vfs.add_file("etc\\hosts", ["127.0.0.1 localhost"])
    assert vfs.get_full_path("etc/hosts") == "root/etc/hosts"
    assert vfs.read_file_lines("root/etc/hosts") == ["127.0.0.1 localhost"]


def test_repr_shows_root_and_current():
    vfs = VirtualFileSystem("C:")
    vfs.add_file("scripts/main.csx", [])
    vfs.current_directory = "scripts"
    assert repr(vfs) == "VirtualFileSystem(root='C:', current='C:\\\\scripts')"
