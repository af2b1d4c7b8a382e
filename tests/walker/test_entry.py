"""Unit tests for Entry, classify and EntryNode."""

import os

import pytest

from dirtree.types import EntryKind
from dirtree.walker.entry import Entry, classify
from dirtree.walker.entry_node import EntryNode


def test_entry_properties():
    entry = Entry(os.path.join("root", "file.txt"), EntryKind.FILE, 1)
    assert entry.name == "file.txt"
    assert not entry.is_dir
    assert not entry.is_symlink
    assert not entry.is_dot

    link = Entry(os.path.join("root", "link"), EntryKind.SYMLINK_DIRECTORY, 1)
    assert link.is_dir
    assert link.is_symlink

    dot = Entry(os.path.join("root", ".."), EntryKind.DIRECTORY, 1)
    assert dot.is_dot


def test_entry_is_immutable():
    entry = Entry("file.txt", EntryKind.FILE, 0)
    with pytest.raises(AttributeError):
        entry.depth = 3


def test_classify_files_and_directories(tmp_path):
    (tmp_path / "file.txt").write_text("x")
    (tmp_path / "dir").mkdir()
    assert classify(str(tmp_path / "file.txt")) == EntryKind.FILE
    assert classify(str(tmp_path / "dir")) == EntryKind.DIRECTORY
    assert classify(str(tmp_path / "missing")) is None


def test_classify_symlinks(tmp_path):
    (tmp_path / "file.txt").write_text("x")
    (tmp_path / "dir").mkdir()
    try:
        os.symlink(tmp_path / "file.txt", tmp_path / "file_link")
        os.symlink(tmp_path / "dir", tmp_path / "dir_link")
        os.symlink(tmp_path / "missing", tmp_path / "dangling")
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")

    assert classify(str(tmp_path / "file_link")) == EntryKind.SYMLINK_FILE
    assert classify(str(tmp_path / "dir_link")) == EntryKind.SYMLINK_DIRECTORY
    assert classify(str(tmp_path / "dangling")) == EntryKind.SYMLINK_FILE


def test_entry_node_parent_child():
    root = EntryNode("root")
    docs = EntryNode("docs", parent=root, entry=Entry("root/docs", EntryKind.DIRECTORY, 1))
    guide = EntryNode("guide.txt", parent=docs, entry=Entry("root/docs/guide.txt", EntryKind.FILE, 2))

    assert guide.parent == docs
    assert docs.parent == root
    assert root.children == (docs,)
    assert guide.entry_path == "root/docs/guide.txt"
    assert docs.is_dir
    assert not guide.is_dir


def test_entry_node_placeholder():
    placeholder = EntryNode("docs")
    assert placeholder.entry is None
    assert placeholder.entry_path is None
    assert placeholder.is_dir
    assert not placeholder.is_symlink
