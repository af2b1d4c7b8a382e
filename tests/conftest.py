"""Test configuration and fixtures for dirtree."""

import os

import pytest


@pytest.fixture
def fixture_tree(tmp_path):
    """Create the reference tree used across the scan, copy and remove tests.

    Layout::

        Fixture/
        ├── Extensions/
        │   ├── Childs -> ../Nested/Childs
        │   ├── file.xml
        │   ├── index.html
        │   └── index.php
        ├── Nested/
        │   ├── Childs/
        │   │   └── child1.txt
        │   ├── nested_file1.txt
        │   └── nested_file2.txt
        └── file1.txt

    Returns:
        Tuple of (root path as str, whether the symlink could be created).
    """
    root = tmp_path / "Fixture"
    (root / "Nested" / "Childs").mkdir(parents=True)
    (root / "Extensions").mkdir()
    (root / "file1.txt").write_text("file1")
    (root / "Nested" / "nested_file1.txt").write_text("nested1")
    (root / "Nested" / "nested_file2.txt").write_text("nested2")
    (root / "Nested" / "Childs" / "child1.txt").write_text("child1")
    (root / "Extensions" / "file.xml").write_text("<xml/>")
    (root / "Extensions" / "index.html").write_text("<html></html>")
    (root / "Extensions" / "index.php").write_text("<?php")

    try:
        os.symlink(os.path.join("..", "Nested", "Childs"), root / "Extensions" / "Childs")
        has_symlinks = True
    except (OSError, NotImplementedError):
        # On some platforms (like Windows) creating symlinks might require special permissions
        has_symlinks = False

    return str(root), has_symlinks


@pytest.fixture
def symlinked_fixture(fixture_tree):
    """The reference tree, skipping the test where symlinks are unavailable."""
    root, has_symlinks = fixture_tree
    if not has_symlinks:
        pytest.skip("Symlink creation not supported on this platform/environment")
    return root


@pytest.fixture
def plain_tree(tmp_path):
    """A small tree without any symlink."""
    root = tmp_path / "plain"
    (root / "docs" / "api").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "README.md").write_text("# readme")
    (root / "docs" / "guide.txt").write_text("guide")
    (root / "docs" / "api" / "index.txt").write_text("api")
    (root / ".hidden").write_text("secret")
    return str(root)


@pytest.fixture
def under():
    """Return a helper joining slash-separated relative paths onto a root, natively."""

    def join(root, *relative):
        return [os.path.join(root, *path.split("/")) for path in relative]

    return join
