"""Unit tests for the PathFilter class."""

import os

import pytest

from dirtree.config import TraversalConfig
from dirtree.matchers.gitwild_matcher import GitWildMatcher
from dirtree.types import EntryKind, EntryType
from dirtree.walker.entry import Entry
from dirtree.walker.path_filter import PathFilter, normalize_path


def entry(path, kind=EntryKind.FILE, depth=1):
    return Entry(os.path.join(*path.split("/")), kind, depth)


@pytest.mark.parametrize(
    "skip_dots,expected",
    [
        (True, False),
        (False, True),
    ],
)
def test_dot_entries(skip_dots, expected):
    path_filter = PathFilter(TraversalConfig(skip_dots=skip_dots))
    assert path_filter.accepts(entry("root/.", EntryKind.DIRECTORY)) is expected
    assert path_filter.accepts(entry("root/..", EntryKind.DIRECTORY)) is expected


def test_dotfiles_are_not_dot_entries():
    assert PathFilter(TraversalConfig()).accepts(entry("root/.hidden"))


@pytest.mark.parametrize(
    "entry_type,kind,expected",
    [
        (EntryType.ANY, EntryKind.FILE, True),
        (EntryType.ANY, EntryKind.DIRECTORY, True),
        (EntryType.FILE, EntryKind.FILE, True),
        (EntryType.FILE, EntryKind.SYMLINK_FILE, True),
        (EntryType.FILE, EntryKind.DIRECTORY, False),
        (EntryType.FILE, EntryKind.SYMLINK_DIRECTORY, False),
        (EntryType.DIRECTORY, EntryKind.DIRECTORY, True),
        (EntryType.DIRECTORY, EntryKind.SYMLINK_DIRECTORY, True),
        (EntryType.DIRECTORY, EntryKind.FILE, False),
        (EntryType.DIRECTORY, EntryKind.SYMLINK_FILE, False),
    ],
)
def test_entry_type(entry_type, kind, expected):
    path_filter = PathFilter(TraversalConfig(entry_type=entry_type))
    assert path_filter.accepts(entry("root/item", kind)) is expected


def test_include_matches_the_full_path():
    # A bare name without wildcard cannot match a path with a directory part
    assert not PathFilter(TraversalConfig(include="file1.txt")).accepts(entry("root/file1.txt"))
    assert PathFilter(TraversalConfig(include="*file1.txt")).accepts(entry("root/file1.txt"))


def test_include_wildcard_crosses_directories():
    path_filter = PathFilter(TraversalConfig(include="*.txt"))
    assert path_filter.accepts(entry("root/nested/childs/child1.txt", depth=3))
    assert not path_filter.accepts(entry("root/nested/index.php", depth=2))


def test_exclude_wins_over_include():
    path_filter = PathFilter(TraversalConfig(include="*.txt", exclude="*Nested*"))
    assert path_filter.accepts(entry("root/file1.txt"))
    assert not path_filter.accepts(entry("root/Nested/nested_file1.txt", depth=2))
    assert not path_filter.accepts(entry("root/Nested", EntryKind.DIRECTORY))


def test_any_of_several_patterns():
    path_filter = PathFilter(TraversalConfig(include=["*.html", "*.php"], exclude=("*index.php",)))
    assert path_filter.accepts(entry("root/index.html"))
    assert path_filter.accepts(entry("root/other.php"))
    assert not path_filter.accepts(entry("root/index.php"))
    assert not path_filter.accepts(entry("root/file.xml"))


def test_rules_short_circuit_before_matching():
    class RecordingMatcher(GitWildMatcher):
        def __init__(self):
            super().__init__()
            self.calls = []

        def match(self, pattern, path):
            self.calls.append((pattern, path))
            return super().match(pattern, path)

    matcher = RecordingMatcher()
    path_filter = PathFilter(TraversalConfig(entry_type="file", include="*.txt", matcher=matcher))
    assert not path_filter.accepts(entry("root/docs", EntryKind.DIRECTORY))
    assert matcher.calls == []


def test_gitignore_style_matcher():
    path_filter = PathFilter(TraversalConfig(exclude="build/", matcher=GitWildMatcher()))
    assert not path_filter.accepts(entry("root/build", EntryKind.DIRECTORY))
    assert path_filter.accepts(entry("root/build"))
    assert not path_filter.accepts(entry("root/build/out.o", depth=2))
    assert path_filter.accepts(entry("root/src/main.c", depth=2))


def test_normalize_path_uses_native_separator():
    assert normalize_path(os.path.join("a", "b")) == os.path.join("a", "b")
    if os.altsep:
        assert normalize_path("a" + os.altsep + "b") == os.path.join("a", "b")
