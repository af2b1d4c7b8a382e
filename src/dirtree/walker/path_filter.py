"""Per-entry filter decision shared by every tree operation."""

import os

from dirtree.config import TraversalConfig
from dirtree.types import EntryType
from dirtree.walker.entry import Entry


def normalize_path(path: str) -> str:
    """Return path with every separator in the host's native form."""
    if os.altsep:
        return path.replace(os.altsep, os.sep)
    return path


class PathFilter:
    """Decides whether a single entry belongs in the result of a walk.

    Rules are applied in order and the first failing rule rejects the entry:

    1. With skip_dots, the "." and ".." entries are rejected.
    2. The entry_type restriction (a link to a directory counts as a directory).
    3. With include patterns, the full path must match one of them.
    4. With exclude patterns, a full path matching any of them is rejected, so an
       entry matching both include and exclude is excluded.

    Recursion and leaves-only are not decided here: they depend on the shape of the
    subtree, not on the entry alone, and are handled by the walker.

    Example:
        >>> from dirtree.types import EntryKind
        >>> path_filter = PathFilter(TraversalConfig(include="*.txt", exclude="*nested*"))
        >>> path_filter.accepts(Entry("root/file1.txt", EntryKind.FILE, 1))
        True
        >>> path_filter.accepts(Entry("root/nested/child.txt", EntryKind.FILE, 2))
        False
    """

    def __init__(self, config: TraversalConfig) -> None:
        self.config = config

    def accepts(self, entry: Entry) -> bool:
        config = self.config

        if config.skip_dots and entry.is_dot:
            return False

        if config.entry_type == EntryType.FILE and entry.is_dir:
            return False
        if config.entry_type == EntryType.DIRECTORY and not entry.is_dir:
            return False

        path = normalize_path(entry.path)
        if config.include and not config.matcher.match_any(config.include, path, entry.is_dir):
            return False
        if config.exclude and config.matcher.match_any(config.exclude, path, entry.is_dir):
            return False

        return True
