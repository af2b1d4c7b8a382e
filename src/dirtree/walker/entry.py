"""Entry record produced for every filesystem node a walk reports."""

import os
import stat
from dataclasses import dataclass
from typing import Optional

from dirtree.types import EntryKind

DOT_NAMES = (".", "..")


@dataclass(frozen=True)
class Entry:
    """One filesystem node encountered during a walk.

    Attributes:
        path (str): Path of the node, in the same form as the walked root.
        kind (EntryKind): Resolved kind of the node.
        depth (int): Distance from the walked root (its direct children are at 1).

    Example:
        >>> entry = Entry("root/nested", EntryKind.SYMLINK_DIRECTORY, 1)
        >>> entry.name, entry.is_dir, entry.is_symlink
        ('nested', True, True)
    """

    path: str
    kind: EntryKind
    depth: int

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def is_dir(self) -> bool:
        return self.kind in (EntryKind.DIRECTORY, EntryKind.SYMLINK_DIRECTORY)

    @property
    def is_symlink(self) -> bool:
        return self.kind in (EntryKind.SYMLINK_FILE, EntryKind.SYMLINK_DIRECTORY)

    @property
    def is_dot(self) -> bool:
        return self.name in DOT_NAMES


def classify(path: str) -> Optional[EntryKind]:
    """Resolve the kind of the node at path without following it blindly.

    Args:
        path: Path to inspect.

    Returns:
        The entry kind, or None if nothing exists at path (not even a dangling link).

    Raises:
        OSError: If the node exists but cannot be inspected.

    Example:
        >>> classify(".")
        <EntryKind.DIRECTORY: 'directory'>
        >>> classify("/non/existent/path") is None
        True
    """
    try:
        st = os.lstat(path)
    except FileNotFoundError:
        return None

    if stat.S_ISLNK(st.st_mode):
        try:
            target_is_dir = stat.S_ISDIR(os.stat(path).st_mode)
        except OSError:
            # Dangling or unreadable link
            target_is_dir = False
        return EntryKind.SYMLINK_DIRECTORY if target_is_dir else EntryKind.SYMLINK_FILE
    if stat.S_ISDIR(st.st_mode):
        return EntryKind.DIRECTORY
    return EntryKind.FILE
