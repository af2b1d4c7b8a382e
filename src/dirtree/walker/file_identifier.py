"""Directory identity by device and inode, used to detect symlink cycles."""

import os
from typing import NamedTuple, Optional


class FileIdentifier(NamedTuple):
    """Device and inode pair naming one directory on disk.

    Two paths that alias the same directory (through symlinks or bind mounts) stat
    to the same pair, so the walker keeps these in its set of open ancestors
    instead of path strings.
    """

    device_id: int
    inode_number: int

    @classmethod
    def of(cls, path: str) -> Optional["FileIdentifier"]:
        """Identify the node at path, following symlinks.

        Returns:
            The identifier, or None if path cannot be stat'ed.
        """
        try:
            stat_info = os.stat(path)
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)
