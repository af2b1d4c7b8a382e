from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Resolved kind of a filesystem entry encountered during traversal.

    A symbolic link is classified by what it points to. A dangling link has no
    target to inspect and is reported as SYMLINK_FILE.

    Attributes:
        FILE: Regular file (or any other non-directory node)
        DIRECTORY: Directory
        SYMLINK_FILE: Symbolic link to a file, or a dangling link
        SYMLINK_DIRECTORY: Symbolic link to a directory
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK_FILE = "symlink_file"
    SYMLINK_DIRECTORY = "symlink_directory"


class EntryType(str, Enum):
    """Entry type filter applied by a traversal.

    Values:
        ANY: Accept files and directories (default)
        FILE: Accept only non-directories
        DIRECTORY: Accept only directories, including links to directories
    """

    ANY = "any"
    FILE = "file"
    DIRECTORY = "directory"


class TraversalOrder(str, Enum):
    """Order in which a directory is reported relative to its descendants.

    Values:
        PRE: Directory first, then its descendants (listing, copying)
        POST: Descendants first, then the directory (removal)
    """

    PRE = "pre"
    POST = "post"


class ErrorAction(str, Enum):
    """Action to take when an individual entry cannot be read, copied or removed.

    Failures on the root of an operation always raise regardless of this setting.

    Values:
        RAISE: Stop and raise on the first failing entry (default)
        IGNORE: Log a warning, skip the entry and carry on
    """

    RAISE = "raise"
    IGNORE = "ignore"
