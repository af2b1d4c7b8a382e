"""Directory tree scanning, copying and removal utilities.

This package walks a directory tree once, filters every entry through a declarative
configuration (include/exclude globs, entry type, recursion, dotfiles, symlinks,
leaves-only pruning) and then collects, copies or deletes what matched. It also
creates nested directories in one call and generates unused temporary path names.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from dirtree.config import CopyConfig, RemoveConfig, TraversalConfig
from dirtree.copier import TreeCopier, copy
from dirtree.enumerator import Enumerator, iscan, render_tree, scan, scan_tree
from dirtree.exceptions import (
    CreateFailedError,
    DestinationMissingError,
    DirtreeError,
    IOFailureError,
    NotFoundError,
)
from dirtree.maker import make
from dirtree.remover import TreeRemover, remove
from dirtree.temp_namer import tempnam
from dirtree.types import EntryKind, EntryType, ErrorAction, TraversalOrder

# Expose the version for programmatic use
try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CopyConfig",
    "CreateFailedError",
    "DestinationMissingError",
    "DirtreeError",
    "EntryKind",
    "EntryType",
    "Enumerator",
    "ErrorAction",
    "IOFailureError",
    "NotFoundError",
    "RemoveConfig",
    "TraversalConfig",
    "TraversalOrder",
    "TreeCopier",
    "TreeRemover",
    "copy",
    "iscan",
    "make",
    "remove",
    "render_tree",
    "scan",
    "scan_tree",
    "tempnam",
]
