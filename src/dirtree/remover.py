"""Removal of a filtered directory tree, deepest entries first."""

import errno
import logging
import os
from typing import Any, Optional

from dirtree.config import RemoveConfig, TraversalConfig, resolve_config
from dirtree.exceptions import IOFailureError, NotFoundError
from dirtree.types import EntryKind, ErrorAction, PathType, TraversalOrder
from dirtree.walker.entry import Entry, classify
from dirtree.walker.tree_walker import TreeWalker

logger = logging.getLogger(__name__)

_NOT_EMPTY = (errno.ENOTEMPTY, errno.EEXIST)


class TreeRemover:
    """Deletes the accepted entries of a tree.

    The walk is post-order, so everything below a directory is handled before the
    directory itself. Files and symlinks are unlinked; a directory is removed only
    if it is empty by then. When the filter kept some descendants, their directory
    stays in place: partial removal is expected and not an error. The root goes
    last, under the same rules.

    A root that is a symlink is unlinked itself unless follow_symlinks is set, so a
    linked directory's target is never emptied by accident.

    Attributes:
        config (RemoveConfig): Options of the removal.
        walker (TreeWalker): Post-order walker built from config.

    Example:
        >>> TreeRemover(RemoveConfig(include="*.pyc")).remove("build")  # doctest: +SKIP
    """

    def __init__(self, config: RemoveConfig) -> None:
        self.config = config
        self.walker = TreeWalker(config, order=TraversalOrder.POST)

    def remove(self, path: PathType) -> None:
        """Remove the accepted entries under path, then path itself if possible.

        Removing a path that does not exist succeeds without doing anything.

        Raises:
            IOFailureError: If an entry cannot be removed (under ErrorAction.RAISE).
        """
        root_path = os.fspath(path)
        try:
            kind = classify(root_path)
        except OSError as e:
            raise IOFailureError(root_path, "inspect", e.strerror or str(e)) from e
        if kind is None:
            logger.debug("Nothing to remove at %s", root_path)
            return

        logger.info("Removing %s", root_path)
        root_entry = Entry(root_path, kind, 0)

        if root_entry.is_dir and (kind == EntryKind.DIRECTORY or self.config.follow_symlinks):
            try:
                for entry in self.walker.walk(root_path):
                    if not entry.is_dot:
                        self._remove_entry(entry)
            except NotFoundError:
                logger.debug("%s disappeared during removal", root_path)
                return

        if self.walker.path_filter.accepts(root_entry):
            self._remove_entry(root_entry)

    def _remove_entry(self, entry: Entry) -> None:
        try:
            if entry.kind == EntryKind.DIRECTORY:
                os.rmdir(entry.path)
            else:
                os.unlink(entry.path)
        except FileNotFoundError:
            logger.debug("Skipping %s: already removed", entry.path)
        except OSError as e:
            if entry.kind == EntryKind.DIRECTORY and e.errno in _NOT_EMPTY:
                logger.debug("Keeping %s: directory not empty", entry.path)
                return
            if self.config.on_error == ErrorAction.RAISE:
                raise IOFailureError(entry.path, "remove", e.strerror or str(e)) from e
            logger.warning("Skipping %s: unable to remove: %s", entry.path, e)
        else:
            logger.debug("Removed %s", entry.path)


def remove(path: PathType, config: Optional[TraversalConfig] = None, **options: Any) -> None:
    """Remove the entries under path that pass the given options.

    Args:
        path: Directory (or file) to remove. A missing path is a no-op.
        config: Optional ready-made configuration.
        **options: RemoveConfig fields, overriding config.

    Raises:
        IOFailureError: If an entry cannot be removed.

    Example:
        >>> remove("/tmp/out")  # doctest: +SKIP
        >>> remove("/tmp/out", include="*.txt")  # doctest: +SKIP
    """
    TreeRemover(resolve_config(RemoveConfig, config, options)).remove(path)
