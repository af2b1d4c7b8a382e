"""Copying of a filtered directory tree under a destination directory."""

import dataclasses
import logging
import os
from typing import Any, Optional

from dirtree.config import CopyConfig, TraversalConfig, resolve_config
from dirtree.exceptions import CreateFailedError, DestinationMissingError, IOFailureError, NotFoundError
from dirtree.maker import make
from dirtree.types import EntryKind, ErrorAction, PathType
from dirtree.walker.tree_walker import TreeWalker

logger = logging.getLogger(__name__)


class TreeCopier:
    """Replicates the accepted entries of a source tree under a destination directory.

    The source root itself is recreated inside the destination: copying
    ``assets/Fixture`` to ``/tmp/out`` produces ``/tmp/out/Fixture/...``, and copying
    a single file ``a/f.txt`` produces ``/tmp/out/f.txt``.

    The walk is pre-order, so a directory is created before anything below it.
    Parent directories of a copied file are created as well, even when the filter
    rejected the directories themselves (e.g. ``include="*.txt"``). A link to a
    directory that is not followed becomes an empty directory; its contents are
    never copied.

    Attributes:
        config (CopyConfig): Options of the copy. Recursion is always on.
        walker (TreeWalker): Pre-order walker built from config.

    Example:
        >>> copier = TreeCopier(CopyConfig(exclude="*.txt"))  # doctest: +SKIP
        >>> copier.copy("assets/Fixture", "/tmp/out")  # doctest: +SKIP
    """

    def __init__(self, config: CopyConfig) -> None:
        if not config.recursive:
            config = dataclasses.replace(config, recursive=True)
        self.config = config
        self.walker = TreeWalker(config)

    def copy(self, source: PathType, destination: PathType) -> None:
        """Copy the accepted entries of source under destination.

        Args:
            source: Directory (or file) to copy.
            destination: Existing directory receiving the copy.

        Raises:
            DestinationMissingError: If destination is not an existing directory.
            NotFoundError: If source does not exist.
            ValueError: If destination lies inside source.
            CreateFailedError: If a target directory cannot be created.
            IOFailureError: If a file cannot be copied.
        """
        source_path = os.fspath(source)
        destination_path = os.fspath(destination)

        if not os.path.isdir(destination_path):
            raise DestinationMissingError(destination_path)
        if not os.path.lexists(source_path):
            raise NotFoundError(source_path)

        source_root = source_path.rstrip(os.sep) or source_path
        # "." and ".." name the directory they resolve to
        target_root = os.path.join(destination_path, os.path.basename(os.path.abspath(source_path)))

        if os.path.isdir(source_path):
            real_source = os.path.realpath(source_path)
            real_target = os.path.realpath(target_root)
            if real_target == real_source or real_target.startswith(real_source.rstrip(os.sep) + os.sep):
                raise ValueError(f"Cannot copy `{source_path}` into itself (`{destination_path}`)")

        logger.info("Copying %s to %s", source_path, target_root)

        for entry in self.walker.walk(source_path):
            if entry.is_dot:
                continue

            if entry.path == source_path:
                target = target_root
            else:
                target = os.path.join(target_root, entry.path[len(source_root) :].lstrip(os.sep))

            if entry.is_dir:
                self._make_directory(target)
            elif entry.kind == EntryKind.SYMLINK_FILE and not os.path.exists(entry.path):
                logger.warning("Skipping dangling symlink %s", entry.path)
            else:
                self._make_directory(os.path.dirname(target))
                self._copy_file(entry.path, target)

    def _make_directory(self, path: str) -> None:
        try:
            make(path)
        except CreateFailedError as e:
            if self.config.on_error == ErrorAction.RAISE:
                raise
            logger.warning("Skipping %s: %s", path, e)

    def _copy_file(self, source: str, target: str) -> None:
        try:
            self.config.copy_handler(source, target)
        except OSError as e:
            if self.config.on_error == ErrorAction.RAISE:
                raise IOFailureError(source, "copy", e.strerror or str(e)) from e
            logger.warning("Skipping %s: unable to copy: %s", source, e)
        else:
            logger.debug("Copied %s to %s", source, target)


def copy(
    source: PathType, destination: PathType, config: Optional[TraversalConfig] = None, **options: Any
) -> None:
    """Copy the entries of source that pass the given options under destination.

    Args:
        source: Directory (or file) to copy.
        destination: Existing directory receiving the copy; it is never created.
        config: Optional ready-made configuration (a TraversalConfig is widened to a
            CopyConfig with the default copy handler).
        **options: CopyConfig fields, overriding config. ``recursive`` is ignored.

    Raises:
        DestinationMissingError: If destination is not an existing directory.
        NotFoundError: If source does not exist.

    Example:
        >>> copy("assets/Fixture", "/tmp/out", include="*.txt")  # doctest: +SKIP
    """
    TreeCopier(resolve_config(CopyConfig, config, options)).copy(source, destination)
