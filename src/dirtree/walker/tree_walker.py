"""Depth-first traversal engine with filtering, symlink policy and loop detection.

This module provides the TreeWalker used by every tree operation. The walk is
expressed once; callers only choose the traversal order and what to do with each
reported entry.
"""

import logging
import os
from typing import Iterator, List, Optional, Set

from dirtree.config import TraversalConfig
from dirtree.exceptions import IOFailureError, NotFoundError
from dirtree.types import EntryKind, ErrorAction, PathType, TraversalOrder
from dirtree.walker.entry import DOT_NAMES, Entry, classify
from dirtree.walker.file_identifier import FileIdentifier
from dirtree.walker.path_filter import PathFilter

logger = logging.getLogger(__name__)


class TreeWalker:
    """Walks a directory tree and lazily yields the entries accepted by a PathFilter.

    The walk is depth-first. Children of a directory are visited in sorted name order
    so results are deterministic; callers should still not rely on the order beyond
    the pre/post-order guarantee.

    Symbolic Link Behavior:
        A link to a directory is always reported like any other entry. Its contents
        are walked only when follow_symlinks is True. Directories on the current path
        are tracked by device and inode, and a directory already on the path is
        reported but never re-entered, so cyclic links terminate.

    Walk Shape:
        - recursive=False lists the root's direct children only.
        - skip_dots=False reports synthesised "." and ".." entries for every listed
          directory. They are never descended into.
        - leaves_only=True reports a directory only when none of its descendants was
          reported. It has no effect without recursion.
        - A root that is not a directory is a one-entry tree.

    Error Handling:
        A missing root raises NotFoundError and an unreadable root raises
        IOFailureError, both before anything is yielded. Entries that disappear
        during the walk are skipped. Other failures on individual entries raise
        IOFailureError, or are logged and skipped under ErrorAction.IGNORE.

    Attributes:
        config (TraversalConfig): Filter and walk-shape options.
        order (TraversalOrder): Whether directories come before or after their descendants.
        path_filter (PathFilter): Per-entry filter built from config.

    Example:
        >>> walker = TreeWalker(TraversalConfig(entry_type="file"))  # doctest: +SKIP
        >>> [entry.path for entry in walker.walk("src")]  # doctest: +SKIP
        ['src/main.py', 'src/utils/helpers.py']
    """

    def __init__(self, config: TraversalConfig, order: TraversalOrder = TraversalOrder.PRE) -> None:
        self.config = config
        self.order = TraversalOrder(order)
        self.path_filter = PathFilter(config)

    def walk(self, root: PathType) -> Iterator[Entry]:
        """Walk root and yield every entry accepted by the filter.

        Args:
            root: Directory (or file) to walk. Returned paths keep its form.

        Yields:
            Accepted entries, in pre- or post-order. The root directory itself is
            never yielded.

        Raises:
            NotFoundError: If root does not exist.
            IOFailureError: If root cannot be inspected or listed, or an entry fails
                under ErrorAction.RAISE.
        """
        root_path = os.fspath(root)
        try:
            kind = classify(root_path)
        except OSError as e:
            raise IOFailureError(root_path, "inspect", e.strerror or str(e)) from e
        if kind is None:
            raise NotFoundError(root_path)

        root_entry = Entry(root_path, kind, 0)
        if not root_entry.is_dir:
            if self.path_filter.accepts(root_entry):
                yield root_entry
            return

        ancestors: Set[FileIdentifier] = set()
        root_id = FileIdentifier.of(root_path)
        if root_id is not None:
            ancestors.add(root_id)

        yield from self._walk_directory(root_path, 1, ancestors, is_root=True)

    def _walk_directory(
        self, path: str, depth: int, ancestors: Set[FileIdentifier], is_root: bool = False
    ) -> Iterator[Entry]:
        """Yield the accepted entries below one directory."""
        names = self._list_directory(path, is_root)
        if names is None:
            return

        if not self.config.skip_dots:
            for dot in DOT_NAMES:
                dot_entry = Entry(os.path.join(path, dot), EntryKind.DIRECTORY, depth)
                if self.path_filter.accepts(dot_entry):
                    yield dot_entry

        for name in names:
            child_path = os.path.join(path, name)
            try:
                kind = classify(child_path)
            except OSError as e:
                self._handle_failure(child_path, "inspect", e)
                continue
            if kind is None:
                logger.debug("Skipping %s: removed during traversal", child_path)
                continue

            entry = Entry(child_path, kind, depth)
            accepted = self.path_filter.accepts(entry)

            if entry.is_dir and self._may_descend(entry):
                yield from self._walk_subtree(entry, accepted, ancestors)
            elif accepted:
                yield entry

    def _walk_subtree(self, entry: Entry, accepted: bool, ancestors: Set[FileIdentifier]) -> Iterator[Entry]:
        """Yield a directory entry together with its accepted descendants."""
        identity = FileIdentifier.of(entry.path)
        if identity is not None and identity in ancestors:
            logger.debug("Not re-entering %s: symlink loop detected", entry.path)
            if accepted:
                yield entry
            return

        if identity is not None:
            ancestors.add(identity)
        try:
            descendants = self._walk_directory(entry.path, entry.depth + 1, ancestors)

            if self.config.leaves_only:
                buffered: List[Entry] = list(descendants)
                if accepted and all(d.is_dot for d in buffered):
                    yield entry
                yield from buffered
                return

            if accepted and self.order == TraversalOrder.PRE:
                yield entry
            yield from descendants
            if accepted and self.order == TraversalOrder.POST:
                yield entry
        finally:
            # Only directories on the current path count as ancestors
            if identity is not None:
                ancestors.discard(identity)

    def _may_descend(self, entry: Entry) -> bool:
        if not self.config.recursive:
            return False
        if entry.kind == EntryKind.SYMLINK_DIRECTORY and not self.config.follow_symlinks:
            return False
        return True

    def _list_directory(self, path: str, is_root: bool) -> Optional[List[str]]:
        """List a directory's children in sorted order, or None if it cannot be read."""
        try:
            return sorted(os.listdir(path))
        except FileNotFoundError:
            if is_root:
                raise NotFoundError(path) from None
            logger.debug("Skipping %s: removed during traversal", path)
            return None
        except OSError as e:
            if is_root:
                raise IOFailureError(path, "list", e.strerror or str(e)) from e
            self._handle_failure(path, "list", e)
            return None

    def _handle_failure(self, path: str, operation: str, error: OSError) -> None:
        if self.config.on_error == ErrorAction.RAISE:
            raise IOFailureError(path, operation, error.strerror or str(error)) from error
        logger.warning("Skipping %s: unable to %s: %s", path, operation, error)
