"""Listing of the entries under a root, flat or as a tree.

The Enumerator is a thin layer over TreeWalker: it collects the paths of the
accepted entries, or arranges them in an anytree hierarchy for display.
"""

import logging
import os
from typing import Any, Dict, Iterator, List, Optional

from anytree import RenderTree

from dirtree.config import TraversalConfig, resolve_config
from dirtree.types import PathType
from dirtree.walker.entry import Entry, classify
from dirtree.walker.entry_node import EntryNode
from dirtree.walker.tree_walker import TreeWalker

logger = logging.getLogger(__name__)


class Enumerator:
    """Lists the entries of a tree that pass a traversal configuration.

    Attributes:
        config (TraversalConfig): Filter and walk-shape options.
        walker (TreeWalker): Pre-order walker built from config.

    Example:
        >>> enumerator = Enumerator(TraversalConfig(entry_type="file", include="*.txt"))  # doctest: +SKIP
        >>> enumerator.scan("assets/Fixture")  # doctest: +SKIP
        ['assets/Fixture/Nested/nested_file1.txt', 'assets/Fixture/file1.txt']
    """

    def __init__(self, config: TraversalConfig) -> None:
        self.config = config
        self.walker = TreeWalker(config)

    def iscan(self, root: PathType) -> Iterator[str]:
        """Lazily yield the path of every accepted entry under root.

        Raises:
            NotFoundError: If root does not exist (on first iteration).
        """
        for entry in self.walker.walk(root):
            yield entry.path

    def scan(self, root: PathType) -> List[str]:
        """Return the paths of every accepted entry under root.

        If root is a file, the result is that file alone, provided it passes the
        filter.

        Raises:
            NotFoundError: If root does not exist.
        """
        paths = list(self.iscan(root))
        logger.debug("Scanned %s: %d matching entries", os.fspath(root), len(paths))
        return paths

    def tree(self, root: PathType) -> EntryNode:
        """Arrange the accepted entries under root as a tree.

        Args:
            root: Directory (or file) to scan.

        Returns:
            The root node, named after root. Accepted entries hang below it at their
            relative positions. When root is a file, the returned node is the file's
            own node with no children, carrying the file's entry even when the
            filter rejected it.

        Raises:
            NotFoundError: If root does not exist.
        """
        root_path = os.fspath(root)
        entries = list(self.walker.walk(root_path))

        if len(entries) == 1 and entries[0].depth == 0:
            return EntryNode(root_path, entry=entries[0])
        if not entries and not os.path.isdir(root_path):
            kind = classify(root_path)
            if kind is not None:
                return EntryNode(root_path, entry=Entry(root_path, kind, 0))

        root_node = EntryNode(root_path)
        nodes: Dict[str, EntryNode] = {}
        for entry in entries:
            relative = entry.path[len(root_path) :].lstrip(os.sep)
            parent = root_node
            parts = relative.split(os.sep)
            for depth in range(1, len(parts)):
                key = os.sep.join(parts[:depth])
                node = nodes.get(key)
                if node is None:
                    node = nodes[key] = EntryNode(parts[depth - 1], parent=parent)
                parent = node
            existing = nodes.get(relative)
            if existing is not None:
                # Placeholder created earlier for a post-order or buffered directory
                existing.entry = entry
            else:
                nodes[relative] = EntryNode(parts[-1], parent=parent, entry=entry)
        return root_node


def render_tree(node: EntryNode) -> Iterator[str]:
    """Render a scan tree one line at a time.

    Directories are suffixed with "/" and symbolic links with " [symlink]".

    Yields:
        Lines of the tree representation, including the connecting lines.

    Example:
        >>> from dirtree.types import EntryKind
        >>> from dirtree.walker.entry import Entry
        >>> root = EntryNode("src")
        >>> _ = EntryNode("main.py", parent=root, entry=Entry("src/main.py", EntryKind.FILE, 1))
        >>> list(render_tree(root))
        ['src/', '└── main.py']
    """
    for prefix, _, current in RenderTree(node):
        suffix = ""
        if current.is_symlink:
            suffix = " [symlink]"
        elif current.is_dir:
            suffix = "/"
        yield f"{prefix}{current.name}{suffix}"


def _enumerator(config: Optional[TraversalConfig], options: Dict[str, Any]) -> Enumerator:
    return Enumerator(resolve_config(TraversalConfig, config, options))


def iscan(root: PathType, config: Optional[TraversalConfig] = None, **options: Any) -> Iterator[str]:
    """Lazily yield the paths under root that pass the given options.

    See TraversalConfig for the recognised options.
    """
    return _enumerator(config, options).iscan(root)


def scan(root: PathType, config: Optional[TraversalConfig] = None, **options: Any) -> List[str]:
    """List the paths under root that pass the given options.

    Args:
        root: Directory (or file) to scan.
        config: Optional ready-made configuration.
        **options: TraversalConfig fields, overriding config.

    Returns:
        Matching paths, in the form of root. Sort them if a stable order matters.

    Raises:
        NotFoundError: If root does not exist.
        TypeError: If an option is not recognised.

    Example:
        >>> sorted(scan("assets/Fixture", include="*.txt", exclude="*Nested*", entry_type="file"))  # doctest: +SKIP
        ['assets/Fixture/file1.txt']
    """
    return _enumerator(config, options).scan(root)


def scan_tree(root: PathType, config: Optional[TraversalConfig] = None, **options: Any) -> EntryNode:
    """Scan root and return the accepted entries as an anytree hierarchy."""
    return _enumerator(config, options).tree(root)
