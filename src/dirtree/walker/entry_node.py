"""Tree node wrapping the entries reported by a walk."""

from typing import Any, Optional

from anytree import Node

from dirtree.walker.entry import Entry


class EntryNode(Node):  # type: ignore
    """Node class representing one reported entry in a scan tree.

    Extends anytree.Node with the Entry that produced it. Directories that were not
    reported themselves (filtered out, or pruned by leaves_only) but lead to
    reported entries still appear as nodes with ``entry`` set to None, so every
    reported entry keeps its position in the hierarchy.

    Attributes:
        name (str): Basename of the node (the root node carries the walked path).
        parent (Optional[EntryNode]): The parent node in the tree.
        entry (Optional[Entry]): The reported entry, or None for a placeholder directory.
        children (tuple[EntryNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> from dirtree.types import EntryKind
        >>> root = EntryNode("root")
        >>> child = EntryNode("file.txt", parent=root, entry=Entry("root/file.txt", EntryKind.FILE, 1))
        >>> root.is_dir, child.is_dir
        (True, False)
        >>> child.entry_path
        'root/file.txt'
    """

    def __init__(
        self,
        name: str,
        parent: Optional["EntryNode"] = None,
        entry: Optional[Entry] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.entry = entry

    @property
    def is_dir(self) -> bool:
        # Placeholders only ever stand for directories
        return self.entry is None or self.entry.is_dir

    @property
    def is_symlink(self) -> bool:
        return self.entry is not None and self.entry.is_symlink

    @property
    def entry_path(self) -> Optional[str]:
        return self.entry.path if self.entry is not None else None
