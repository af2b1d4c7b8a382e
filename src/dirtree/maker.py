"""Recursive directory creation ("mkdir -p") for one or many paths."""

import logging
import os
from typing import List, Sequence, Union

from dirtree.exceptions import CreateFailedError
from dirtree.types import PathType

logger = logging.getLogger(__name__)

DEFAULT_MODE = 0o755


def make(paths: Union[PathType, Sequence[PathType]], mode: int = DEFAULT_MODE) -> bool:
    """Create each path together with every missing ancestor.

    An already existing directory is not an error. Every directory created by the
    call, ancestors included, gets ``mode``. The process umask still applies, so
    callers relying on exact permission bits must control the umask themselves.

    Args:
        paths: A single path or a sequence of paths, processed in order.
        mode: Permission bits for the created directories. Defaults to 0o755.

    Returns:
        True once every path exists as a directory.

    Raises:
        CreateFailedError: On the first directory that cannot be created, or when a
            non-directory is in the way. Paths after the failing one are not processed.

    Example:
        >>> make(["build/cache/objects", "build/logs"])  # doctest: +SKIP
        True
    """
    if isinstance(paths, (str, os.PathLike)):
        paths = [paths]

    for path in paths:
        _make_one(os.fspath(path), mode)
    return True


def _make_one(path: str, mode: int) -> None:
    missing: List[str] = []
    current = os.path.normpath(path)
    while current and not os.path.isdir(current):
        if os.path.lexists(current):
            raise CreateFailedError(current, "Not a directory")
        missing.append(current)
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent

    for directory in reversed(missing):
        try:
            os.mkdir(directory, mode)
        except FileExistsError:
            # Created concurrently; fine as long as it is a directory
            if not os.path.isdir(directory):
                raise CreateFailedError(directory, "Not a directory") from None
        except OSError as e:
            raise CreateFailedError(directory, e.strerror or str(e)) from e
        else:
            logger.debug("Created directory %s (mode %o)", directory, mode)
