"""Unused temporary path names for scratch and test isolation."""

import errno
import logging
import os
import tempfile
import uuid
from typing import Optional

from dirtree.types import PathType

logger = logging.getLogger(__name__)


def tempnam(base_dir: Optional[PathType] = None, prefix: str = "") -> str:
    """Return a path inside base_dir that does not exist yet.

    Nothing is created: call make() on the result when a directory is needed. The
    name is only guaranteed unused at the time it is generated; another process may
    still take it before the caller does.

    Args:
        base_dir: Directory to place the name in. Defaults to the platform's
            temporary directory.
        prefix: Leading part of the generated name.

    Returns:
        ``base_dir/<prefix><random suffix>``.

    Raises:
        FileExistsError: If no unused name was found after tempfile.TMP_MAX attempts.

    Example:
        >>> path = tempnam(None, "scratch")
        >>> path.startswith(os.path.join(tempfile.gettempdir(), "scratch"))
        True
    """
    directory = os.fspath(base_dir) if base_dir is not None else tempfile.gettempdir()

    for _ in range(tempfile.TMP_MAX):
        candidate = os.path.join(directory, f"{prefix}{uuid.uuid4().hex[:12]}")
        if not os.path.lexists(candidate):
            logger.debug("Generated temporary name %s", candidate)
            return candidate

    raise FileExistsError(errno.EEXIST, "No usable temporary name found", directory)
