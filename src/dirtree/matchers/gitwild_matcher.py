"""Implementation of pattern matching using .gitignore pattern syntax."""

import os
from typing import Dict

from pathspec import PathSpec

from .base_matcher import BasePatternMatcher


class GitWildMatcher(BasePatternMatcher):
    """Pattern matcher using .gitignore pattern syntax.

    This matcher uses the pathspec library to match paths the same way Git matches
    entries of a .gitignore file, which is handy when include/exclude patterns are
    taken from an existing ignore file.

    The patterns support standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Patterns without a slash matching a name at any depth
    - Directory-specific patterns (ending in /)
    - Double-asterisk matching (**)

    A single pattern is compiled once and cached on the matcher, since a walk asks
    for the same handful of patterns for every entry.

    Attributes:
        specs (Dict[str, PathSpec]): Compiled pattern matchers keyed by pattern.

    Example:
        >>> matcher = GitWildMatcher()
        >>> matcher.match("*.pyc", "project/pkg/module.pyc")
        True
        >>> matcher.match("build/", "project/build/output.txt")
        True
        >>> matcher.match("/build", "project/build")
        False
        >>> matcher.match_any(["build/"], "project/build", is_dir=True)
        True

    Note:
        Paths are converted to forward slashes before matching, so native Windows
        paths match the same patterns as POSIX ones.
    """

    def __init__(self) -> None:
        self.specs: Dict[str, PathSpec] = {}

    def match(self, pattern: str, path: str) -> bool:
        """Check if a path matches a .gitignore pattern.

        Args:
            pattern: A single .gitignore pattern (e.g. "*.pyc", "node_modules/").
            path: The path to check.

        Returns:
            bool: True if the pattern matches the path.

        Example:
            >>> GitWildMatcher().match("**/__pycache__/", "src/pkg/__pycache__/mod.pyc")
            True
        """
        spec = self.specs.get(pattern)
        if spec is None:
            spec = PathSpec.from_lines("gitwildmatch", [pattern])
            self.specs[pattern] = spec
        return spec.match_file(path.replace(os.sep, "/"))

    def match_directory(self, pattern: str, path: str) -> bool:
        """Check a directory path, letting patterns ending in "/" match the directory itself.

        Example:
            >>> GitWildMatcher().match_directory("build/", "project/build")
            True
        """
        if self.match(pattern, path):
            return True
        return not path.endswith(("/", os.sep)) and self.match(pattern, path + "/")

    def __repr__(self) -> str:
        return "GitWildMatcher()"
