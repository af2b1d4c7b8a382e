from abc import ABC, abstractmethod
from typing import Iterable


class BasePatternMatcher(ABC):
    """
    Abstract base class defining the interface for include/exclude pattern matching.

    A matcher decides whether one pattern matches one candidate path. Paths handed to
    a matcher are the full paths produced by the walk (the root as given, joined with
    each entry name using the native separator), never bare basenames.

    Example:
        >>> from dirtree.matchers.glob_matcher import GlobMatcher
        >>> matcher = GlobMatcher()
        >>> matcher.match("*.txt", "root/nested/child.txt")
        True
        >>> matcher.match_any(["*.xml", "*.php"], "root/index.html")
        False
    """

    @abstractmethod
    def match(self, pattern: str, path: str) -> bool:
        """
        Determine if a path matches a single pattern.

        Args:
            pattern (str): The pattern, in the syntax of the concrete matcher.
            path (str): The full path of the entry being filtered.

        Returns:
            bool: True if the path matches the pattern.
        """
        pass

    def match_directory(self, pattern: str, path: str) -> bool:
        """
        Determine if a directory path matches a single pattern.

        Matchers whose syntax distinguishes directories (such as a trailing "/")
        override this. By default a directory matches like any other path.
        """
        return self.match(pattern, path)

    def match_any(self, patterns: Iterable[str], path: str, is_dir: bool = False) -> bool:
        """
        Determine if a path matches at least one of several patterns.

        Args:
            patterns: Patterns to try, in order. Evaluation stops at the first match.
            path (str): The full path of the entry being filtered.
            is_dir (bool): Whether the entry is a directory (or a link to one).

        Returns:
            bool: True if any pattern matches, False if none does (or none is given).
        """
        if is_dir:
            return any(self.match_directory(pattern, path) for pattern in patterns)
        return any(self.match(pattern, path) for pattern in patterns)
