"""Shell-style glob matching against full paths."""

from fnmatch import fnmatchcase

from .base_matcher import BasePatternMatcher


class GlobMatcher(BasePatternMatcher):
    """Shell-style glob matcher applied to the whole path string.

    Wildcards are not anchored to path components: ``*`` also matches the path
    separator. ``*.txt`` therefore matches a text file at any depth and ``*Nested*``
    matches every path that has "Nested" anywhere in it. Matching is case-sensitive
    on every platform so that results do not change with the host.

    Example:
        >>> matcher = GlobMatcher()
        >>> matcher.match("*.txt", "assets/Fixture/Nested/Childs/child1.txt")
        True
        >>> matcher.match("*Nested*", "assets/Fixture/file1.txt")
        False
        >>> matcher.match("*.TXT", "file1.txt")
        False
    """

    def match(self, pattern: str, path: str) -> bool:
        return fnmatchcase(path, pattern)

    def __repr__(self) -> str:
        return "GlobMatcher()"
