"""Pattern matchers used by include and exclude filters."""

from .base_matcher import BasePatternMatcher
from .gitwild_matcher import GitWildMatcher
from .glob_matcher import GlobMatcher

__all__ = [
    "BasePatternMatcher",
    "GitWildMatcher",
    "GlobMatcher",
]
