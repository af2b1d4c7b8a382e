"""Traversal, copy and removal configuration.

Each operation builds one immutable configuration object per call. Options can be
given as a ready-made config, as keyword arguments, or both, in which case the
keywords override the matching fields of the config.
"""

import dataclasses
import shutil
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Type, TypeVar, Union

from dirtree.matchers.base_matcher import BasePatternMatcher
from dirtree.matchers.glob_matcher import GlobMatcher
from dirtree.types import EntryType, ErrorAction

Patterns = Union[str, Sequence[str], None]
CopyHandler = Callable[[str, str], None]

ConfigT = TypeVar("ConfigT", bound="TraversalConfig")


def _as_patterns(value: Patterns) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class TraversalConfig:
    """Filter and walk-shape options shared by scan, copy and remove.

    Attributes:
        recursive: Descend below the root's direct children.
        entry_type: Restrict results to files or directories. Accepts the
            strings "any", "file" and "directory" too.
        skip_dots: Suppress the "." and ".." self/parent entries.
        follow_symlinks: Descend into directories reached through a symlink.
        leaves_only: Report a directory only when nothing below it matched.
        include: Glob pattern(s) the full path must match. Stored as a tuple.
        exclude: Glob pattern(s) rejecting a full path. Wins over include.
        matcher: Pattern matcher used for include and exclude.
        on_error: What to do when an individual entry fails.

    Example:
        >>> config = TraversalConfig(entry_type="file", include="*.txt")
        >>> config.entry_type
        <EntryType.FILE: 'file'>
        >>> config.include
        ('*.txt',)
    """

    recursive: bool = True
    entry_type: EntryType = EntryType.ANY
    skip_dots: bool = True
    follow_symlinks: bool = True
    leaves_only: bool = False
    include: Patterns = ()
    exclude: Patterns = ()
    matcher: BasePatternMatcher = field(default_factory=GlobMatcher)
    on_error: ErrorAction = ErrorAction.RAISE

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "entry_type", EntryType(self.entry_type))
        object.__setattr__(self, "on_error", ErrorAction(self.on_error))
        object.__setattr__(self, "include", _as_patterns(self.include))
        object.__setattr__(self, "exclude", _as_patterns(self.exclude))


def _copy_file(source: str, target: str) -> None:
    shutil.copyfile(source, target)


@dataclass(frozen=True)
class CopyConfig(TraversalConfig):
    """Options for copying a tree.

    Attributes:
        copy_handler: Called as ``copy_handler(source_path, target_path)`` for every
            file. Defaults to a byte-for-byte copy. A handler is free to write
            somewhere else, e.g. ``target_path + ".bak"``.
    """

    copy_handler: CopyHandler = _copy_file


@dataclass(frozen=True)
class RemoveConfig(TraversalConfig):
    """Options for removing a tree.

    Symlinks are not followed by default so that removing a tree never empties
    a directory that merely has a link pointing at it.
    """

    follow_symlinks: bool = False


def resolve_config(
    config_cls: Type[ConfigT], config: Optional[TraversalConfig] = None, options: Optional[Mapping[str, Any]] = None
) -> ConfigT:
    """Build the configuration for one call.

    Args:
        config_cls: Configuration class the operation works with.
        config: Optional configuration given by the caller. A plain TraversalConfig
            is widened to config_cls, keeping every field they share.
        options: Keyword options overriding fields of config.

    Returns:
        An instance of config_cls.

    Raises:
        TypeError: If an option name is not a field of config_cls.

    Example:
        >>> resolve_config(RemoveConfig, None, {"include": "*.log"}).follow_symlinks
        False
        >>> resolve_config(TraversalConfig, TraversalConfig(recursive=False), {"skip_dots": False}).recursive
        False
    """
    options = dict(options or {})
    names = {f.name for f in dataclasses.fields(config_cls)}
    unknown = sorted(set(options) - names)
    if unknown:
        raise TypeError(f"Unknown option(s) for {config_cls.__name__}: {', '.join(unknown)}")

    if config is None:
        return config_cls(**options)
    if not isinstance(config, config_cls):
        shared = {f.name: getattr(config, f.name) for f in dataclasses.fields(config) if f.name in names}
        return config_cls(**{**shared, **options})
    if options:
        return dataclasses.replace(config, **options)
    return config
