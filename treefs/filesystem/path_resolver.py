"""
Path Resolver Module

Translates absolute path strings into live entries of the namespace.

Author: YSNRFD
Version: 1.0.0
"""

from typing import List, Optional, Tuple

from treefs.exceptions import (
    EntryNotFoundError,
    InvalidPathError,
    NotADirectoryError,
)
from .directory import Directory
from .node import Entry
from .root import get_root


class PathResolver:
    """
    Helpers for splitting and joining namespace paths.

    Empty segments are discarded, so repeated and trailing slashes
    are tolerated. "." and ".." are kept as ordinary segments; they
    resolve through the implicit directory entries.
    """

    SEPARATOR = '/'

    @staticmethod
    def is_absolute(path: str) -> bool:
        """Check if a path is absolute."""
        return path.startswith(PathResolver.SEPARATOR)

    @staticmethod
    def segments(path: str) -> List[str]:
        """Split a path into its non-empty segments."""
        return [s for s in path.split(PathResolver.SEPARATOR) if s]

    @staticmethod
    def join(*paths: str) -> str:
        """
        Join path components into an absolute path.

        Example:
            >>> PathResolver.join('/docs/', 'guides', 'intro')
            '/docs/guides/intro'
        """
        parts: List[str] = []
        for path in paths:
            parts.extend(PathResolver.segments(path))
        return PathResolver.SEPARATOR + PathResolver.SEPARATOR.join(parts)

    @staticmethod
    def split(path: str) -> Tuple[str, str]:
        """
        Split a path into (parent path, base name).

        The root path splits into ('/', '').
        """
        parts = PathResolver.segments(path)
        if not parts:
            return (PathResolver.SEPARATOR, '')
        return (PathResolver.join(*parts[:-1]), parts[-1])


def resolve_path(path: str, root: Optional[Directory] = None) -> Entry:
    """
    Resolve an absolute path to the entry it names.

    Args:
        path: Absolute path, e.g. '/docs/readme'
        root: Directory to start from (defaults to the global root)

    Returns:
        The File or Directory at ``path``; the root itself for '/'

    Raises:
        InvalidPathError: If ``path`` does not begin with '/'
        NotADirectoryError: If a file appears before the last segment
        EntryNotFoundError: If a segment does not exist
    """
    if not PathResolver.is_absolute(path):
        raise InvalidPathError(path, reason="path must begin with '/'")

    current: Entry = root if root is not None else get_root()

    for segment in PathResolver.segments(path):
        if not current.is_directory:
            raise NotADirectoryError(current.path, component=segment)

        next_entry = current.get_entry_named(segment)
        if next_entry is None:
            raise EntryNotFoundError(current.path, name=segment)

        current = next_entry

    return current


def resolve_parent(path: str, root: Optional[Directory] = None) -> Tuple[Directory, str]:
    """
    Resolve the directory that would contain ``path``.

    The last segment does not need to exist, which makes this the
    lookup to use before creating or relinking an entry by path.

    Returns:
        (parent directory, base name)

    Raises:
        InvalidPathError: If ``path`` is not absolute or names the root
        NotADirectoryError: If the parent path names a file
        EntryNotFoundError: If a parent segment does not exist
    """
    if not PathResolver.is_absolute(path):
        raise InvalidPathError(path, reason="path must begin with '/'")

    parent_path, name = PathResolver.split(path)
    if not name:
        raise InvalidPathError(path, reason="path has no final segment")

    parent = resolve_path(parent_path, root)
    if not parent.is_directory:
        raise NotADirectoryError(parent.path, component=name)

    return parent, name
