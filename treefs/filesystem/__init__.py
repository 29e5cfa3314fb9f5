"""
treefs Filesystem Module

The in-memory namespace:
- Files holding a string payload
- Directories with implicit "." and ".." entries
- Move/rename (relink) with cycle and overwrite checks
- Absolute path resolution
"""

from .node import Node, Entry, EntryType, IMPLICIT_ENTRIES, validate_name
from .file import File
from .directory import Directory
from .root import get_root, create_root
from .path_resolver import PathResolver, resolve_path, resolve_parent

__all__ = [
    # Node
    'Node',
    'Entry',
    'EntryType',
    'IMPLICIT_ENTRIES',
    'validate_name',
    # Entries
    'File',
    'Directory',
    # Root
    'get_root',
    'create_root',
    # Path Resolver
    'PathResolver',
    'resolve_path',
    'resolve_parent',
]
