"""
treefs - An in-memory hierarchical namespace

Files and directories addressed by absolute paths, with move/rename,
lookup and enumeration, for embedding in simulated environments.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .filesystem import (
    File,
    Directory,
    EntryType,
    get_root,
    create_root,
    resolve_path,
    resolve_parent,
)
from .bootstrap import initialize

__all__ = [
    'File',
    'Directory',
    'EntryType',
    'get_root',
    'create_root',
    'resolve_path',
    'resolve_parent',
    'initialize',
]
