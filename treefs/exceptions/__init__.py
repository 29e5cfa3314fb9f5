"""
treefs Exception Hierarchy

Architecture:
    FileSystemException (Base)
    ├── EntryNotFoundError
    ├── NameConflictError
    ├── DirectoryNotEmptyError
    ├── InvalidPathError
    ├── NotADirectoryError
    ├── CycleError
    ├── InvalidNameError
    └── RootRelinkError
    ConfigurationError (Base)
    ├── ConfigLoadError
    └── ConfigValidationError
"""

from .fs_exceptions import (
    FileSystemException,
    EntryNotFoundError,
    NameConflictError,
    DirectoryNotEmptyError,
    InvalidPathError,
    NotADirectoryError,
    CycleError,
    InvalidNameError,
    RootRelinkError,
)

from .config_exceptions import (
    ConfigurationError,
    ConfigLoadError,
    ConfigValidationError,
)

__all__ = [
    # Filesystem exceptions
    "FileSystemException",
    "EntryNotFoundError",
    "NameConflictError",
    "DirectoryNotEmptyError",
    "InvalidPathError",
    "NotADirectoryError",
    "CycleError",
    "InvalidNameError",
    "RootRelinkError",
    # Configuration exceptions
    "ConfigurationError",
    "ConfigLoadError",
    "ConfigValidationError",
]
