"""
Filesystem Exceptions

Exceptions raised by the in-memory namespace: entry lookup, name
conflicts, cyclic moves and path resolution.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class FileSystemException(Exception):
    """
    Base exception for all namespace errors.

    Attributes:
        message: Human-readable error description
        path: Path of the entry involved (if applicable)
        error_code: Numeric error code for programmatic handling
        context: Additional details about the failure
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.error_code = error_code or 4000
        self.context = context or {}
        if path:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base


class EntryNotFoundError(FileSystemException):
    """
    No entry with the given name exists.

    Raised by directory removal and by path lookup when a
    segment is missing.

    Example:
        >>> raise EntryNotFoundError("/docs", name="readme")
    """

    def __init__(
        self,
        path: str,
        name: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if name is not None:
            ctx["name"] = name
        super().__init__(
            message=f"Entry not found: {name if name is not None else path}",
            path=path,
            error_code=4001,
            context=ctx
        )
        self.name = name


class NameConflictError(FileSystemException):
    """
    The target name is already taken by an incompatible entry.

    Example:
        >>> raise NameConflictError("/docs", name="readme", existing_type="DIRECTORY")
    """

    def __init__(
        self,
        path: str,
        name: str,
        existing_type: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["name"] = name
        if existing_type:
            ctx["existing_type"] = existing_type
        super().__init__(
            message=f"Name already in use: {name}",
            path=path,
            error_code=4002,
            context=ctx
        )
        self.name = name
        self.existing_type = existing_type


class DirectoryNotEmptyError(FileSystemException):
    """
    Directory is not empty.

    Raised when a relink would silently discard a directory that
    still holds entries.

    Example:
        >>> raise DirectoryNotEmptyError("/path/to/dir")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Directory not empty: {path}",
            path=path,
            error_code=4004,
            context=context
        )


class InvalidPathError(FileSystemException):
    """
    The path string is not an absolute path.

    Example:
        >>> raise InvalidPathError("relative/path", reason="must start with '/'")
    """

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Invalid path: {path!r}",
            path=path,
            error_code=4006,
            context=ctx
        )
        self.reason = reason


class NotADirectoryError(FileSystemException):
    """
    Path traversal tried to descend through a file.

    Example:
        >>> raise NotADirectoryError("/a", component="b")
    """

    def __init__(
        self,
        path: str,
        component: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if component:
            ctx["component"] = component
        super().__init__(
            message=f"Not a directory: {path}",
            path=path,
            error_code=4009,
            context=ctx
        )
        self.component = component


class CycleError(FileSystemException):
    """
    A directory cannot be moved into itself or one of its descendants.

    Example:
        >>> raise CycleError("/a", target="/a/b")
    """

    def __init__(
        self,
        path: str,
        target: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if target:
            ctx["target"] = target
        super().__init__(
            message=f"Cannot move directory into itself: {path}",
            path=path,
            error_code=4010,
            context=ctx
        )
        self.target = target


class InvalidNameError(FileSystemException):
    """
    The name cannot be used for an entry.

    "." and ".." are reserved for the implicit entries, the empty
    name is reserved for the root and "/" is the path separator.
    """

    def __init__(
        self,
        name: str,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["name"] = name
        super().__init__(
            message=f"Invalid entry name: {name!r}",
            path=path,
            error_code=4011,
            context=ctx
        )
        self.name = name


class RootRelinkError(FileSystemException):
    """A self-parented directory cannot be relinked."""

    def __init__(
        self,
        path: str = "/",
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message="Cannot relink a root directory",
            path=path,
            error_code=4012,
            context=context
        )
