"""
Node Module

Common identity behaviour shared by files and directories: a name,
an owning parent directory and the relink (move/rename) operation.

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

from treefs.core.config_loader import get_config
from treefs.exceptions import InvalidNameError

if TYPE_CHECKING:
    from .directory import Directory
    from .file import File


IMPLICIT_ENTRIES = ('.', '..')


class EntryType(Enum):
    """Kinds of entries a directory can hold."""
    FILE = 1
    DIRECTORY = 2


class Node(ABC):
    """
    Base class for every entry in the namespace.

    ``name`` and ``parent`` are read-only; they only change through
    :meth:`relink` so that directory collections stay consistent.
    """

    entry_type: EntryType

    def __init__(self, name: str, parent: Directory):
        self._name = name
        self._parent = parent

    @property
    def name(self) -> str:
        """Current name of the entry."""
        return self._name

    @property
    def parent(self) -> Directory:
        """Owning directory. A root directory is its own parent."""
        return self._parent

    @property
    def is_file(self) -> bool:
        return self.entry_type is EntryType.FILE

    @property
    def is_directory(self) -> bool:
        return self.entry_type is EntryType.DIRECTORY

    @property
    def is_root(self) -> bool:
        """True for a self-parented directory."""
        return self._parent is self

    @property
    def path(self) -> str:
        """Absolute path from the nearest self-parented ancestor."""
        parts = []
        node: Node = self
        while not node.is_root:
            parts.append(node.name)
            node = node.parent
        return '/' + '/'.join(reversed(parts))

    @abstractmethod
    def relink(self, new_parent: Directory, new_name: str) -> None:
        """
        Move this entry under ``new_parent`` with the name ``new_name``.

        Either completes fully or raises without changing the tree.
        """

    def to_dict(self) -> dict[str, Any]:
        """Convert the entry to a dictionary for display."""
        return {
            'name': self._name,
            'type': self.entry_type.name,
            'path': self.path,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path!r})"


def validate_name(name: str, directory: Optional[Directory] = None) -> None:
    """
    Reject names that would shadow the implicit entries or break paths.

    Controlled by ``namespace.reject_reserved_names``. ``directory`` is
    only used to report where the name was rejected.

    Raises:
        InvalidNameError: If the name cannot be attached to a directory
    """
    if not get_config().namespace.reject_reserved_names:
        return

    if name in IMPLICIT_ENTRIES or not name or '/' in name:
        raise InvalidNameError(
            name, path=directory.path if directory is not None else None
        )


Entry = Union['File', 'Directory']
