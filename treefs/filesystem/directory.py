"""
Directory Module

Implements the directory entry: a name-keyed collection of files and
directories, always holding the implicit "." and ".." entries.

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple

from treefs.core.config_loader import get_config
from treefs.exceptions import (
    EntryNotFoundError,
    NameConflictError,
    DirectoryNotEmptyError,
    CycleError,
    InvalidNameError,
    RootRelinkError,
)
from treefs.logger import LogLevel, get_logger
from .node import Node, Entry, EntryType, IMPLICIT_ENTRIES, validate_name


logger = get_logger('filesystem')


class Directory(Node):
    """
    A directory in the namespace.

    Holds a mapping of name -> entry. ``"."`` always maps to the
    directory itself and ``".."`` to its current parent.

    A directory created without a parent is self-parented and acts
    as the root of its own tree.

    Example:
        >>> root = Directory('')
        >>> docs = Directory('docs', root)
        >>> docs.get_entry_named('..') is root
        True
    """

    entry_type = EntryType.DIRECTORY

    def __init__(self, name: str, parent: Optional[Directory] = None):
        super().__init__(name, parent if parent is not None else self)
        self._entries: dict[str, Entry] = {
            '.': self,
            '..': self._parent,
        }

        if parent is not None:
            parent.add_entry(self)
            if logger.is_enabled_for(LogLevel.DEBUG):
                logger.debug("Created directory", context={'path': self.path})

    # Collection operations

    def entries(self) -> List[Tuple[str, Entry]]:
        """Snapshot of all (name, entry) pairs, including "." and ".."."""
        return list(self._entries.items())

    def children(self) -> List[Tuple[str, Entry]]:
        """Snapshot of (name, entry) pairs without the implicit entries."""
        return [
            (name, entry) for name, entry in self._entries.items()
            if name not in IMPLICIT_ENTRIES
        ]

    def add_entry(self, entry: Entry) -> None:
        """
        Insert an entry under its current name.

        Raises:
            InvalidNameError: If the entry's name is reserved
            NameConflictError: If the name is already taken
        """
        name = entry.name
        validate_name(name, self)

        existing = self._entries.get(name)
        if existing is not None:
            raise NameConflictError(
                self.path,
                name=name,
                existing_type=existing.entry_type.name
            )

        self._entries[name] = entry

    def remove_entry_named(self, name: str) -> None:
        """
        Delete the entry called ``name``.

        Raises:
            InvalidNameError: If ``name`` is "." or ".."
            EntryNotFoundError: If there is no such entry
        """
        if name in IMPLICIT_ENTRIES:
            raise InvalidNameError(name, path=self.path)

        if name not in self._entries:
            raise EntryNotFoundError(self.path, name=name)

        self._detach(name)
        if logger.is_enabled_for(LogLevel.DEBUG):
            logger.debug("Removed entry", context={'path': self.path, 'name': name})

    def _detach(self, name: str) -> None:
        # Unchecked and silent; relink uses it between validation and re-attach
        del self._entries[name]

    def has_entry_named(self, name: str) -> bool:
        return name in self._entries

    def get_entry_named(self, name: str) -> Optional[Entry]:
        return self._entries.get(name)

    def is_empty(self) -> bool:
        """True when only "." and ".." remain."""
        return len(self._entries) == 2

    def child_count(self) -> int:
        return len(self._entries) - len(IMPLICIT_ENTRIES)

    def __contains__(self, name: object) -> bool:
        """Membership over child names, matching iteration."""
        return name not in IMPLICIT_ENTRIES and name in self._entries

    def __iter__(self) -> Iterator[Tuple[str, Entry]]:
        return iter(self.children())

    # Tree operations

    def is_subdirectory_of(self, directory: Directory) -> bool:
        """
        Check whether this directory lies under ``directory``.

        Walks up through parents until ``directory`` is found or a
        self-parented directory is reached. A directory counts as a
        subdirectory of itself.
        """
        node = self
        while node is not directory and node._parent is not node:
            node = node._parent
        return node is directory

    def relink(self, new_parent: Directory, with_name: str) -> None:
        """
        Move or rename this directory.

        An empty directory named ``with_name`` in ``new_parent`` is
        replaced; anything else occupying the name is an error. All
        checks run before the tree is touched.

        Raises:
            RootRelinkError: If this directory is self-parented
            InvalidNameError: If ``with_name`` is reserved
            CycleError: If ``new_parent`` is this directory or below it
            NameConflictError: If ``with_name`` is taken by a file
            DirectoryNotEmptyError: If ``with_name`` is a non-empty directory
        """
        if self.is_root and not get_config().namespace.allow_root_relink:
            raise RootRelinkError(self.path)

        validate_name(with_name, new_parent)

        if new_parent.is_subdirectory_of(self):
            raise CycleError(self.path, target=new_parent.path)

        existing = new_parent.get_entry_named(with_name)
        if existing is self:
            return
        if existing is not None:
            if existing.entry_type is EntryType.FILE:
                raise NameConflictError(
                    new_parent.path,
                    name=with_name,
                    existing_type=existing.entry_type.name
                )
            if not existing.is_empty():
                raise DirectoryNotEmptyError(existing.path)

        debug = logger.is_enabled_for(LogLevel.DEBUG)
        old_path = self.path if debug else None

        if existing is not None:
            new_parent._detach(with_name)
        if not self.is_root:
            self._parent._detach(self._name)
        self._name = with_name
        self._parent = new_parent
        self._entries['..'] = new_parent
        new_parent.add_entry(self)

        if debug:
            logger.debug(
                "Relinked directory",
                context={'from': old_path, 'to': self.path, 'replaced': existing is not None}
            )

    def walk(self) -> Iterator[Tuple[str, Directory]]:
        """
        Depth-first traversal of this directory and its subdirectories.

        Yields:
            (path, directory) pairs, starting with this directory
        """
        yield self.path, self
        for _, entry in self.children():
            if entry.entry_type is EntryType.DIRECTORY:
                yield from entry.walk()

    def to_dict(self) -> dict[str, Any]:
        info = super().to_dict()
        info['entries'] = self.child_count()
        return info
