"""
File Module

A leaf entry holding a flat string payload.

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from treefs.exceptions import NameConflictError
from treefs.logger import LogLevel, get_logger
from .node import Node, EntryType, validate_name

if TYPE_CHECKING:
    from .directory import Directory


logger = get_logger('filesystem')


class File(Node):
    """
    A file in the namespace.

    Constructing a file attaches it to ``parent`` immediately.
    ``contents`` is a plain attribute and may be replaced freely.

    Example:
        >>> readme = File('readme', root)
        >>> readme.contents = 'hi'
    """

    entry_type = EntryType.FILE

    def __init__(self, name: str, parent: Directory, contents: str = ""):
        super().__init__(name, parent)
        self.contents = contents
        parent.add_entry(self)
        if logger.is_enabled_for(LogLevel.DEBUG):
            logger.debug("Created file", context={'path': self.path})

    def relink(self, new_parent: Directory, with_name: str) -> None:
        """
        Move or rename this file.

        An existing file named ``with_name`` in ``new_parent`` is
        overwritten; an existing directory is a conflict.

        Raises:
            InvalidNameError: If ``with_name`` is reserved
            NameConflictError: If ``with_name`` is taken by a directory
        """
        validate_name(with_name, new_parent)

        existing = new_parent.get_entry_named(with_name)
        if existing is self:
            return
        if existing is not None and existing.is_directory:
            raise NameConflictError(
                new_parent.path,
                name=with_name,
                existing_type=existing.entry_type.name
            )

        debug = logger.is_enabled_for(LogLevel.DEBUG)
        old_path = self.path if debug else None

        if existing is not None:
            new_parent._detach(with_name)
        self._parent._detach(self._name)
        self._name = with_name
        self._parent = new_parent
        new_parent.add_entry(self)

        if debug:
            logger.debug(
                "Relinked file",
                context={'from': old_path, 'to': self.path, 'overwrote': existing is not None}
            )

    def to_dict(self) -> dict[str, Any]:
        info = super().to_dict()
        info['size'] = len(self.contents)
        return info
