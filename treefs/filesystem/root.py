"""
Root Module

The process-wide root directory and factory for isolated roots.

Author: YSNRFD
Version: 1.0.0
"""

import threading
from typing import Optional

from treefs.logger import get_logger
from .directory import Directory


ROOT_NAME = ""

_root: Optional[Directory] = None
_root_lock = threading.Lock()

logger = get_logger('filesystem')


def create_root() -> Directory:
    """
    Create a new, independent self-parented root directory.

    Useful for tests and for embedding several namespaces side by side.
    """
    return Directory(ROOT_NAME)


def get_root() -> Directory:
    """
    Get the process-wide root directory.

    Created on first use and kept for the lifetime of the process.
    """
    global _root
    with _root_lock:
        if _root is None:
            _root = create_root()
            logger.debug("Created global root directory")
        return _root
