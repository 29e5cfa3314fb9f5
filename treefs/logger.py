"""
treefs Logger Module

Subsystem loggers for the namespace built on the standard logging module:
- Structured messages with contextual key/value data
- Console and optional file output
- In-memory event buffer for inspection by embedding applications

Author: YSNRFD
Version: 1.0.0
"""

import logging
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, Any, List


class LogLevel(IntEnum):
    """Log level enumeration with numeric values for comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        """Look up a level by its (case-insensitive) name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None


class LogFormatter(logging.Formatter):
    """
    Formatter producing ``[timestamp] LEVEL [subsystem] message {k=v}``.

    Level names are colour coded when writing to a terminal.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and self._supports_color()

    @staticmethod
    def _supports_color() -> bool:
        """Check if the terminal supports ANSI colors."""
        if not hasattr(sys.stdout, 'isatty'):
            return False
        return sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]

        level = record.levelname
        if self.use_colors and level in self.COLORS:
            level_display = f"{self.COLORS[level]}{level:8s}{self.RESET}"
        else:
            level_display = f"{level:8s}"

        components = [f"[{timestamp}]", level_display]

        if hasattr(record, 'subsystem'):
            components.append(f"[{record.subsystem}]")

        components.append(str(record.getMessage()))

        if getattr(record, 'context', None):
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            components.append(f"{{{context_str}}}")

        return " ".join(components)


class EventLogHandler(logging.Handler):
    """
    Keeps the most recent log records in memory.

    Lets an embedding application (shell, test harness) inspect what
    the namespace did without parsing console output.
    """

    def __init__(self, max_entries: int = 10000):
        super().__init__()
        self.max_entries = max_entries
        self._log_buffer: List[dict[str, Any]] = []
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        """Store log record in buffer."""
        try:
            log_entry = {
                'timestamp': record.created,
                'level': record.levelname,
                'message': record.getMessage(),
                'subsystem': getattr(record, 'subsystem', None),
                'context': getattr(record, 'context', {}),
            }

            with self._lock:
                self._log_buffer.append(log_entry)
                if len(self._log_buffer) > self.max_entries:
                    self._log_buffer = self._log_buffer[-self.max_entries:]
        except Exception:
            self.handleError(record)

    def get_logs(
        self,
        level: Optional[str] = None,
        subsystem: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Retrieve logs with optional filtering."""
        with self._lock:
            logs = self._log_buffer.copy()

        if level:
            logs = [l for l in logs if l['level'] == level]

        if subsystem:
            logs = [l for l in logs if l['subsystem'] == subsystem]

        return logs[-limit:]

    def clear(self) -> None:
        """Clear the log buffer."""
        with self._lock:
            self._log_buffer.clear()


class Logger:
    """
    Per-subsystem logger.

    One instance exists per subsystem name; each wraps the stdlib
    logger ``treefs.<subsystem>``. Handlers live on the ``treefs``
    parent logger and are installed once by :meth:`initialize`.

    Example:
        >>> log = Logger('filesystem')
        >>> log.debug("Relinked entry", context={'from': '/a', 'to': '/b'})
    """

    _instances: dict[str, 'Logger'] = {}
    _lock = threading.Lock()
    _initialized = False
    _event_handler: Optional[EventLogHandler] = None
    _handlers: List[logging.Handler] = []

    def __new__(cls, subsystem: str = 'treefs') -> 'Logger':
        """Get or create a logger for a subsystem."""
        with cls._lock:
            if subsystem not in cls._instances:
                instance = super().__new__(cls)
                instance._subsystem = subsystem
                instance._logger = logging.getLogger(f'treefs.{subsystem}')
                cls._instances[subsystem] = instance
            return cls._instances[subsystem]

    def __init__(self, subsystem: str = 'treefs'):
        # Level is inherited from the 'treefs' logger set up by initialize()
        pass

    @property
    def subsystem(self) -> str:
        return self._subsystem

    @classmethod
    def initialize(
        cls,
        level: int = LogLevel.INFO,
        log_file: Optional[str] = None,
        use_colors: bool = True,
        console_output: bool = True,
        buffer_size: int = 10000
    ) -> None:
        """
        Install handlers on the ``treefs`` logger.

        Calling this again after a successful call does nothing; use
        :meth:`shutdown` first to reconfigure.

        Args:
            level: Minimum log level to capture
            log_file: Optional file path for log output
            use_colors: Whether to use ANSI colors in console output
            console_output: Whether to write to stdout
            buffer_size: Number of records kept by the event buffer
        """
        with cls._lock:
            if cls._initialized:
                return

            root_logger = logging.getLogger('treefs')
            root_logger.setLevel(level)

            cls._event_handler = EventLogHandler(max_entries=buffer_size)
            cls._event_handler.setLevel(level)
            cls._handlers = [cls._event_handler]

            if console_output:
                console_handler = logging.StreamHandler(sys.stdout)
                console_handler.setLevel(level)
                console_handler.setFormatter(LogFormatter(use_colors=use_colors))
                cls._handlers.append(console_handler)

            if log_file:
                file_path = Path(log_file)
                file_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_file)
                file_handler.setLevel(level)
                file_handler.setFormatter(LogFormatter(use_colors=False))
                cls._handlers.append(file_handler)

            for handler in cls._handlers:
                root_logger.addHandler(handler)

            cls._initialized = True

    @classmethod
    def shutdown(cls) -> None:
        """Remove and close the handlers installed by :meth:`initialize`."""
        with cls._lock:
            root_logger = logging.getLogger('treefs')
            for handler in cls._handlers:
                root_logger.removeHandler(handler)
                handler.close()
            cls._handlers = []
            cls._event_handler = None
            cls._initialized = False

    @classmethod
    def get_event_logs(
        cls,
        level: Optional[str] = None,
        subsystem: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Get logs from the in-memory event buffer."""
        if cls._event_handler is None:
            return []
        return cls._event_handler.get_logs(level=level, subsystem=subsystem, limit=limit)

    def _log(
        self,
        level: int,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        extra = {
            'subsystem': self._subsystem,
            'context': context or {},
        }
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, context)

    def info(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, context)

    def warning(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, context)

    def is_enabled_for(self, level: int) -> bool:
        """Check whether a record at ``level`` would be handled."""
        return self._logger.isEnabledFor(level)


def get_logger(subsystem: str) -> Logger:
    """
    Get a logger for the specified subsystem.

    Args:
        subsystem: Name of the subsystem (e.g., 'filesystem', 'config')

    Returns:
        Logger instance for the subsystem
    """
    return Logger(subsystem)
