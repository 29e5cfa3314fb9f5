"""
treefs Configuration Loader

Configuration management for the namespace:
- JSON configuration file loading
- Default value handling
- Runtime configuration updates via dot-notation keys

Author: YSNRFD
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Optional
import threading

from treefs.exceptions import ConfigLoadError, ConfigValidationError
from treefs.logger import LogLevel


@dataclass
class NamespaceConfig:
    """Namespace behaviour settings."""
    reject_reserved_names: bool = True
    allow_root_relink: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_file: Optional[str] = None
    console_output: bool = True
    use_colors: bool = True
    buffer_size: int = 10000


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the namespace.
    """
    namespace: NamespaceConfig = field(default_factory=NamespaceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _check_value(key: str, expected: Any, value: Any) -> None:
    """
    Check a value against the annotation of its configuration field.

    bool fields need a real bool, int fields a positive int and
    Optional[str] fields a string or None. ``logging.level`` must also
    name a known log level.

    Raises:
        ConfigValidationError: If the value does not fit
    """
    if expected is bool:
        valid = isinstance(value, bool)
    elif expected is int:
        valid = isinstance(value, int) and not isinstance(value, bool) and value > 0
    elif expected is str:
        valid = isinstance(value, str)
    elif expected == Optional[str]:
        valid = value is None or isinstance(value, str)
    elif is_dataclass(expected):
        valid = isinstance(value, expected)
    else:
        valid = False

    if not valid:
        raise ConfigValidationError(
            f"Invalid value for {key}: {value!r}", key=key
        )

    if key == 'logging.level':
        try:
            LogLevel.from_name(value)
        except ValueError as e:
            raise ConfigValidationError(str(e), key=key) from e


class ConfigLoader:
    """
    Configuration loader and manager.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('treefs.json')
        >>> config.namespace.reject_reserved_names
        True
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigLoadError: If the file cannot be read or parsed
            ConfigValidationError: If a section holds an unknown key or a
                value of the wrong type
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigLoadError(
                f"Configuration file not found: {config_path}",
                config_path=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(
                f"Invalid JSON in configuration file: {e}",
                config_path=config_path
            ) from e
        except OSError as e:
            raise ConfigLoadError(
                f"Cannot read configuration file: {e}",
                config_path=config_path
            ) from e

        if not isinstance(data, dict):
            raise ConfigLoadError(
                "Configuration root must be a JSON object",
                config_path=config_path
            )

        self._config = self._parse_config(data)
        self._loaded = True
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        if 'namespace' in data:
            config.namespace = self._parse_section(
                'namespace', data['namespace'], NamespaceConfig
            )

        if 'logging' in data:
            config.logging = self._parse_section(
                'logging', data['logging'], LoggingConfig
            )

        return config

    @staticmethod
    def _parse_section(name: str, section: Any, cls: type) -> Any:
        if not isinstance(section, dict):
            raise ConfigValidationError(
                f"Section '{name}' must be an object", key=name
            )

        types = {f.name: f.type for f in fields(cls)}
        for key, value in section.items():
            if key not in types:
                raise ConfigValidationError(
                    f"Invalid configuration key: {name}.{key}",
                    key=f"{name}.{key}"
                )
            _check_value(f"{name}.{key}", types[key], value)

        return cls(**section)

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'namespace.allow_root_relink')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Changes are not written back to disk.

        Raises:
            ConfigValidationError: If the key does not exist or the
                value has the wrong type
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        types = {f.name: f.type for f in fields(obj)} if is_dataclass(obj) else {}
        final_key = parts[-1]
        if final_key not in types:
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        _check_value(key, types[final_key], value)
        setattr(obj, final_key, value)

    def reset(self) -> None:
        """Restore the default configuration."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
