"""
treefs Core Module

Configuration shared by all namespace components.
"""

from .config_loader import (
    ConfigLoader,
    Config,
    NamespaceConfig,
    LoggingConfig,
    get_config,
)

__all__ = [
    'ConfigLoader',
    'Config',
    'NamespaceConfig',
    'LoggingConfig',
    'get_config',
]
