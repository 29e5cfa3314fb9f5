"""
treefs Bootstrap

One-shot initialization for an embedding application:
- Load configuration
- Initialize logging
- Create the global root directory

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional

from treefs.core.config_loader import ConfigLoader
from treefs.exceptions import ConfigValidationError
from treefs.filesystem import Directory, get_root
from treefs.logger import Logger, LogLevel, get_logger


def initialize(config_path: Optional[str] = None) -> Directory:
    """
    Prepare the namespace for use.

    Safe to call again: logging is reconfigured from the current
    configuration each time.

    Args:
        config_path: Optional JSON configuration file

    Returns:
        The global root directory

    Raises:
        ConfigLoadError: If the configuration file cannot be loaded
        ConfigValidationError: If the configuration is invalid
    """
    loader = ConfigLoader()
    if config_path:
        loader.load(config_path)

    log_config = loader.config.logging
    try:
        level = LogLevel.from_name(log_config.level)
    except ValueError as e:
        raise ConfigValidationError(str(e), key='logging.level') from e

    # Replace any handlers from an earlier call so the new settings apply
    Logger.shutdown()
    Logger.initialize(
        level=level,
        log_file=log_config.log_file,
        use_colors=log_config.use_colors,
        console_output=log_config.console_output,
        buffer_size=log_config.buffer_size
    )

    root = get_root()
    get_logger('bootstrap').info(
        "Namespace initialized",
        context={'config': config_path or 'defaults', 'level': level.name}
    )
    return root
