"""Logging helpers."""

import logging
from typing import Union


ROOT_LOGGER_NAME = "chatbatch"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the chatbatch root logger.
    
    Args:
        name: Usually ``__name__`` of the calling module
        
    Returns:
        Logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(level: Union[int, str] = "INFO") -> None:
    """Set the log level for all chatbatch loggers.
    
    Attaches a stream handler to the root chatbatch logger the first time
    it is called.
    
    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level
    """
    if isinstance(level, str):
        level = level.upper()
    
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root.addHandler(handler)
