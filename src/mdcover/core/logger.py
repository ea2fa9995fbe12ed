"""
Logging configuration for mdcover.
Provides centralized logging setup with console output only.
"""

import logging
import sys
from typing import Optional
from .config import LOGGING_CONFIG


def setup_logging(
    level: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Set up logging configuration for the application.
    Console output only - no file logging.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Whether to enable console logging
        
    Returns:
        Configured package logger
    """
    log_level = getattr(logging, (level or LOGGING_CONFIG["LEVEL"]).upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    
    root_logger = logging.getLogger("mdcover")
    root_logger.setLevel(log_level)
    
    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    
    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(LOGGING_CONFIG["FORMAT"]))
        root_logger.addHandler(console_handler)
    
    root_logger.propagate = False
    
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.
    
    Args:
        name: Logger name (typically __name__)
        
    Returns:
        Logger instance
    """
    if not logging.getLogger("mdcover").handlers:
        setup_logging()
    
    if name == "mdcover" or name.startswith("mdcover."):
        return logging.getLogger(name)
    return logging.getLogger(f"mdcover.{name}")
