"""
Logging setup for scripts that drive the library.

Library modules only create loggers via ``logging.getLogger(__name__)``;
handlers are attached here, on request.
"""

import logging
import sys


def setup_logging(name: str = "threshold_logic", level: str = "INFO") -> logging.Logger:
    """
    Set up logging with consistent formatting.

    Args:
        name: Logger name (the package name covers every module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(getattr(logging, level.upper()))

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
