"""
Logging configuration for headmeta
"""

import logging
import sys

LOGGER_NAME = "headmeta"


def setup_logging(level=logging.INFO) -> logging.Logger:
    """
    Configure logging for headmeta

    Log records go to stderr so rendered markup on stdout stays clean.

    Args:
        level: Logging level (default: INFO)

    Returns:
        logging.Logger: The configured package logger
    """
    base_logger = logging.getLogger(LOGGER_NAME)
    base_logger.setLevel(level)

    # Remove existing handlers
    base_logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    # Simple format, the logger name is implied
    formatter = logging.Formatter("%(levelname)8s %(message)s")
    handler.setFormatter(formatter)

    base_logger.addHandler(handler)

    return base_logger
