"""
This module sets up console logging for the application.
"""
import logging
from typing import Optional


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configures the root logger to write to the console.
    """
    # Get the root logger
    logger = logging.getLogger()
    logger.setLevel((level or "INFO").upper())

    # Remove any existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logging.debug("Logging configured to use the console.")
