"""
Centralized logging configuration for the checkout service.

Every module logs through the standard ``logging`` package; this module
installs the shared format and handler once, at application startup.
"""

import logging
import sys

from checkout_service.config import LOG_LEVEL


def setup_logging():
    """
    Configures the root logger.

    - Level: ``LOG_LEVEL`` from the environment (default INFO)
    - Format: timestamp, level, logger name, message
    - Output: stdout (container friendly)
    - Reduced verbosity for the Stripe SDK and SQLAlchemy
    """
    log_format = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    logging.getLogger("stripe").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)


def get_logger(name):
    """Returns the logger for a module, typically called with ``__name__``."""
    return logging.getLogger(name)
