"""
Logging helpers for calclex.

Wraps the standard library logging so every logger lives under the
"calclex." namespace. The library never installs handlers.

Author: xwest
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the given name, prefixed with "calclex.".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == "calclex" or name.startswith("calclex.")):
        name = f"calclex.{name}"
    return logging.getLogger(name)
