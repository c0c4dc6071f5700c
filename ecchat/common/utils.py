"""
Utility functions for ecchat.
"""

import logging
import secrets
import time


def now_ms() -> int:
    """
    Get current Unix timestamp in milliseconds.

    Returns:
        Current timestamp in milliseconds
    """
    return int(time.time() * 1000)


def random_scalar(n: int) -> int:
    """
    Draw a scalar uniformly from [1, n-1].

    Args:
        n: Group order (must be greater than 1)

    Returns:
        Random integer in [1, n-1]
    """
    if n <= 1:
        raise ValueError(f"Group order must be greater than 1, got {n}")
    return secrets.randbelow(n - 1) + 1


def setup_logger(name: str = "ecchat", level=None) -> logging.Logger:
    """
    Attach a stream handler to the named logger once.

    Args:
        name: Logger name
        level: Logging level (defaults to ECCHAT_LOG_LEVEL from config)

    Returns:
        Configured logger
    """
    if level is None:
        from ecchat.config import LOG_LEVEL
        level = LOG_LEVEL

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
