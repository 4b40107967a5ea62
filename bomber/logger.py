"""
Logging setup for grid bomber
"""
import logging
import sys


def setup_logging(level="INFO"):
    """Attach a stdout handler to the package logger (safe to call twice)"""
    logger = logging.getLogger("bomber")
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(name)s] %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(handler)

    return logger
