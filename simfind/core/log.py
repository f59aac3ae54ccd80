"""Logging helpers shared by all simfind modules."""

import logging
from typing import Optional, Union

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

base_logger = logging.getLogger('simfind')


def set_logger(
    name: str,
    level: Union[int, str] = 'INFO',
    fmt: str = DEFAULT_FORMAT,
    datefmt: Optional[str] = None,
    remove_handlers: bool = False,
    propagate: bool = False
) -> logging.Logger:
    """
    Attach a stream handler to a logger and set its level.

    Args:
        name: Logger name, usually 'simfind' or one of its children
        level: Logging level name or number
        fmt: Log record format
        datefmt: Date format for %(asctime)s
        remove_handlers: Drop any handlers already attached to the logger
        propagate: Whether records also go to the parent loggers

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if remove_handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(handler)
    logger.propagate = propagate
    return logger
