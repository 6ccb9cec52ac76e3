"""
Logging setup for the terminal game.
Game output goes to stdout with print(); log records go to stderr so they
never mix with what the player reads.
"""

import logging
import sys
from typing import Union


def setup_logger(name: str = "mastermind", level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Set up a logger with a single stderr handler.

    Args:
        name: Name of the logger (the package logger covers every module).
        level: Logging level, as a number or a name like "DEBUG".

    Returns:
        Configured logger instance.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise RuntimeError(f"Unknown log level {level!r}.")
        level = resolved

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []  # Clear existing handlers

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
