"""
Logging for the simulator.

Every module logs through a child of the "qsim" logger: gate counts and
measured bits at DEBUG, refused registers at ERROR. Importing qsim installs
nothing but a NullHandler, so a program that never calls setup_logging()
sees no output from the package.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

ROOT_LOGGER_NAME = "qsim"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level {level!r}")
        return resolved
    return level


def _build_handlers(log_file: Optional[Path]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    return handlers


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Route qsim's log records to stdout and optionally to a file.

    Calling it again replaces the handlers of the previous call.

    Args:
        level: Level number or name ("DEBUG" shows every gate and measurement)
        log_file: Optional file to append records to; parent dirs are created
        format_string: Record format (default: DEFAULT_FORMAT)

    Returns:
        The "qsim" logger
    """
    level = _resolve_level(level)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    for handler in _build_handlers(log_file):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger for one qsim module.

    Accepts a short name ("core") or a module path ("qsim.core"); both give
    the logger "qsim.core".
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
