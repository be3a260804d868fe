# pyimgproc/utils/logger.py
"""
Logging helpers.

Library modules call `get_library_logger(__name__)` and stay silent until the
embedding application configures logging. The command line uses
`create_console_logger`, which adds a stdout handler, a SUCCESS level and
colored level names on a terminal.
"""

import logging
import sys

SUCCESS_LEVEL_NUM = 25  # between INFO and WARNING
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")


def success(self, message, *args, **kwargs):
    """Log a message with severity 'SUCCESS'."""
    if self.isEnabledFor(SUCCESS_LEVEL_NUM):
        self._log(SUCCESS_LEVEL_NUM, message, args, **kwargs)


logging.Logger.success = success

_RESET = "\033[0m"
_LEVEL_COLORS = {
    "DEBUG": "\033[90m",
    "INFO": "\033[94m",
    "SUCCESS": "\033[92m",
    "WARNING": "\033[93m",
    "ERROR": "\033[91m",
    "CRITICAL": "\033[1;31m",
}

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s - %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Colors the level column, but only when the target stream is a TTY."""

    def __init__(self, fmt=LOG_FORMAT, datefmt=DATE_FORMAT, use_colors=True, stream=None):
        super().__init__(fmt, datefmt)
        self.stream = stream if stream is not None else sys.stdout
        self.use_colors = use_colors

    def format(self, record):
        message = super().format(record)
        isatty = getattr(self.stream, "isatty", None)
        if not self.use_colors or isatty is None or not isatty():
            return message

        color = _LEVEL_COLORS.get(record.levelname)
        if color is None:
            return message
        return message.replace(record.levelname, f"{color}{record.levelname}{_RESET}", 1)


def create_console_logger(name: str, level: int = logging.INFO, use_colors: bool = True, stream=None) -> logging.Logger:
    """
    Create a logger that prints to the console.

    Parameters
    ----------
    name : str
        Logger name. Child loggers (``pyimgproc.loader`` ...) propagate to it.
    level : int
        Initial logging level.
    use_colors : bool
        Color the level name when writing to a terminal.
    stream : file-like, optional
        Output stream, defaults to sys.stdout.

    Returns
    -------
    logging.Logger
        The configured logger. Calling again with the same name does not add
        a second handler.
    """
    logger = logging.getLogger(name)
    if any(isinstance(h.formatter, ColoredFormatter) for h in logger.handlers):
        return logger

    stream = stream if stream is not None else sys.stdout
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColoredFormatter(use_colors=use_colors, stream=stream))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_library_logger(name: str) -> logging.Logger:
    """Logger for library code: NullHandler only, output is up to the caller."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger
