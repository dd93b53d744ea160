import logging

from rich.logging import RichHandler

LOGGER_NAME = "modechoice"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_to_console(level=None) -> logging.Logger:
    """Send modechoice log messages to the console, formatted by rich."""
    logger = logging.getLogger(LOGGER_NAME)
    if level is not None:
        logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(show_path=False))
    return logger


def log_to_file(filename, level=None) -> logging.Logger:
    """Append modechoice log messages to a file."""
    logger = logging.getLogger(LOGGER_NAME)
    if level is not None:
        logger.setLevel(level)
    handler = logging.FileHandler(filename)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(handler)
    return logger
