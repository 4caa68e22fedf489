"""
Logging Configuration
Sets up the logger for the calculator package from the log_level / log_file settings.
"""
import logging
import sys
from typing import Optional, Union

NAMESPACE = "Calculator"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def parse_level(level: Union[int, str]) -> int:
    """Turn a setting like "info" or 20 into a logging level.

    Raises ValueError for names logging does not know.
    """
    if isinstance(level, bool):
        raise ValueError(f"Unknown log level: {level!r}")
    if isinstance(level, int):
        return level
    number = logging.getLevelName(str(level).strip().upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return number


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the 'Calculator' loggers to stdout and, optionally, to log_file.

    Calling it again replaces the handlers of the previous call.
    Raises OSError if log_file cannot be opened.
    """
    level = parse_level(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        # Opened before touching the logger, so a bad path leaves the old setup in place
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logger = logging.getLogger(NAMESPACE)
    logger.setLevel(level)
    logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized (level %s, file %s).", logging.getLevelName(level), log_file or "-")
    return logger
