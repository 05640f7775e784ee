"""
Pythonic library configuration.

Holds the default character sets and sentinels shared by the string
functions, plus an opt-in logging setup. The library never installs
handlers on import; applications call :func:`configure_logging`.
"""

import logging

# Characters removed by strip/lstrip/rstrip when no set is given
WHITESPACE = " \t\n\r\v\f"

# Characters that end a line for splitlines ("\r\n" counts as one boundary)
LINE_BREAKS = "\n\r"

# Returned by find/rfind when there is no match
NPOS = -1

LOGGER_NAME = "pythonic"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ("debug", "info", "warning", "error")


def configure_logging(level: str = "info") -> logging.Logger:
    """
    Configure the root handler and set the Pythonic logger level.

    Args:
        level: One of ``debug``, ``info``, ``warning`` or ``error``

    Returns:
        The ``pythonic`` logger

    Raises:
        ValueError: If the level name is not recognised
    """
    if level.lower() not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}', expected one of: {', '.join(LOG_LEVELS)}")

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))
    return logger
