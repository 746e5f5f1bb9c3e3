"""Package-wide logging for dictum.

All records go through the ``dictum`` logger. Modules ask for a child logger
with :func:`get_logger` so the source module shows up in ``%(name)s`` while the
level and handler are configured once, on the package logger, from
:data:`dictum.core.config.settings`.
"""

import logging
import sys
import typing as tp

from dictum.core.config import Settings, settings

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "logger", "setup_logger"]

ROOT_LOGGER_NAME = "dictum"


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str | None = None,
    format_string: str | None = None,
    config: Settings | None = None,
    stream: tp.TextIO | None = None,
) -> logging.Logger:
    """
    Attach a stream handler to a logger, once.

    Explicit ``level`` and ``format_string`` take precedence over ``config``,
    which defaults to the settings loaded from the environment. Calling this
    again for an already configured logger returns it untouched.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        config: Settings to read defaults from
        stream: Output stream, stdout when omitted

    Returns:
        The configured logger
    """
    config = config or settings
    configured = logging.getLogger(name)

    if configured.handlers:
        return configured

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt=format_string or config.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    configured.addHandler(handler)
    configured.setLevel((level or config.LOG_LEVEL).upper())
    configured.propagate = False

    return configured


def get_logger(module_name: str) -> logging.Logger:
    """Return the logger for a module inside the package."""
    if module_name == ROOT_LOGGER_NAME or module_name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(module_name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{module_name}")


logger = setup_logger()
