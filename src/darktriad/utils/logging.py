"""Logging configuration for darktriad."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Log output goes to stderr so JSON printed by the CLI stays clean
console = Console(stderr=True)

# Logger cache
_loggers: dict[str, logging.Logger] = {}


def setup_logging(level: str = "WARNING") -> None:
    """
    Set up logging configuration with rich formatting.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                show_path=False,
            )
        ],
    )
    logging.getLogger("darktriad").setLevel(log_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name, defaulting to "darktriad"

    Returns:
        Logger instance
    """
    if name is None:
        name = "darktriad"

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]
