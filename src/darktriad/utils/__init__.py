"""Utility modules for darktriad."""

from darktriad.utils.locale import gb_to_us
from darktriad.utils.logging import get_logger, setup_logging
from darktriad.utils.text import ngrams, tokenize

__all__ = [
    "get_logger",
    "setup_logging",
    "gb_to_us",
    "ngrams",
    "tokenize",
]
