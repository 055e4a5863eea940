"""Utility modules for bigfive."""

from bigfive.utils.locale import translate_gb_to_us
from bigfive.utils.logging import get_logger, setup_logging
from bigfive.utils.text import ngrams, normalize_text, tokenize

__all__ = [
    "get_logger",
    "setup_logging",
    "ngrams",
    "normalize_text",
    "tokenize",
    "translate_gb_to_us",
]
