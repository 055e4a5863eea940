"""Text processing utilities for bigfive."""

import re
import unicodedata
from typing import List

# Word characters, with apostrophes allowed inside a word ("don't", "o'clock")
_TOKEN_PATTERN = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")


def normalize_text(text: str) -> str:
    """
    Normalize text before tokenization.

    Args:
        text: Raw text

    Returns:
        Lower-cased text with normalized unicode and collapsed whitespace
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKC", text)

    # Drop control characters; whitespace controls become plain spaces
    text = "".join(
        " " if char in "\n\r\t" else char
        for char in text
        if unicodedata.category(char)[0] != "C" or char in "\n\r\t"
    )

    text = re.sub(r"\s+", " ", text)

    return text.lower().strip()


def tokenize(text: str) -> List[str]:
    """
    Split text into word tokens.

    Args:
        text: Normalized text

    Returns:
        Ordered list of tokens, empty when the text holds no words
    """
    if not text:
        return []

    return [token.replace("’", "'") for token in _TOKEN_PATTERN.findall(text)]


def ngrams(text: str, n: int) -> List[str]:
    """
    Generate space-joined n-grams from a string.

    Args:
        text: Normalized text
        n: Window size

    Returns:
        Ordered list of n-grams, empty if the text has fewer than n tokens
    """
    if n < 1:
        return []

    tokens = tokenize(text)
    return [" ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)]
