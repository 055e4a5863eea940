"""Exceptions raised by bigfive."""


class AnalysisError(Exception):
    """Base class for bigfive errors."""


class EmptyInputError(AnalysisError):
    """The input produced no tokens to analyze."""


class LexiconError(AnalysisError, ValueError):
    """Lexicon data could not be read or is malformed."""
