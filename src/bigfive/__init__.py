"""
bigfive - Score text against weighted Big Five personality lexica.

Each of the five trait categories (Openness, Conscientiousness,
Extraversion, Agreeableness, Neuroticism) maps words and n-grams to
weights. A text is tokenized, matched against every category and
reduced to one lexical value per trait.

Usage:
    from bigfive import analyze

    scores = analyze("A big long string of text...", encoding="frequency")
    print(scores.O, scores.N)
"""

__version__ = "0.2.0"

from bigfive.config import Settings, get_settings
from bigfive.errors import AnalysisError, EmptyInputError, LexiconError
from bigfive.traits import (
    AnalysisConfig,
    FullOutput,
    Lexicon,
    Match,
    MatchRow,
    TraitAnalyzer,
    TraitScores,
    analyze,
    get_lexicon,
)

__all__ = [
    "AnalysisConfig",
    "AnalysisError",
    "EmptyInputError",
    "FullOutput",
    "Lexicon",
    "LexiconError",
    "Match",
    "MatchRow",
    "Settings",
    "TraitAnalyzer",
    "TraitScores",
    "analyze",
    "get_lexicon",
    "get_settings",
    "__version__",
]
