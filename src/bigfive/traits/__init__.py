"""Lexical Big Five trait scoring."""

from bigfive.traits.analyzer import TraitAnalyzer, analyze, assemble_result
from bigfive.traits.catalog import TRAIT_IDS, TraitCatalog, get_trait_catalog
from bigfive.traits.formatter import format_matches
from bigfive.traits.lexicon import Lexicon, get_lexicon
from bigfive.traits.matcher import match_lexicon
from bigfive.traits.models import FullOutput, Match, MatchRow, TraitScores
from bigfive.traits.options import AnalysisConfig
from bigfive.traits.scorer import round_half_away, score_matches
from bigfive.traits.tokens import TokenSet, aggregate_tokens

__all__ = [
    "TRAIT_IDS",
    "AnalysisConfig",
    "FullOutput",
    "Lexicon",
    "Match",
    "MatchRow",
    "TokenSet",
    "TraitAnalyzer",
    "TraitCatalog",
    "TraitScores",
    "aggregate_tokens",
    "analyze",
    "assemble_result",
    "format_matches",
    "get_lexicon",
    "get_trait_catalog",
    "match_lexicon",
    "round_half_away",
    "score_matches",
]
