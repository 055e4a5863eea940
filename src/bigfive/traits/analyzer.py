"""Big Five analysis pipeline: tokens, matches, scores, result."""

from typing import Any, Dict, List, Mapping, Optional, Union

from bigfive.errors import EmptyInputError
from bigfive.traits.catalog import TRAIT_IDS
from bigfive.traits.formatter import format_matches
from bigfive.traits.lexicon import Lexicon, get_lexicon
from bigfive.traits.matcher import match_lexicon
from bigfive.traits.models import FullOutput, Match, MatchOutput, TraitScores, empty_matches
from bigfive.traits.options import OUTPUTS, AnalysisConfig, resolve_choice
from bigfive.traits.scorer import score_matches
from bigfive.traits.tokens import TokenSet, aggregate_tokens
from bigfive.utils.locale import translate_gb_to_us
from bigfive.utils.logging import get_logger
from bigfive.utils.text import normalize_text

logger = get_logger(__name__)

AnalysisResult = Union[TraitScores, MatchOutput, FullOutput]


def assemble_result(
    output: str,
    scores: Optional[TraitScores] = None,
    matches: Optional[MatchOutput] = None,
) -> AnalysisResult:
    """
    Combine scores and formatted matches into the requested shape.

    Args:
        output: "lex", "matches" or "full"; unknown shapes fall back to "lex"
        scores: Trait scores (needed for "lex" and "full")
        matches: Formatted matches (needed for "matches" and "full")
    """
    output = resolve_choice(output, OUTPUTS, "lex", "output")
    scores = scores if scores is not None else TraitScores()
    matches = matches if matches is not None else empty_matches()

    if output == "matches":
        return matches
    if output == "full":
        return FullOutput(scores=scores, matches=matches)
    return scores


def null_result(output: str) -> AnalysisResult:
    """Neutral result for input with no tokens: zero scores, no matches."""
    return assemble_result(output, TraitScores(), empty_matches())


class TraitAnalyzer:
    """Score text against a Big Five lexicon."""

    def __init__(
        self,
        lexicon: Optional[Union[Lexicon, Mapping]] = None,
        config: Optional[AnalysisConfig] = None,
    ):
        """
        Initialize the analyzer.

        Args:
            lexicon: Lexicon to match against (uses the default if None).
                A plain mapping is validated into a Lexicon.
            config: Analysis options (defaults if None)
        """
        if lexicon is None:
            lexicon = get_lexicon()
        elif not isinstance(lexicon, Lexicon):
            lexicon = Lexicon.from_dict(lexicon)
        self.lexicon = lexicon
        self.config = config or AnalysisConfig()

    def prepare(self, text: Any) -> str:
        """Translate (for GB locale) and normalize the input."""
        if text is None:
            return ""
        if not isinstance(text, str):
            text = str(text)
        if self.config.locale == "GB":
            text = translate_gb_to_us(text)
        return normalize_text(text)

    def tokens(self, text: Any) -> TokenSet:
        """
        Build the counted token set for the input.

        Raises:
            EmptyInputError: If the input holds no tokens
        """
        return aggregate_tokens(
            self.prepare(text),
            ngram_sizes=self.config.ngrams,
            count_ngrams=self.config.wc_grams,
        )

    def matches(self, tokens: TokenSet) -> Dict[str, List[Match]]:
        """Match the lexicon against a token set."""
        return match_lexicon(
            tokens.counts,
            self.lexicon,
            self.config.min_weight,
            self.config.max_weight,
        )

    def scores(self, matches: Dict[str, List[Match]], tokens: TokenSet) -> TraitScores:
        """Score every trait from its matches."""
        return TraitScores(
            **{
                trait_id: score_matches(
                    matches.get(trait_id, []),
                    encoding=self.config.encoding,
                    wordcount=tokens.wordcount,
                    intercept=self.lexicon.intercept(trait_id),
                    places=self.config.places,
                    distinct_terms=tokens.distinct_terms,
                )
                for trait_id in TRAIT_IDS
            }
        )

    def formatted(self, matches: Dict[str, List[Match]], tokens: TokenSet) -> MatchOutput:
        """Sort and annotate every trait's matches."""
        return {
            trait_id: format_matches(
                matches.get(trait_id, []),
                sort_by=self.config.sort_by,
                wordcount=tokens.wordcount,
                places=self.config.places,
                encoding=self.config.encoding,
            )
            for trait_id in TRAIT_IDS
        }

    def analyze(self, text: Any) -> AnalysisResult:
        """
        Analyze a text.

        Args:
            text: Input text; None and token-free input give the neutral result

        Returns:
            TraitScores, MatchOutput or FullOutput depending on config.output
        """
        output = self.config.output

        try:
            tokens = self.tokens(text)
        except EmptyInputError:
            logger.debug("No tokens in input, returning neutral result")
            return null_result(output)

        matches = self.matches(tokens)

        scores = None
        formatted = None
        if output in ("lex", "full"):
            scores = self.scores(matches, tokens)
        if output in ("matches", "full"):
            formatted = self.formatted(matches, tokens)

        logger.debug(
            f"Analyzed {tokens.wordcount} words, {tokens.distinct_terms} distinct terms"
        )
        return assemble_result(output, scores, formatted)


def analyze(
    text: Any,
    options: Optional[AnalysisConfig] = None,
    lexicon: Optional[Union[Lexicon, Mapping]] = None,
    **overrides: Any,
) -> AnalysisResult:
    """
    Convenience function to analyze a text.

    Args:
        text: Input text
        options: Analysis options
        lexicon: Lexicon to use (default lexicon if None)
        **overrides: Option fields, e.g. encoding="frequency" or sortBy="lex"

    Returns:
        TraitScores, MatchOutput or FullOutput depending on the output option
    """
    if overrides:
        aliases = {
            f.alias: name for name, f in AnalysisConfig.model_fields.items() if f.alias
        }
        base = options.model_dump() if options is not None else {}
        base.update({aliases.get(key, key): value for key, value in overrides.items()})
        options = AnalysisConfig.model_validate(base)

    return TraitAnalyzer(lexicon=lexicon, config=options).analyze(text)
