"""Reduce category matches to a single lexical value."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Sequence

from bigfive.traits.models import Match
from bigfive.traits.options import ENCODINGS, resolve_choice
from bigfive.utils.logging import get_logger

logger = get_logger(__name__)


def round_half_away(value: float, places: int) -> float:
    """
    Round to a number of decimal places, halves away from zero.

    Works on the shortest repr of the float, so 0.125 rounds to 0.13 and
    -0.125 to -0.13 instead of following binary representation error.
    """
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        # Room for the integer digits of any finite float
        ctx.prec = 330 + places
        quantum = Decimal(1).scaleb(-places)
        # + 0.0 folds -0.0 into 0.0
        return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)) + 0.0


def term_value(match: Match, encoding: str, wordcount: int) -> float:
    """Contribution of a single match under the given encoding."""
    if encoding == "frequency":
        if wordcount <= 0:
            return 0.0
        return (match.count / wordcount) * match.weight
    return match.weight


def score_matches(
    matches: Sequence[Match],
    encoding: str = "binary",
    wordcount: int = 0,
    intercept: float = 0.0,
    places: int = 9,
    distinct_terms: int = 0,
) -> float:
    """
    Score one category.

    binary:    intercept + sum of weights, one per distinct term
    frequency: intercept + sum of (count / wordcount) * weight
    percent:   matched terms / distinct terms considered, in [0, 1]

    Args:
        matches: Matches for the category
        encoding: Encoding mode; unknown modes fall back to binary
        wordcount: Word count of the input (frequency only)
        intercept: Constant added to weight-based scores
        places: Decimal places to round to
        distinct_terms: Distinct terms in the input (percent only)

    Returns:
        Rounded score
    """
    encoding = resolve_choice(encoding, ENCODINGS, "binary", "encoding")

    if encoding == "percent":
        if distinct_terms <= 0:
            return 0.0
        return round_half_away(len(matches) / distinct_terms, places)

    if encoding == "frequency" and wordcount <= 0:
        return round_half_away(intercept, places)

    total = math.fsum(term_value(m, encoding, wordcount) for m in matches)
    return round_half_away(intercept + total, places)
