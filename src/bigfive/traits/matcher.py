"""Lexicon matching against a counted token multiset."""

from typing import Dict, List, Mapping, Optional

from bigfive.traits.models import Match
from bigfive.utils.logging import get_logger

logger = get_logger(__name__)


def in_bounds(weight: float, min_weight: Optional[float], max_weight: Optional[float]) -> bool:
    """Check a weight against inclusive bounds; None means unbounded."""
    if min_weight is not None and weight < min_weight:
        return False
    if max_weight is not None and weight > max_weight:
        return False
    return True


def match_category(
    counts: Mapping[str, int],
    terms: Mapping[str, float],
    min_weight: Optional[float] = None,
    max_weight: Optional[float] = None,
) -> List[Match]:
    """
    Find the terms of one category that occur in the input.

    Args:
        counts: Term -> occurrence count for the input
        terms: Term -> weight for the category
        min_weight: Lowest weight kept (inclusive)
        max_weight: Highest weight kept (inclusive)

    Returns:
        Matches in lexicon order
    """
    matches = []
    for term, weight in terms.items():
        count = counts.get(term, 0)
        if count < 1 or not in_bounds(weight, min_weight, max_weight):
            continue
        matches.append(Match(term=term, count=count, weight=weight))
    return matches


def match_lexicon(
    counts: Mapping[str, int],
    lexicon: Mapping[str, Mapping[str, float]],
    min_weight: Optional[float] = None,
    max_weight: Optional[float] = None,
) -> Dict[str, List[Match]]:
    """
    Match every lexicon category against the input.

    Returns:
        Dict mapping trait ID to its matches, in lexicon order
    """
    matches = {
        trait_id: match_category(counts, terms, min_weight, max_weight)
        for trait_id, terms in lexicon.items()
    }
    logger.debug(
        "Matched "
        + ", ".join(f"{trait_id}={len(found)}" for trait_id, found in matches.items())
    )
    return matches
