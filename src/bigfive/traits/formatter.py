"""Shape and sort matches for inspection."""

from typing import List, Sequence

from bigfive.traits.models import Match, MatchRow
from bigfive.traits.options import ENCODINGS, SORT_KEYS, resolve_choice
from bigfive.traits.scorer import round_half_away, term_value

_SORT_KEYS = {
    "freq": lambda row: row.count,
    "weight": lambda row: row.weight,
    "lex": lambda row: row.lexical_value,
}


def format_matches(
    matches: Sequence[Match],
    sort_by: str = "freq",
    wordcount: int = 0,
    places: int = 9,
    encoding: str = "binary",
) -> List[MatchRow]:
    """
    Build sorted rows of (term, count, weight, lexical_value).

    Sorting is descending; ties keep lexicon order. The input sequence is
    left untouched.

    Args:
        matches: Matches for one category
        sort_by: "freq", "weight" or "lex"
        wordcount: Word count of the input
        places: Decimal places for lexical values
        encoding: Encoding used for lexical values
    """
    sort_by = resolve_choice(sort_by, SORT_KEYS, "freq", "sort key")
    encoding = resolve_choice(encoding, ENCODINGS, "binary", "encoding")

    rows = [
        MatchRow(
            term=m.term,
            count=m.count,
            weight=m.weight,
            lexical_value=round_half_away(term_value(m, encoding, wordcount), places),
        )
        for m in matches
    ]
    rows.sort(key=_SORT_KEYS[sort_by], reverse=True)
    return rows
