"""Token aggregation: unigrams plus n-grams as one counted multiset."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from bigfive.errors import EmptyInputError
from bigfive.utils.logging import get_logger
from bigfive.utils.text import ngrams as generate_ngrams
from bigfive.utils.text import tokenize as default_tokenize

logger = get_logger(__name__)


@dataclass
class TokenSet:
    """Counted terms from one input string."""

    counts: Counter
    wordcount: int
    skipped_sizes: List[int] = field(default_factory=list)

    @property
    def distinct_terms(self) -> int:
        """Number of distinct terms (unigrams and n-grams)."""
        return len(self.counts)


def aggregate_tokens(
    text: str,
    ngram_sizes: Optional[Iterable[int]] = None,
    count_ngrams: bool = False,
    tokenizer: Callable[[str], List[str]] = default_tokenize,
    ngrammer: Callable[[str, int], List[str]] = generate_ngrams,
) -> TokenSet:
    """
    Tokenize text and count every unigram and requested n-gram.

    Args:
        text: Normalized (lower-cased, trimmed) input
        ngram_sizes: Window sizes to generate, or None for unigrams only
        count_ngrams: Whether n-grams count toward the word count
        tokenizer: Tokenizer collaborator
        ngrammer: N-gram collaborator, called with the original text

    Returns:
        TokenSet with term counts and word count

    Raises:
        EmptyInputError: If the tokenizer produces no tokens
    """
    tokens = list(tokenizer(text) or [])
    if not tokens:
        raise EmptyInputError("No tokens in input")

    # Word count is fixed before n-grams are added
    baseline = len(tokens)

    skipped = []
    for n in sorted(set(ngram_sizes or ())):
        if baseline < n:
            logger.warning(
                f"Skipping {n}-grams: input has only {baseline} "
                f"token{'s' if baseline != 1 else ''}"
            )
            skipped.append(n)
            continue
        tokens.extend(ngrammer(text, n))

    wordcount = len(tokens) if count_ngrams else baseline

    return TokenSet(counts=Counter(tokens), wordcount=wordcount, skipped_sizes=skipped)
