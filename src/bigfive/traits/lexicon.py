"""Weighted Big Five lexicon."""

import json
import math
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional

from pydantic import BaseModel, TypeAdapter, ValidationError

from bigfive.config import get_settings
from bigfive.errors import LexiconError
from bigfive.traits.catalog import TRAIT_IDS
from bigfive.utils.logging import get_logger

logger = get_logger(__name__)

# Reserved key holding a category's intercept in lexicon files
INTERCEPT_KEY = "_intercept"

DEFAULT_LEXICON_PATH = Path(__file__).parent / "lexicon.json"

_RAW_ADAPTER = TypeAdapter(Dict[str, Dict[str, float]])


def _finite(value: Any, what: str) -> float:
    """Convert a lexicon number to float, rejecting NaN and infinities."""
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise LexiconError(f"Non-numeric {what}") from e
    if not math.isfinite(number):
        raise LexiconError(f"Non-finite {what}: {number}")
    return number


class CategoryStats(BaseModel):
    """Summary of one lexicon category."""

    terms: int
    ngrams: int
    min_weight: Optional[float] = None
    max_weight: Optional[float] = None
    intercept: float = 0.0


class Lexicon(Mapping):
    """
    Read-only mapping of trait category to term weights.

    Every category in TRAIT_IDS is present; categories missing from the
    source data are empty. Term order follows the source data.
    """

    def __init__(
        self,
        categories: Mapping,
        intercepts: Optional[Mapping] = None,
    ):
        unknown = set(categories) - set(TRAIT_IDS)
        if unknown:
            raise LexiconError(f"Unknown trait categories: {sorted(unknown)}")

        frozen = {}
        for trait_id in TRAIT_IDS:
            terms = {}
            for term, weight in dict(categories.get(trait_id, {})).items():
                if not isinstance(term, str) or not term.strip():
                    raise LexiconError(f"Empty term in category {trait_id}")
                terms[term] = _finite(weight, f"weight for {term!r} in category {trait_id}")
            frozen[trait_id] = MappingProxyType(terms)
        self._categories = MappingProxyType(frozen)

        intercepts = dict(intercepts or {})
        unknown = set(intercepts) - set(TRAIT_IDS)
        if unknown:
            raise LexiconError(f"Intercepts for unknown categories: {sorted(unknown)}")
        self._intercepts = MappingProxyType(
            {
                trait_id: _finite(intercepts.get(trait_id, 0.0), f"intercept for {trait_id}")
                for trait_id in TRAIT_IDS
            }
        )

    def __getitem__(self, trait_id: str) -> Mapping:
        return self._categories[trait_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{k}={len(v)}" for k, v in self._categories.items())
        return f"Lexicon({sizes})"

    def intercept(self, trait_id: str) -> float:
        """Get the intercept for a category."""
        return self._intercepts.get(trait_id, 0.0)

    @classmethod
    def from_dict(cls, data: Any) -> "Lexicon":
        """
        Build a lexicon from decoded JSON data.

        Args:
            data: Mapping of category -> {term: weight}. A category may
                carry its intercept under the "_intercept" key.

        Returns:
            Lexicon instance

        Raises:
            LexiconError: If the data does not have the expected shape
        """
        try:
            raw = _RAW_ADAPTER.validate_python(data)
        except ValidationError as e:
            raise LexiconError(f"Malformed lexicon data: {e}") from e

        categories = {}
        intercepts = {}
        for trait_id, terms in raw.items():
            if INTERCEPT_KEY in terms:
                intercepts[trait_id] = terms.pop(INTERCEPT_KEY)
            categories[trait_id] = terms

        return cls(categories, intercepts)

    @classmethod
    def load_from_file(cls, path: Optional[Path] = None) -> "Lexicon":
        """
        Load lexicon from a JSON file.

        Args:
            path: Lexicon file. Defaults to the configured lexicon_path,
                then to the sample lexicon bundled with the package.

        Raises:
            LexiconError: If the file cannot be read or parsed
        """
        if path is None:
            path = get_settings().lexicon_path or DEFAULT_LEXICON_PATH

        logger.debug(f"Loading lexicon from: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise LexiconError(f"Cannot read lexicon file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise LexiconError(f"Invalid JSON in lexicon file {path}: {e}") from e

        lexicon = cls.from_dict(data)
        logger.info(
            f"Loaded lexicon with {sum(len(t) for t in lexicon.values())} terms "
            f"across {len(lexicon)} categories"
        )
        return lexicon

    def stats(self) -> Dict[str, CategoryStats]:
        """Get per-category term counts and weight ranges."""
        result = {}
        for trait_id, terms in self._categories.items():
            weights = list(terms.values())
            result[trait_id] = CategoryStats(
                terms=len(terms),
                ngrams=sum(1 for term in terms if " " in term),
                min_weight=min(weights) if weights else None,
                max_weight=max(weights) if weights else None,
                intercept=self._intercepts[trait_id],
            )
        return result


@lru_cache()
def get_lexicon() -> Lexicon:
    """Get cached default lexicon instance."""
    return Lexicon.load_from_file()
