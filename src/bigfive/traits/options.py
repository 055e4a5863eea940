"""Per-call analysis options."""

from typing import Any, FrozenSet, Iterable, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bigfive.utils.logging import get_logger

logger = get_logger(__name__)

ENCODINGS: Tuple[str, ...] = ("binary", "frequency", "percent")
OUTPUTS: Tuple[str, ...] = ("lex", "matches", "full")
SORT_KEYS: Tuple[str, ...] = ("freq", "weight", "lex")
LOCALES: Tuple[str, ...] = ("US", "GB")

DEFAULT_NGRAMS: FrozenSet[int] = frozenset({2, 3})


def resolve_choice(value: Any, choices: Tuple[str, ...], default: str, name: str) -> str:
    """
    Match a value against allowed choices, falling back to the default.

    Comparison ignores case. An unrecognized value is logged and replaced
    by the default rather than rejected.
    """
    if value is None:
        return default

    text = str(value).strip()
    for choice in choices:
        if text.lower() == choice.lower():
            return choice

    logger.warning(f"Unrecognized {name} {value!r}, using {default!r}")
    return default


class AnalysisConfig(BaseModel):
    """
    Options for a single analysis call.

    Instances are immutable. Field aliases (min, max, nGrams, wcGrams,
    sortBy) accept the camelCase option names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    encoding: Literal["binary", "frequency", "percent"] = "binary"
    min_weight: Optional[float] = Field(default=None, alias="min")
    max_weight: Optional[float] = Field(default=None, alias="max")
    ngrams: FrozenSet[int] = Field(default=DEFAULT_NGRAMS, alias="nGrams")
    wc_grams: bool = Field(default=False, alias="wcGrams")
    output: Literal["lex", "matches", "full"] = "lex"
    places: int = Field(default=9, ge=0)
    sort_by: Literal["freq", "weight", "lex"] = Field(default="freq", alias="sortBy")
    locale: Literal["US", "GB"] = "US"

    @field_validator("encoding", mode="before")
    @classmethod
    def _resolve_encoding(cls, v: Any) -> str:
        return resolve_choice(v, ENCODINGS, "binary", "encoding")

    @field_validator("output", mode="before")
    @classmethod
    def _resolve_output(cls, v: Any) -> str:
        return resolve_choice(v, OUTPUTS, "lex", "output")

    @field_validator("sort_by", mode="before")
    @classmethod
    def _resolve_sort_by(cls, v: Any) -> str:
        return resolve_choice(v, SORT_KEYS, "freq", "sort key")

    @field_validator("locale", mode="before")
    @classmethod
    def _resolve_locale(cls, v: Any) -> str:
        return resolve_choice(v, LOCALES, "US", "locale")

    @field_validator("ngrams", mode="before")
    @classmethod
    def _resolve_ngrams(cls, v: Any) -> FrozenSet[int]:
        if v is None or v is False:
            return frozenset()
        if v is True:
            return DEFAULT_NGRAMS
        if isinstance(v, int):
            v = [v]
        if isinstance(v, (str, bytes)) or not isinstance(v, Iterable):
            raise ValueError(f"nGrams must be a bool, an int or a set of ints, got {v!r}")

        sizes = set()
        for size in v:
            if isinstance(size, bool) or not isinstance(size, int):
                raise ValueError(f"n-gram sizes must be ints, got {size!r}")
            if size < 2:
                logger.warning(f"Ignoring n-gram size {size}, sizes start at 2")
                continue
            sizes.add(size)
        return frozenset(sizes)

    @model_validator(mode="after")
    def _check_bounds(self) -> "AnalysisConfig":
        if (
            self.min_weight is not None
            and self.max_weight is not None
            and self.min_weight > self.max_weight
        ):
            raise ValueError(
                f"min ({self.min_weight}) must not exceed max ({self.max_weight})"
            )
        return self
