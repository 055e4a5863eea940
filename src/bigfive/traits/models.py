"""Pydantic models for analysis inputs and results."""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from bigfive.traits.catalog import TRAIT_IDS


class Match(BaseModel):
    """A lexicon term found in the input."""

    model_config = ConfigDict(frozen=True)

    term: str
    count: int = Field(ge=1, description="Occurrences of the term in the input")
    weight: float = Field(description="Lexicon weight of the term")


class MatchRow(BaseModel):
    """A match with its contribution to the category score."""

    model_config = ConfigDict(frozen=True)

    term: str
    count: int = Field(ge=1)
    weight: float
    lexical_value: float = Field(description="Per-term contribution under the encoding")

    def as_tuple(self) -> tuple:
        """Return the row as (term, count, weight, lexical_value)."""
        return (self.term, self.count, self.weight, self.lexical_value)


class TraitScores(BaseModel):
    """Score for each of the five trait categories."""

    model_config = ConfigDict(frozen=True)

    O: float = 0.0
    C: float = 0.0
    E: float = 0.0
    A: float = 0.0
    N: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        """Scores keyed by trait ID, in O, C, E, A, N order."""
        return {trait_id: getattr(self, trait_id) for trait_id in TRAIT_IDS}


# Formatted matches keyed by trait ID
MatchOutput = Dict[str, List[MatchRow]]


class FullOutput(BaseModel):
    """Scores together with the matches that produced them."""

    model_config = ConfigDict(frozen=True)

    scores: TraitScores
    matches: Dict[str, List[MatchRow]] = Field(default_factory=dict)


def empty_matches() -> MatchOutput:
    """Match output with an empty list for every trait."""
    return {trait_id: [] for trait_id in TRAIT_IDS}
