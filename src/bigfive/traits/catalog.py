"""Big Five trait catalog."""

from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

# Category keys, in output order
TRAIT_IDS: Tuple[str, ...] = ("O", "C", "E", "A", "N")


class TraitDefinition(BaseModel):
    """Definition of a Big Five trait category."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str


_DEFINITIONS: List[TraitDefinition] = [
    TraitDefinition(
        id="O",
        name="Openness",
        description="Curiosity, imagination and appetite for new experience",
    ),
    TraitDefinition(
        id="C",
        name="Conscientiousness",
        description="Organisation, dependability and self-discipline",
    ),
    TraitDefinition(
        id="E",
        name="Extraversion",
        description="Sociability, assertiveness and positive energy",
    ),
    TraitDefinition(
        id="A",
        name="Agreeableness",
        description="Warmth, cooperation and trust toward others",
    ),
    TraitDefinition(
        id="N",
        name="Neuroticism",
        description="Tendency toward anxiety, anger and low mood",
    ),
]


class TraitCatalog:
    """Catalog of the five trait categories."""

    def __init__(self, traits: List[TraitDefinition]):
        self.traits: Dict[str, TraitDefinition] = {t.id: t for t in traits}

    def get_trait(self, trait_id: str) -> Optional[TraitDefinition]:
        """Get a trait by ID."""
        return self.traits.get(trait_id)

    def get_trait_ids(self) -> List[str]:
        """Get all trait IDs."""
        return list(self.traits.keys())

    def get_name(self, trait_id: str) -> str:
        """Get the display name for a trait ID, falling back to the ID."""
        trait = self.get_trait(trait_id)
        return trait.name if trait else trait_id


@lru_cache()
def get_trait_catalog() -> TraitCatalog:
    """Get cached trait catalog instance."""
    return TraitCatalog(_DEFINITIONS)
