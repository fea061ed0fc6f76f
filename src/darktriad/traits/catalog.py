"""Trait catalog management."""

import json
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ValidationError

from darktriad.config import get_settings
from darktriad.utils.logging import get_logger

logger = get_logger(__name__)


class LexiconError(ValueError):
    """Raised when trait catalog or lexicon data cannot be loaded."""


class Trait(str, Enum):
    """The composite trait and its three sub-traits, in output order."""

    TRIAD = "triad"
    NARCISSISM = "narcissism"
    MACHIAVELLIANISM = "machiavellianism"
    PSYCHOPATHY = "psychopathy"


class TraitDefinition(BaseModel):
    """Definition of a scored trait."""

    id: Trait
    name: str
    description: str
    intercept: float
    lexicon_file: str
    # Top-level key of the lexicon JSON file
    category: str


class TraitCatalog:
    """Catalog of the four scored traits."""

    def __init__(self, traits: List[TraitDefinition]):
        self.traits: Dict[Trait, TraitDefinition] = {t.id: t for t in traits}
        missing = [t.value for t in Trait if t not in self.traits]
        if missing:
            raise LexiconError(f"Trait catalog is missing traits: {', '.join(missing)}")

    @classmethod
    def load_from_file(cls, path: Optional[Path] = None) -> "TraitCatalog":
        """Load trait catalog from JSON file."""
        if path is None:
            path = get_settings().catalog_path

        logger.debug(f"Loading trait catalog from: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            traits = [TraitDefinition(**t) for t in data["traits"]]
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValidationError) as e:
            raise LexiconError(f"Could not load trait catalog {path}: {e}") from e

        logger.debug(f"Loaded {len(traits)} traits from catalog")
        return cls(traits)

    def get_trait(self, trait: Union[Trait, str]) -> TraitDefinition:
        """Get a trait definition by enum member or ID."""
        return self.traits[Trait(trait)]

    def get_all_traits(self) -> List[TraitDefinition]:
        """Get all traits in output order."""
        return [self.traits[t] for t in Trait]

    def get_trait_ids(self) -> List[str]:
        """Get all trait IDs in output order."""
        return [t.value for t in Trait]

    def get_intercept(self, trait: Union[Trait, str]) -> float:
        """Get the calibration intercept for a trait."""
        return self.get_trait(trait).intercept


@lru_cache()
def get_trait_catalog() -> TraitCatalog:
    """Get cached trait catalog instance."""
    return TraitCatalog.load_from_file()
