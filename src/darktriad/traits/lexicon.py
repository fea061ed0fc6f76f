"""Weighted word lexica for trait scoring."""

import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, NamedTuple, Optional, Union

from pydantic import TypeAdapter, ValidationError

from darktriad.config import get_settings
from darktriad.traits.catalog import (
    LexiconError,
    Trait,
    TraitCatalog,
    TraitDefinition,
    get_trait_catalog,
)
from darktriad.utils.logging import get_logger

logger = get_logger(__name__)

_LEXICON_FILE = TypeAdapter(Dict[str, Dict[str, float]])


class Lexicon(Mapping):
    """Read-only mapping of word or n-gram to weight for one trait."""

    def __init__(self, weights: Dict[str, float], name: str = ""):
        self.name = name
        self._weights = MappingProxyType(
            {word.lower(): float(weight) for word, weight in weights.items()}
        )

    def __getitem__(self, word: str) -> float:
        return self._weights[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"Lexicon(name={self.name!r}, words={len(self)})"

    @classmethod
    def load_from_file(cls, path: Path, category: str) -> "Lexicon":
        """
        Load a lexicon from a JSON file.

        The file holds a single object keyed by category, mapping each word
        to its weight: ``{"narcissism": {"word": 0.12, ...}}``.

        Raises:
            LexiconError: If the file is missing, malformed, or lacks the category
        """
        logger.debug(f"Loading lexicon '{category}' from: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = _LEXICON_FILE.validate_python(json.load(f))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise LexiconError(f"Could not load lexicon {path}: {e}") from e

        if category not in data:
            raise LexiconError(f"Lexicon {path} has no '{category}' category")

        lexicon = cls(data[category], name=category)
        logger.debug(f"Loaded {len(lexicon)} entries for '{category}'")
        return lexicon


class LexiconStore(NamedTuple):
    """The four trait lexica, one named field per trait."""

    triad: Lexicon
    narcissism: Lexicon
    machiavellianism: Lexicon
    psychopathy: Lexicon

    def get(self, trait: Union[Trait, str]) -> Lexicon:
        """Get the lexicon for a trait."""
        return getattr(self, Trait(trait).value)

    @classmethod
    def load(
        cls,
        catalog: Optional[TraitCatalog] = None,
        lexicon_dir: Optional[Path] = None,
    ) -> "LexiconStore":
        """Load every lexicon named by the trait catalog."""
        catalog = catalog or get_trait_catalog()
        if lexicon_dir is None:
            lexicon_dir = get_settings().lexicon_dir

        def _load(definition: TraitDefinition) -> Lexicon:
            return Lexicon.load_from_file(
                Path(lexicon_dir) / definition.lexicon_file, definition.category
            )

        store = cls(**{d.id.value: _load(d) for d in catalog.get_all_traits()})
        logger.info(
            "Loaded lexica: "
            + ", ".join(f"{t.value}={len(store.get(t))}" for t in Trait)
        )
        return store


@lru_cache()
def get_lexicon_store() -> LexiconStore:
    """Get the process-wide lexicon store, loading it on first use."""
    return LexiconStore.load()
