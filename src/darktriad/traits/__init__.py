"""Trait lexica and scoring."""

from darktriad.traits.catalog import (
    LexiconError,
    Trait,
    TraitCatalog,
    TraitDefinition,
    get_trait_catalog,
)
from darktriad.traits.lexicon import Lexicon, LexiconStore, get_lexicon_store
from darktriad.traits.scorer import TraitScorer, analyze, calc_lex

__all__ = [
    "LexiconError",
    "Trait",
    "TraitCatalog",
    "TraitDefinition",
    "get_trait_catalog",
    "Lexicon",
    "LexiconStore",
    "get_lexicon_store",
    "TraitScorer",
    "analyze",
    "calc_lex",
]
