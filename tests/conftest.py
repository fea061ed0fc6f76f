"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Set test environment variables
os.environ["DARKTRIAD_LOG_LEVEL"] = "WARNING"


TOY_TRIAD = {"note": -34.8, "america": -49.2, "capital": -133.9}
TOY_TEXT = "note america america note note capital"


@pytest.fixture
def make_store():
    """Build a LexiconStore from plain dicts; unnamed traits get empty lexica."""
    from darktriad.traits.lexicon import Lexicon, LexiconStore

    def _make(**lexica):
        return LexiconStore(
            **{
                name: Lexicon(lexica.get(name, {}), name=name)
                for name in LexiconStore._fields
            }
        )

    return _make


@pytest.fixture
def toy_store(make_store):
    """Toy lexica for the worked 'note america capital' example."""
    return make_store(
        triad=TOY_TRIAD,
        narcissism={"note": 1.0},
        machiavellianism={"america": 0.5, "note america": 2.0},
    )


@pytest.fixture
def toy_scorer(toy_store):
    """TraitScorer over the toy lexica and the bundled catalog."""
    from darktriad.traits.scorer import TraitScorer

    return TraitScorer(lexicons=toy_store)
