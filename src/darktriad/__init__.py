"""
darktriad - Analyse the dark triad of a string.

Scores text against weighted word lexica for the dark triad and its three
sub-traits (narcissism, Machiavellianism and psychopathy), after
Preotiuc-Pietro et al., "Studying the Dark Triad of Personality using
Twitter Behavior", CIKM 2016.
"""

__version__ = "0.1.0"

from darktriad.config import Settings, get_settings
from darktriad.models import FullResult, MatchEntry, TraitMatches, TraitScores
from darktriad.options import AnalysisOptions
from darktriad.traits.scorer import TraitScorer, analyze

__all__ = [
    "Settings",
    "get_settings",
    "AnalysisOptions",
    "FullResult",
    "MatchEntry",
    "TraitMatches",
    "TraitScores",
    "TraitScorer",
    "analyze",
    "__version__",
]
