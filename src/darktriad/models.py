"""Pydantic result models for darktriad."""

from typing import List, NamedTuple, Optional

from pydantic import BaseModel, Field


class MatchEntry(NamedTuple):
    """One lexicon hit: [word, count, weight, value]."""

    word: str
    count: int
    weight: float
    value: float = 0.0


class TraitScores(BaseModel):
    """Lexical value for each trait; None when there was nothing to score."""

    triad: Optional[float] = None
    narcissism: Optional[float] = None
    machiavellianism: Optional[float] = None
    psychopathy: Optional[float] = None


class TraitMatches(BaseModel):
    """Sorted lexicon matches for each trait."""

    triad: List[MatchEntry] = Field(default_factory=list)
    narcissism: List[MatchEntry] = Field(default_factory=list)
    machiavellianism: List[MatchEntry] = Field(default_factory=list)
    psychopathy: List[MatchEntry] = Field(default_factory=list)


class FullResult(BaseModel):
    """Both lexical values and sorted matches."""

    values: TraitScores
    matches: TraitMatches
