"""Token counting, lexicon matching and match-list formatting."""

import math
from collections import Counter
from typing import Dict, Iterable, List, Mapping

from darktriad.models import MatchEntry
from darktriad.options import Encoding, SortBy


def count_tokens(tokens: Iterable[str]) -> Dict[str, int]:
    """
    Tally occurrences of each distinct token.

    Keys keep the order in which tokens were first encountered.
    """
    return dict(Counter(tokens))


def resolve_matches(
    counts: Mapping[str, int],
    lexicon: Mapping[str, float],
    min_weight: float = -math.inf,
    max_weight: float = math.inf,
) -> List[MatchEntry]:
    """
    Find the counted tokens that appear in a lexicon.

    A token matches when it is a lexicon key and its weight lies strictly
    between ``min_weight`` and ``max_weight``. Tokens missing from the
    lexicon are skipped.

    Args:
        counts: Token to occurrence count
        lexicon: Word to weight
        min_weight: Exclusive lower weight bound
        max_weight: Exclusive upper weight bound

    Returns:
        Matches in token encounter order, each with a value of 0.0
    """
    matches = []
    for word, count in counts.items():
        weight = lexicon.get(word)
        if weight is None:
            continue
        if min_weight < weight < max_weight:
            matches.append(MatchEntry(word, count, weight))
    return matches


def match_value(entry: MatchEntry, encoding: Encoding, wordcount: int) -> float:
    """Unrounded contribution of one match to its trait's lexical value."""
    if encoding is Encoding.BINARY:
        return entry.weight
    if wordcount <= 0:
        return 0.0
    if encoding is Encoding.PERCENT:
        return 1 / wordcount
    return (entry.count / wordcount) * entry.weight


_SORT_KEYS = {
    SortBy.FREQ: lambda entry: entry.count,
    SortBy.LEX: lambda entry: entry.value,
    SortBy.WEIGHT: lambda entry: entry.weight,
}


def format_matches(
    matches: List[MatchEntry],
    sort_by: SortBy = SortBy.FREQ,
    wordcount: int = 0,
    places: int = 9,
    encoding: Encoding = Encoding.FREQ,
) -> List[MatchEntry]:
    """
    Fill in match values and sort for presentation.

    Args:
        matches: Resolved matches for one trait
        sort_by: ``freq`` (count), ``lex`` (value) or ``weight``, all descending;
            ties keep encounter order
        wordcount: Word count used for frequency-based values
        places: Decimal places for values
        encoding: Encoding the values are computed under

    Returns:
        New list of [word, count, weight, value] entries
    """
    valued = [
        entry._replace(value=round(match_value(entry, encoding, wordcount), places))
        for entry in matches
    ]
    return sorted(valued, key=_SORT_KEYS[sort_by], reverse=True)
