"""Dark triad scoring from text."""

from typing import Any, Dict, List, Mapping, Optional, Union

from darktriad.models import FullResult, MatchEntry, TraitMatches, TraitScores
from darktriad.options import AnalysisOptions, Encoding, Locale, Output
from darktriad.traits.catalog import Trait, TraitCatalog, get_trait_catalog
from darktriad.traits.lexicon import LexiconStore, get_lexicon_store
from darktriad.traits.matching import (
    count_tokens,
    format_matches,
    match_value,
    resolve_matches,
)
from darktriad.utils.locale import gb_to_us
from darktriad.utils.logging import get_logger
from darktriad.utils.text import ngrams, normalize_text, tokenize

logger = get_logger(__name__)

AnalysisResult = Union[TraitScores, TraitMatches, FullResult]


def calc_lex(
    matches: List[MatchEntry],
    intercept: float,
    wordcount: int,
    encoding: Encoding = Encoding.FREQ,
    places: int = 9,
) -> Optional[float]:
    """
    Combine one trait's matches into a lexical value.

    ``binary`` sums the weights, ``freq`` sums ``count / wordcount * weight``;
    both add the intercept. ``percent`` is the share of the word count made
    up of distinct matched words and ignores the intercept.

    Args:
        matches: Resolved matches for the trait
        intercept: Trait intercept (pass 0.0 to drop it)
        wordcount: Word count of the analysed text
        encoding: Lexical encoding
        places: Decimal places to round the final value to

    Returns:
        The rounded value, or None if there is no word count, or no
        matches under ``binary``/``freq``
    """
    if wordcount <= 0:
        return None
    if encoding is Encoding.PERCENT:
        return round(len(matches) / wordcount, places)
    if not matches:
        return None

    lex = sum(match_value(entry, encoding, wordcount) for entry in matches)
    return round(intercept + lex, places)


class TraitScorer:
    """Score the dark triad and its sub-traits from text."""

    def __init__(
        self,
        catalog: Optional[TraitCatalog] = None,
        lexicons: Optional[LexiconStore] = None,
    ):
        """
        Initialize trait scorer.

        Args:
            catalog: Trait catalog with intercepts (uses default if None)
            lexicons: Lexicon store (uses the process-wide store if None)
        """
        self.catalog = catalog or get_trait_catalog()
        self.lexicons = lexicons or get_lexicon_store()

    def analyze(
        self,
        text: Any,
        options: Union[AnalysisOptions, Mapping[str, Any], None] = None,
    ) -> Optional[AnalysisResult]:
        """
        Analyse the dark triad of a string.

        Args:
            text: Text to analyse
            options: Analysis options, raw or parsed

        Returns:
            TraitScores, TraitMatches or FullResult depending on the
            ``output`` option, or None if the text is empty, not a string,
            or contains no tokens
        """
        if not isinstance(text, str) or not text.strip():
            logger.warning("No string found, returning None")
            return None

        if not isinstance(options, AnalysisOptions):
            options = AnalysisOptions.parse(options)

        text = normalize_text(text)
        if options.locale is Locale.GB:
            text = gb_to_us(text)

        tokens = tokenize(text)
        if not tokens:
            logger.warning("No tokens found, returning None")
            return None

        wordcount = len(tokens)
        for n in options.n_grams:
            if n > wordcount:
                logger.warning(
                    f"Skipping {n}-grams: text has only {wordcount} tokens"
                )
                continue
            tokens.extend(ngrams(text, n))

        if options.wc_grams:
            wordcount = len(tokens)

        counts = count_tokens(tokens)
        matches = {
            trait: resolve_matches(
                counts,
                self.lexicons.get(trait),
                options.min_weight,
                options.max_weight,
            )
            for trait in Trait
        }
        logger.debug(
            f"Scoring {len(counts)} distinct tokens, wordcount {wordcount}: "
            + ", ".join(f"{t.value}={len(m)}" for t, m in matches.items())
        )

        if options.output is Output.MATCHES:
            return self.score_matches(matches, wordcount, options)
        if options.output is Output.FULL:
            return FullResult(
                values=self.score_lex(matches, wordcount, options),
                matches=self.score_matches(matches, wordcount, options),
            )
        return self.score_lex(matches, wordcount, options)

    def score_lex(
        self,
        matches: Dict[Trait, List[MatchEntry]],
        wordcount: int,
        options: AnalysisOptions,
    ) -> TraitScores:
        """Compute the lexical value of every trait."""
        values = {}
        for trait, trait_matches in matches.items():
            intercept = 0.0 if options.no_int else self.catalog.get_intercept(trait)
            values[trait.value] = calc_lex(
                trait_matches, intercept, wordcount, options.encoding, options.places
            )
        return TraitScores(**values)

    def score_matches(
        self,
        matches: Dict[Trait, List[MatchEntry]],
        wordcount: int,
        options: AnalysisOptions,
    ) -> TraitMatches:
        """Format the sorted match list of every trait."""
        return TraitMatches(
            **{
                trait.value: format_matches(
                    trait_matches,
                    options.sort_by,
                    wordcount,
                    options.places,
                    options.encoding,
                )
                for trait, trait_matches in matches.items()
            }
        )


def analyze(
    text: Any,
    options: Union[AnalysisOptions, Mapping[str, Any], None] = None,
    **kwargs: Any,
) -> Optional[AnalysisResult]:
    """
    Convenience function to analyse a string with the default lexica.

    Options may be passed as a mapping, as keyword arguments, or both
    (keywords win): ``analyze(text, output="full", nGrams=[2])``.
    """
    if kwargs:
        if isinstance(options, AnalysisOptions):
            options = options.model_dump(exclude={"defaulted"})
        options = {**(options or {}), **kwargs}
    return TraitScorer().analyze(text, options)
