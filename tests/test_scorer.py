"""Tests for dark triad scoring."""

import pytest

from darktriad.models import FullResult, TraitMatches, TraitScores
from darktriad.options import Encoding
from darktriad.traits.scorer import TraitScorer, analyze, calc_lex
from darktriad.traits.matching import resolve_matches

from conftest import TOY_TEXT, TOY_TRIAD

TRIAD_INTERCEPT = 0.632024388686
MACH_INTERCEPT = 0.596743883684

# note x3, america x2, capital x1 over six words
TOY_FREQ_SUM = (3 / 6) * -34.8 + (2 / 6) * -49.2 + (1 / 6) * -133.9


@pytest.fixture
def toy_matches():
    return resolve_matches({"note": 3, "america": 2, "capital": 1}, TOY_TRIAD)


class TestCalcLex:
    """Tests for calc_lex."""

    def test_freq(self, toy_matches):
        value = calc_lex(toy_matches, TRIAD_INTERCEPT, 6, Encoding.FREQ, 9)
        assert value == round(TRIAD_INTERCEPT + TOY_FREQ_SUM, 9)

    def test_binary(self, toy_matches):
        value = calc_lex(toy_matches, TRIAD_INTERCEPT, 6, Encoding.BINARY, 9)
        assert value == pytest.approx(TRIAD_INTERCEPT - 34.8 - 49.2 - 133.9, abs=1e-9)

    def test_percent_ignores_intercept(self, toy_matches):
        assert calc_lex(toy_matches, TRIAD_INTERCEPT, 6, Encoding.PERCENT, 9) == 0.5

    def test_no_matches(self):
        assert calc_lex([], TRIAD_INTERCEPT, 6, Encoding.FREQ, 9) is None
        assert calc_lex([], TRIAD_INTERCEPT, 6, Encoding.BINARY, 9) is None
        assert calc_lex([], TRIAD_INTERCEPT, 6, Encoding.PERCENT, 9) == 0.0

    def test_zero_wordcount(self, toy_matches):
        for encoding in Encoding:
            assert calc_lex(toy_matches, TRIAD_INTERCEPT, 0, encoding, 9) is None

    def test_places(self, toy_matches):
        value = calc_lex(toy_matches, TRIAD_INTERCEPT, 6, Encoding.FREQ, 2)
        assert value == -55.48


class TestAnalyzeInput:
    """Tests for input edge cases."""

    @pytest.mark.parametrize("text", ["", None, "   ", 42, ["note"]])
    def test_no_input(self, toy_scorer, text):
        assert toy_scorer.analyze(text) is None

    def test_no_tokens(self, toy_scorer):
        assert toy_scorer.analyze("?!... ,") is None

    def test_no_input_logs_warning(self, toy_scorer, caplog):
        with caplog.at_level("WARNING"):
            toy_scorer.analyze("")
        assert "No string found" in caplog.text


class TestAnalyzeLex:
    """Tests for lexical value output."""

    def test_worked_example(self, toy_scorer):
        scores = toy_scorer.analyze(TOY_TEXT)
        assert isinstance(scores, TraitScores)
        assert scores.triad == pytest.approx(TRIAD_INTERCEPT + TOY_FREQ_SUM, abs=1e-9)
        assert scores.narcissism == pytest.approx(0.714881303759 + 0.5, abs=1e-9)
        # "note america" is matched as a bigram
        assert scores.machiavellianism == pytest.approx(
            MACH_INTERCEPT + (2 / 6) * 0.5 + (1 / 6) * 2.0, abs=1e-9
        )
        assert scores.psychopathy is None

    def test_case_insensitive(self, toy_scorer):
        assert toy_scorer.analyze(TOY_TEXT.upper()) == toy_scorer.analyze(TOY_TEXT)

    def test_no_int(self, toy_scorer):
        with_int = toy_scorer.analyze(TOY_TEXT)
        without = toy_scorer.analyze(TOY_TEXT, {"noInt": True})
        assert without.triad == pytest.approx(with_int.triad - TRIAD_INTERCEPT, abs=1e-8)

    def test_binary(self, toy_scorer):
        scores = toy_scorer.analyze(TOY_TEXT, {"encoding": "binary"})
        assert scores.triad == pytest.approx(TRIAD_INTERCEPT - 217.9, abs=1e-9)

    def test_percent(self, toy_scorer):
        scores = toy_scorer.analyze(TOY_TEXT, {"encoding": "percent"})
        assert scores.triad == 0.5
        assert scores.psychopathy == 0.0

    def test_bounds_exclude_everything(self, toy_scorer):
        options = {"min": 0, "max": 1}
        assert toy_scorer.analyze(TOY_TEXT, options).triad is None
        options["encoding"] = "percent"
        assert toy_scorer.analyze(TOY_TEXT, options).triad == 0.0

    def test_ngrams_disabled(self, toy_scorer):
        scores = toy_scorer.analyze(TOY_TEXT, {"nGrams": [0]})
        assert scores.machiavellianism == pytest.approx(
            MACH_INTERCEPT + (2 / 6) * 0.5, abs=1e-9
        )

    def test_wc_grams(self, toy_scorer):
        """Six words plus five bigrams and four trigrams."""
        scores = toy_scorer.analyze(TOY_TEXT, {"wcGrams": True, "encoding": "percent"})
        assert scores.triad == round(3 / 15, 9)

    def test_wordcount_ignores_emoticon_lookalikes(self, toy_scorer):
        """A time like 8pm is one word, so the word count is three."""
        scores = toy_scorer.analyze("note at 8pm")
        assert scores.triad == pytest.approx(TRIAD_INTERCEPT + (1 / 3) * -34.8, abs=1e-9)

    def test_ngram_larger_than_text_is_skipped(self, toy_scorer):
        scores = toy_scorer.analyze("note", {"nGrams": [2, 3]})
        assert scores.triad == pytest.approx(TRIAD_INTERCEPT - 34.8, abs=1e-9)

    def test_gb_locale(self, make_store):
        scorer = TraitScorer(lexicons=make_store(triad={"color": 1.0}))
        assert scorer.analyze("colour").triad is None
        assert scorer.analyze("colour", {"locale": "GB"}).triad == pytest.approx(
            TRIAD_INTERCEPT + 1.0, abs=1e-9
        )

    def test_invalid_output_defaults_to_lex(self, toy_scorer):
        assert isinstance(toy_scorer.analyze(TOY_TEXT, {"output": "bogus"}), TraitScores)


class TestAnalyzeMatches:
    """Tests for match list output."""

    def test_matches(self, toy_scorer):
        matches = toy_scorer.analyze(TOY_TEXT, {"output": "matches"})
        assert isinstance(matches, TraitMatches)
        assert [m.word for m in matches.triad] == ["note", "america", "capital"]
        assert matches.triad[0] == ("note", 3, -34.8, -17.4)
        assert matches.psychopathy == []

    def test_sort_by_weight(self, toy_scorer):
        matches = toy_scorer.analyze(TOY_TEXT, {"output": "matches", "sortBy": "weight"})
        assert [m.word for m in matches.machiavellianism] == ["note america", "america"]

    def test_full_matches_separate_calls(self, toy_scorer):
        options = {"sortBy": "lex", "places": 4}
        full = toy_scorer.analyze(TOY_TEXT, {**options, "output": "full"})
        assert isinstance(full, FullResult)
        assert full.values == toy_scorer.analyze(TOY_TEXT, {**options, "output": "lex"})
        assert full.matches == toy_scorer.analyze(TOY_TEXT, {**options, "output": "matches"})

    def test_model_dump_shape(self, toy_scorer):
        full = toy_scorer.analyze(TOY_TEXT, {"output": "full"}).model_dump(mode="json")
        assert set(full) == {"values", "matches"}
        assert full["matches"]["triad"][0] == ["note", 3, -34.8, -17.4]


class TestAnalyzeFunction:
    """Tests for the module-level analyze with bundled lexica."""

    def test_bundled_lexica(self):
        scores = analyze("I hate you, you stupid idiot. Shut up!")
        assert isinstance(scores.triad, float)
        assert isinstance(scores.psychopathy, float)
        assert scores.narcissism is None
        assert scores.machiavellianism is None

    def test_keyword_options(self):
        result = analyze("I hate you, you stupid idiot. Shut up!", output="matches")
        words = [m.word for m in result.triad]
        assert "shut up" in words
        assert "hate" in words

    def test_keywords_override_mapping(self):
        result = analyze("I hate you", {"output": "matches"}, output="lex")
        assert isinstance(result, TraitScores)
