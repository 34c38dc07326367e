# tests/test_analyze.py
import pytest
from pydantic import ValidationError
from app.services.analyze import analyze, engagement_score, InvalidInput
from app.services import rules as R

SAMPLES = [
    "",
    "   \n\n  ",
    "...",
    "Buy milk. Buy eggs. Buy bread.",
    "Is it a toy?\n\nI see 3 of a toy.\n\nA toy is so fun.",
    "Ünïcödé ØCR nöise ¶¶ §§ 12,34 ~~~ \x0c​",
    "- one\n- two\n* three\n• four",
    "Antidisestablishmentarianism characteristically.",
]

def test_empty_text():
    r = analyze("")
    assert r.word_count == 0
    assert r.sentence_count == 0
    assert r.paragraph_count == 0
    assert r.avg_word_length == 0
    assert r.reading_time_minutes == 0
    assert r.readability_score == 0
    assert r.engagement_score == 50
    assert [(s.kind, s.message) for s in r.suggestions] == [("error", R.VERY_COMPLEX)]

def test_words_without_sentences_score_zero():
    r = analyze("...")
    assert r.word_count == 1
    assert r.sentence_count == 0
    assert r.readability_score == 0

def test_short_text_only_gets_readability_tier():
    r = analyze("Buy milk. Buy eggs. Buy bread.")
    assert r.word_count == 6
    assert len(r.suggestions) == 1
    assert r.suggestions[0].message == R.VERY_COMPLEX
    assert r.engagement_score == 50

def test_engagement_composition():
    r = analyze("Is it a toy?\n\nI see 3 of a toy.\n\nA toy is so fun.")
    assert r.readability_score > 60
    assert r.paragraph_count == 3
    assert r.engagement_score == 95

def test_engagement_score_is_capped():
    assert engagement_score("Why? 42\n- item", 100, 5) == 100
    assert engagement_score("", 0, 0) == 50
    assert engagement_score("- item", 60, 2) == 55

def test_reading_time_for_201_words():
    r = analyze(" ".join(["word"] * 201))
    assert r.reading_time_minutes == 2

def test_single_long_sentence_fires_first_rule():
    text = " ".join(["word"] * 25) + "."
    r = analyze(text)
    assert r.sentence_count == 1
    assert r.suggestions[0].message == R.LONG_SENTENCES

@pytest.mark.parametrize("text", SAMPLES)
def test_invariants(text):
    r = analyze(text)
    assert analyze(text) == r
    assert 0 <= r.readability_score <= 100
    assert 0 <= r.engagement_score <= 100
    assert len(r.suggestions) >= 1

@pytest.mark.parametrize("bad", [None, 42, b"bytes", ["a", "list"]])
def test_invalid_input(bad):
    with pytest.raises(InvalidInput):
        analyze(bad)

def test_result_is_immutable():
    r = analyze("Hello there.")
    with pytest.raises(ValidationError):
        r.word_count = 99
    with pytest.raises(ValidationError):
        r.suggestions[0].kind = "tip"
