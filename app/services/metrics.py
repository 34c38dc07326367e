from __future__ import annotations
import math
import re
from typing import NamedTuple
from app.core.config import WORDS_PER_MINUTE
from app.services.tokenize import Tokens

_WHITESPACE = re.compile(r"\s+")
_NON_LETTER = re.compile(r"[^a-z]")
_VOWEL = re.compile(r"[aeiou]")

class Metrics(NamedTuple):
    word_count: int
    sentence_count: int
    paragraph_count: int
    avg_word_length: float
    reading_time_minutes: int
    syllable_approx: int

def syllable_approx(text: str) -> int:
    """
    Consonant count of the lower-cased, letters-only text.
    Crude on purpose: the readability tiers were tuned against it.
    """
    letters = _NON_LETTER.sub("", text.lower())
    return len(_VOWEL.sub("", letters))

def avg_word_length(text: str, word_count: int) -> float:
    if word_count == 0:
        return 0.0
    # one decimal, half up like the readability score: 2.25 -> 2.3
    chars = len(_WHITESPACE.sub("", text))
    return (20 * chars + word_count) // (2 * word_count) / 10

def reading_time(word_count: int) -> int:
    return math.ceil(word_count / WORDS_PER_MINUTE)

def compute_metrics(text: str, tokens: Tokens) -> Metrics:
    word_count = len(tokens.words)
    return Metrics(
        word_count=word_count,
        sentence_count=len(tokens.sentences),
        paragraph_count=len(tokens.paragraphs),
        avg_word_length=avg_word_length(text, word_count),
        reading_time_minutes=reading_time(word_count),
        syllable_approx=syllable_approx(text),
    )

def readability_score(word_count: int, sentence_count: int, syllables: int) -> int:
    """Flesch Reading Ease style score, clamped to 0..100."""
    if word_count == 0 or sentence_count == 0:
        return 0
    raw = (
        206.835
        - 1.015 * (word_count / sentence_count)
        - 84.6 * (syllables / word_count)
    )
    clamped = max(0.0, min(100.0, raw))
    # half-up, not banker's rounding
    return int(math.floor(clamped + 0.5))
