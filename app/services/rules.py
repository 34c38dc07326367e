from __future__ import annotations
from typing import List
import re
from app.core.config import (
    LONG_SENTENCE_WORDS, QUESTION_MIN_WORDS, NUMBERS_MIN_WORDS,
    PARAGRAPH_MIN_WORDS, MIN_PARAGRAPHS, BULLET_MIN_WORDS,
    READABILITY_HARD, READABILITY_FAIR,
)
from app.models.report import Suggestion
from app.services.metrics import Metrics

_DIGIT = re.compile(r"[0-9]")
_BULLET = re.compile(r"[•\-*]\s")

LONG_SENTENCES = "Consider breaking down long sentences for better readability."
ADD_QUESTIONS = "Add questions to engage readers and encourage interaction."
ADD_NUMBERS = "Include statistics or numbers to add credibility."
MORE_PARAGRAPHS = "Break content into more paragraphs for better visual flow."
VERY_COMPLEX = "Text complexity is very high — simplify for wider audience reach."
SIMPLIFY = "Consider simplifying language for broader appeal."
READABLE = "Good readability score — accessible to most readers."
ADD_BULLETS = "Use bullet points or lists to highlight key information."

def has_question(text: str) -> bool:
    return "?" in text

def has_number(text: str) -> bool:
    return _DIGIT.search(text) is not None

def has_bullets(text: str) -> bool:
    return _BULLET.search(text) is not None

def long_sentences(m: Metrics) -> List[Suggestion]:
    if m.sentence_count > 0 and m.word_count / m.sentence_count > LONG_SENTENCE_WORDS:
        return [Suggestion(kind="warning", message=LONG_SENTENCES)]
    return []

def missing_questions(text: str, m: Metrics) -> List[Suggestion]:
    if not has_question(text) and m.word_count > QUESTION_MIN_WORDS:
        return [Suggestion(kind="tip", message=ADD_QUESTIONS)]
    return []

def missing_numbers(text: str, m: Metrics) -> List[Suggestion]:
    if not has_number(text) and m.word_count > NUMBERS_MIN_WORDS:
        return [Suggestion(kind="tip", message=ADD_NUMBERS)]
    return []

def few_paragraphs(m: Metrics) -> List[Suggestion]:
    if m.paragraph_count < MIN_PARAGRAPHS and m.word_count > PARAGRAPH_MIN_WORDS:
        return [Suggestion(kind="warning", message=MORE_PARAGRAPHS)]
    return []

def readability_tier(score: int) -> Suggestion:
    # tiers read the rounded integer score, so raw 59.6 already counts as 60
    if score < READABILITY_HARD:
        return Suggestion(kind="error", message=VERY_COMPLEX)
    if score < READABILITY_FAIR:
        return Suggestion(kind="warning", message=SIMPLIFY)
    return Suggestion(kind="success", message=READABLE)

def missing_bullets(text: str, m: Metrics) -> List[Suggestion]:
    if not has_bullets(text) and m.word_count > BULLET_MIN_WORDS:
        return [Suggestion(kind="tip", message=ADD_BULLETS)]
    return []

def suggest(text: str, m: Metrics, readability: int) -> List[Suggestion]:
    """
    Run every rule in table order; each contributes zero or one suggestion.
    The readability tier always fires, so the result is never empty.
    """
    return (
        long_sentences(m)
        + missing_questions(text, m)
        + missing_numbers(text, m)
        + few_paragraphs(m)
        + [readability_tier(readability)]
        + missing_bullets(text, m)
    )
