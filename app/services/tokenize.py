from __future__ import annotations
import re
from typing import List, NamedTuple

_WHITESPACE = re.compile(r"\s+")
_SENTENCE_END = re.compile(r"[.!?]+")
_PARAGRAPH_BREAK = re.compile(r"\n\n+")

class Tokens(NamedTuple):
    words: List[str]
    sentences: List[str]
    paragraphs: List[str]

def split_words(text: str) -> List[str]:
    return [w for w in _WHITESPACE.split(text) if w]

def split_sentences(text: str) -> List[str]:
    # no abbreviation/decimal handling: "3.5" is two sentences
    return [s for s in _SENTENCE_END.split(text) if s.strip()]

def split_paragraphs(text: str) -> List[str]:
    return [p for p in _PARAGRAPH_BREAK.split(text) if p.strip()]

def tokenize(text: str) -> Tokens:
    """Split raw text into words, sentences and paragraphs."""
    return Tokens(
        words=split_words(text),
        sentences=split_sentences(text),
        paragraphs=split_paragraphs(text),
    )
