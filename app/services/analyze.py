from __future__ import annotations
import logging
from app.core.config import ENGAGEMENT_BASE, ENGAGEMENT_WEIGHTS, MIN_PARAGRAPHS, READABILITY_FAIR
from app.models.report import AnalysisResult, Report
from app.services import rules as R
from app.services.metrics import compute_metrics, readability_score
from app.services.presentation import build_report
from app.services.tokenize import tokenize
from app.utils.storage import load_extracted

log = logging.getLogger("analyze")

class InvalidInput(TypeError):
    ...

def engagement_score(text: str, readability: int, paragraph_count: int) -> int:
    # Additive score: start at the base and add a bonus per engaging feature
    score = ENGAGEMENT_BASE
    if R.has_question(text):
        score += ENGAGEMENT_WEIGHTS["question"]
    if R.has_number(text):
        score += ENGAGEMENT_WEIGHTS["number"]
    if R.has_bullets(text):
        score += ENGAGEMENT_WEIGHTS["bullet"]
    # compares the rounded score: raw 60.3 rounds to 60 and gets no bonus
    if readability > READABILITY_FAIR:
        score += ENGAGEMENT_WEIGHTS["readable"]
    if paragraph_count >= MIN_PARAGRAPHS:
        score += ENGAGEMENT_WEIGHTS["paragraphs"]
    return min(100, score)

def analyze(text: str) -> AnalysisResult:
    """
    Pure text -> AnalysisResult pipeline: tokenize, measure, score, suggest.
    Raises InvalidInput when `text` is not a string.
    """
    if not isinstance(text, str):
        raise InvalidInput(f"text must be a string, got {type(text).__name__}")

    tokens = tokenize(text)
    m = compute_metrics(text, tokens)
    readability = readability_score(m.word_count, m.sentence_count, m.syllable_approx)

    return AnalysisResult(
        word_count=m.word_count,
        sentence_count=m.sentence_count,
        paragraph_count=m.paragraph_count,
        avg_word_length=m.avg_word_length,
        reading_time_minutes=m.reading_time_minutes,
        readability_score=readability,
        engagement_score=engagement_score(text, readability, m.paragraph_count),
        suggestions=tuple(R.suggest(text, m, readability)),
    )

def analyze_document(doc_id: str) -> Report:
    text = load_extracted(doc_id)
    result = analyze(text)
    log.info(
        "Analyzed doc=%s words=%d readability=%d engagement=%d suggestions=%d",
        doc_id, result.word_count, result.readability_score,
        result.engagement_score, len(result.suggestions),
    )
    return build_report(doc_id, result)
