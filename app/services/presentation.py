from __future__ import annotations
from typing import Tuple
from app.models.report import AnalysisResult, Report

_TONES = {
    "success": "affirmative",
    "warning": "cautionary",
    "error": "blocking",
}

def suggestion_tone(kind: str) -> str:
    # unknown kinds (incl. "tip") render as informational
    return _TONES.get(kind, "informational")

def engagement_tier(score: int) -> Tuple[str, str]:
    if score >= 80:
        return "excellent", "Excellent! Your content is highly engaging."
    if score >= 60:
        return "good", "Good engagement potential with room for improvement."
    if score >= 40:
        return "fair", "Fair engagement. Consider implementing suggestions below."
    return "low", "Low engagement. Follow recommendations to improve."

def reading_time_label(minutes: int) -> str:
    return f"{minutes} minute" + ("" if minutes == 1 else "s")

def build_report(doc_id: str, result: AnalysisResult) -> Report:
    tier, message = engagement_tier(result.engagement_score)
    return Report(
        doc_id=doc_id,
        analysis=result,
        engagement_tier=tier,
        engagement_message=message,
        reading_time_label=reading_time_label(result.reading_time_minutes),
        suggestion_tones=[suggestion_tone(s.kind) for s in result.suggestions],
    )
