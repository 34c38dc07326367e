from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal

SuggestionKind = Literal["success", "warning", "error", "tip"]
Tone = Literal["affirmative", "cautionary", "blocking", "informational"]
EngagementTier = Literal["excellent", "good", "fair", "low"]

class AnalysisInput(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    text: str

class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: SuggestionKind
    message: str

class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    word_count: int = Field(ge=0)
    sentence_count: int = Field(ge=0)
    paragraph_count: int = Field(ge=0)
    avg_word_length: float = Field(ge=0)
    reading_time_minutes: int = Field(ge=0)
    readability_score: int = Field(ge=0, le=100)
    engagement_score: int = Field(ge=0, le=100)
    suggestions: tuple[Suggestion, ...]

class UploadResult(BaseModel):
    doc_id: str
    text: str

class Report(BaseModel):
    doc_id: str
    analysis: AnalysisResult
    engagement_tier: EngagementTier
    engagement_message: str
    reading_time_label: str
    suggestion_tones: List[Tone]
