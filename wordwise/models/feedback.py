"""
Writing feedback data models.

``AIFeedbackAnalysis`` has the shape returned by the AI-feedback endpoint,
whether it was produced by a language model or by the local fallback.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .readability import ReadabilityMetrics
from .vocabulary import VocabularyAnalysis


class AIFeedbackMetrics(BaseModel):
    word_count: int = Field(..., alias="wordCount")
    sentence_count: int = Field(..., alias="sentenceCount")
    average_words_per_sentence: float = Field(..., alias="averageWordsPerSentence")
    vocabulary_level: str = Field(..., alias="vocabularyLevel")
    academic_vocabulary_percentage: float = Field(..., alias="academicVocabularyPercentage")
    reading_time_minutes: int = Field(..., alias="readingTimeMinutes")

    class Config:
        populate_by_name = True


class AIFeedbackAnalysis(BaseModel):
    overall_score: int = Field(..., alias="overallScore", ge=0, le=100)
    grade_level: float = Field(..., alias="gradeLevel")
    reading_level: str = Field(..., alias="readingLevel")
    difficulty: str

    strengths: List[str] = Field(default_factory=list)
    areas_for_improvement: List[str] = Field(default_factory=list, alias="areasForImprovement")
    recommendations: List[str] = Field(default_factory=list)

    metrics: Optional[AIFeedbackMetrics] = None
    priority_focus: List[str] = Field(default_factory=list, alias="priorityFocus")

    class Config:
        populate_by_name = True


class TextAnalysis(BaseModel):
    """Local metrics combined with (optional) language-model feedback."""

    readability: ReadabilityMetrics
    vocabulary: VocabularyAnalysis
    overall_score: int = Field(..., alias="overallScore")
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    ai_generated: bool = Field(False, alias="aiGenerated")

    class Config:
        populate_by_name = True
        frozen = True
