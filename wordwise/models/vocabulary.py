"""
Vocabulary analysis data models.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class AcademicLevel(str, Enum):
    """Vocabulary sophistication bands, ordered from lowest to highest."""

    ELEMENTARY = "elementary"
    MIDDLE_SCHOOL = "middle-school"
    HIGH_SCHOOL = "high-school"
    COLLEGE = "college"

    @property
    def rank(self) -> int:
        return list(AcademicLevel).index(self)


class SuggestionReason(str, Enum):
    ACADEMIC_UPGRADE = "academic-upgrade"
    PRECISION = "precision"
    FORMALITY = "formality"
    VARIETY = "variety"
    CLARITY = "clarity"


class SuggestionPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        return {"high": 3, "medium": 2, "low": 1}[self.value]


class TransitionContext(str, Enum):
    ADDITION = "addition"
    CONTRAST = "contrast"
    CAUSE = "cause"
    SEQUENCE = "sequence"
    EMPHASIS = "emphasis"
    EXAMPLE = "example"


class SuggestionPosition(BaseModel):
    start: int
    end: int

    class Config:
        frozen = True


class VocabularySuggestion(BaseModel):
    """A suggested replacement for a single word occurrence."""

    original_word: str = Field(..., alias="originalWord")
    suggestions: List[str]
    context: str = Field(..., description="Surrounding text, up to 20 characters either side")
    reason: SuggestionReason
    priority: SuggestionPriority
    explanation: str
    position: SuggestionPosition

    class Config:
        populate_by_name = True
        frozen = True


class VocabularyAnalysis(BaseModel):
    """Word usage statistics for a piece of text."""

    total_words: int = Field(..., alias="totalWords")
    unique_words: int = Field(..., alias="uniqueWords")
    academic_words: int = Field(..., alias="academicWords")
    informal_words: int = Field(..., alias="informalWords")
    repetitive_words: List[str] = Field(default_factory=list, alias="repetitiveWords")
    vocabulary_diversity: int = Field(..., alias="vocabularyDiversity", description="0-100 scale")
    academic_level: AcademicLevel = Field(..., alias="academicLevel")
    suggestions: List[VocabularySuggestion] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        frozen = True


class VocabularyEnhancement(BaseModel):
    """Vocabulary analysis with a score and feedback lists."""

    analysis: VocabularyAnalysis
    overall_score: int = Field(..., alias="overallScore", description="0-100 scale")
    strengths: List[str] = Field(default_factory=list)
    improvement_areas: List[str] = Field(default_factory=list, alias="improvementAreas")
    recommendations: List[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        frozen = True
