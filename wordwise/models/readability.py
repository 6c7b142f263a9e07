"""
Readability metrics data models.
"""

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field


class TargetLevel(str, Enum):
    """Audience a piece of writing is judged against."""

    HIGH_SCHOOL = "high-school"
    COLLEGE = "college"

    @property
    def grade_range(self) -> Tuple[int, int]:
        """Inclusive grade range considered appropriate for this audience."""
        if self is TargetLevel.COLLEGE:
            return (13, 16)
        return (9, 12)

    @property
    def display_name(self) -> str:
        return "college" if self is TargetLevel.COLLEGE else "high school"

    @property
    def includes_college_vocabulary(self) -> bool:
        return self is TargetLevel.COLLEGE


class ReadingLevel(str, Enum):
    """Coarse reading band derived from the recommended grade level."""

    ELEMENTARY = "elementary"
    MIDDLE_SCHOOL = "middle-school"
    HIGH_SCHOOL = "high-school"
    ADULT = "adult"


class ReadabilityMetrics(BaseModel):
    """Readability analysis metrics for a piece of text."""

    # Basic text statistics
    word_count: int = Field(..., alias="wordCount", description="Total word count")
    sentence_count: int = Field(..., alias="sentenceCount", description="Total sentence count")
    syllable_count: int = Field(..., alias="syllableCount", description="Total syllable count")
    character_count: int = Field(..., alias="characterCount", description="Character count after whitespace normalisation")
    paragraph_count: int = Field(..., alias="paragraphCount", description="Total paragraph count")

    # Readability formulas
    flesch_reading_ease: float = Field(..., alias="fleschReadingEase", description="Flesch Reading Ease (0-100)")
    flesch_kincaid_grade_level: float = Field(..., alias="fleschKincaidGradeLevel", description="Flesch-Kincaid Grade Level")
    coleman_liau_index: float = Field(..., alias="colemanLiauIndex", description="Coleman-Liau index")
    automated_readability_index: float = Field(..., alias="automatedReadabilityIndex", description="Automated Readability Index")
    gunning_fog_index: float = Field(..., alias="gunningFogIndex", description="Gunning Fog index")

    # Academic writing ratios
    average_words_per_sentence: float = Field(..., alias="averageWordsPerSentence")
    average_syllables_per_word: float = Field(..., alias="averageSyllablesPerWord")
    complex_word_percentage: float = Field(..., alias="complexWordPercentage")
    academic_vocabulary_percentage: float = Field(..., alias="academicVocabularyPercentage")

    # Grade level assessment
    recommended_grade_level: int = Field(..., alias="recommendedGradeLevel", description="Calibrated grade level (1-16)")
    reading_level: ReadingLevel = Field(..., alias="readingLevel")
    appropriate_for_level: bool = Field(..., alias="appropriateForLevel")

    class Config:
        populate_by_name = True
        frozen = True
        json_schema_extra = {
            "example": {
                "wordCount": 11,
                "sentenceCount": 2,
                "syllableCount": 12,
                "characterCount": 43,
                "paragraphCount": 1,
                "fleschReadingEase": 100.0,
                "fleschKincaidGradeLevel": -0.6,
                "colemanLiauIndex": 1.8,
                "automatedReadabilityIndex": -0.3,
                "gunningFogIndex": 2.2,
                "averageWordsPerSentence": 5.5,
                "averageSyllablesPerWord": 1.09,
                "complexWordPercentage": 0.0,
                "academicVocabularyPercentage": 0.0,
                "recommendedGradeLevel": 1,
                "readingLevel": "elementary",
                "appropriateForLevel": False
            }
        }


class ReadabilityAssessment(BaseModel):
    """Readability metrics together with generated feedback."""

    metrics: ReadabilityMetrics
    feedback: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    improvement_areas: List[str] = Field(default_factory=list, alias="improvementAreas")

    class Config:
        populate_by_name = True
        frozen = True
