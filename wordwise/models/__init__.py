"""
Data models for readability, vocabulary and feedback results.
"""

from .readability import (
    TargetLevel,
    ReadingLevel,
    ReadabilityMetrics,
    ReadabilityAssessment,
)
from .vocabulary import (
    AcademicLevel,
    SuggestionReason,
    SuggestionPriority,
    TransitionContext,
    SuggestionPosition,
    VocabularySuggestion,
    VocabularyAnalysis,
    VocabularyEnhancement,
)
from .feedback import AIFeedbackMetrics, AIFeedbackAnalysis, TextAnalysis

__all__ = [
    "TargetLevel",
    "ReadingLevel",
    "ReadabilityMetrics",
    "ReadabilityAssessment",
    "AcademicLevel",
    "SuggestionReason",
    "SuggestionPriority",
    "TransitionContext",
    "SuggestionPosition",
    "VocabularySuggestion",
    "VocabularyAnalysis",
    "VocabularyEnhancement",
    "AIFeedbackMetrics",
    "AIFeedbackAnalysis",
    "TextAnalysis",
]
