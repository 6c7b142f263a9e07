"""
Vocabulary analysis module for academic writing.
"""

from .analyzer import (
    analyze_vocabulary,
    enhance_vocabulary,
    suggest_transition_words,
    get_academic_word_suggestions,
    is_academic_word,
    is_informal_word,
)

__all__ = [
    "analyze_vocabulary",
    "enhance_vocabulary",
    "suggest_transition_words",
    "get_academic_word_suggestions",
    "is_academic_word",
    "is_informal_word",
]
