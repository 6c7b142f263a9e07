"""
Readability analysis module for student writing.
"""

from .analyzer import ReadabilityAnalyzer, analyzer, analyze_text
from .metrics import calculate_readability_metrics, empty_metrics, get_reading_level
from .assessment import assess_readability, build_assessment, interpret_readability_score
from .calibration import calibrate_grade_level, calculate_raw_grade_level, recommended_grade_level
from .formulas import (
    FormulaScores,
    calculate_flesch_reading_ease,
    calculate_flesch_kincaid_grade,
    calculate_coleman_liau,
    calculate_automated_readability,
    calculate_gunning_fog,
    calculate_formula_scores,
)
from .lexicon import is_complex_word, is_academic_vocabulary
from .text_stats import TextStatistics, calculate_text_statistics, count_syllables, tokenize_words

__all__ = [
    "ReadabilityAnalyzer",
    "analyzer",
    "analyze_text",
    "calculate_readability_metrics",
    "get_reading_level",
    "empty_metrics",
    "assess_readability",
    "build_assessment",
    "interpret_readability_score",
    "calibrate_grade_level",
    "calculate_raw_grade_level",
    "recommended_grade_level",
    "FormulaScores",
    "calculate_flesch_reading_ease",
    "calculate_flesch_kincaid_grade",
    "calculate_coleman_liau",
    "calculate_automated_readability",
    "calculate_gunning_fog",
    "calculate_formula_scores",
    "is_complex_word",
    "is_academic_vocabulary",
    "TextStatistics",
    "calculate_text_statistics",
    "count_syllables",
    "tokenize_words",
]
