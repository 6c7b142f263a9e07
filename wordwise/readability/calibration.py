"""
Grade-level calibration.

Classic grade formulas overestimate how hard authentic student writing is.
The calibrated grade is the average of the four grade formulas scaled by a
sequence of empirical factors, each applied to the running value.
"""

import logging

from wordwise.utils.rounding import clamp, round_half_up
from .formulas import FormulaScores

logger = logging.getLogger(__name__)

MIN_GRADE_LEVEL = 1
MAX_GRADE_LEVEL = 16

# (upper bound of raw grade, multiplier); above the last bound use the default
GRADE_LEVEL_CORRECTIONS = (
    (8.0, 0.65),
    (15.0, 0.70),
    (20.0, 0.75),
)
DEFAULT_GRADE_LEVEL_CORRECTION = 0.80

SHORT_SENTENCE_WORDS = 12
SHORT_SENTENCE_FACTOR = 0.90
LONG_SENTENCE_WORDS = 20
LONG_SENTENCE_FACTOR = 1.05

SIMPLE_VOCABULARY_PERCENTAGE = 10
SIMPLE_VOCABULARY_FACTOR = 0.95
COMPLEX_VOCABULARY_PERCENTAGE = 25
COMPLEX_VOCABULARY_FACTOR = 1.10


def calculate_raw_grade_level(scores: FormulaScores) -> float:
    """Average of Flesch-Kincaid, Coleman-Liau, ARI and Gunning Fog."""
    grades = scores.grade_scores
    return sum(grades) / len(grades)


def grade_level_correction(raw_grade_level: float) -> float:
    for upper_bound, factor in GRADE_LEVEL_CORRECTIONS:
        if raw_grade_level <= upper_bound:
            return factor
    return DEFAULT_GRADE_LEVEL_CORRECTION


def calibrate_grade_level(
    scores: FormulaScores,
    average_words_per_sentence: float,
    complex_word_percentage: float,
) -> float:
    """
    Calibrated grade level, clamped to [1, 16] but not rounded.

    Args:
        scores: Raw formula bank output
        average_words_per_sentence: Unrounded words per sentence
        complex_word_percentage: Unrounded complex-word percentage (0-100)
    """
    raw_grade_level = calculate_raw_grade_level(scores)
    grade_level = raw_grade_level * grade_level_correction(raw_grade_level)

    if average_words_per_sentence < SHORT_SENTENCE_WORDS:
        grade_level *= SHORT_SENTENCE_FACTOR
    elif average_words_per_sentence > LONG_SENTENCE_WORDS:
        grade_level *= LONG_SENTENCE_FACTOR

    if complex_word_percentage < SIMPLE_VOCABULARY_PERCENTAGE:
        grade_level *= SIMPLE_VOCABULARY_FACTOR
    elif complex_word_percentage > COMPLEX_VOCABULARY_PERCENTAGE:
        grade_level *= COMPLEX_VOCABULARY_FACTOR

    calibrated = clamp(grade_level, MIN_GRADE_LEVEL, MAX_GRADE_LEVEL)
    logger.debug(f"Grade level calibrated: raw {raw_grade_level:.2f} -> {calibrated:.2f}")
    return calibrated


def recommended_grade_level(
    scores: FormulaScores,
    average_words_per_sentence: float,
    complex_word_percentage: float,
) -> int:
    """Calibrated grade level rounded to the nearest whole grade."""
    return round_half_up(
        calibrate_grade_level(scores, average_words_per_sentence, complex_word_percentage)
    )
