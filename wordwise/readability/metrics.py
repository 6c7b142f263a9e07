"""
Readability metrics assembly: text statistics, lexical classification, the
formula bank and grade-level calibration combined into one result.
"""

from typing import Union

from wordwise.models.readability import ReadabilityMetrics, ReadingLevel, TargetLevel
from wordwise.utils.rounding import clamp, round_half_up
from .calibration import recommended_grade_level
from .formulas import calculate_formula_scores
from .lexicon import count_academic_words, count_complex_words
from .text_stats import calculate_text_statistics


def get_reading_level(grade_level: int) -> ReadingLevel:
    """Map a whole grade level onto a reading band."""
    if grade_level < 6:
        return ReadingLevel.ELEMENTARY
    if grade_level < 9:
        return ReadingLevel.MIDDLE_SCHOOL
    if grade_level < 13:
        return ReadingLevel.HIGH_SCHOOL
    return ReadingLevel.ADULT


def empty_metrics() -> ReadabilityMetrics:
    """Zero-valued metrics for text without any words."""
    return ReadabilityMetrics(
        word_count=0,
        sentence_count=0,
        syllable_count=0,
        character_count=0,
        paragraph_count=0,
        flesch_reading_ease=0.0,
        flesch_kincaid_grade_level=0.0,
        coleman_liau_index=0.0,
        automated_readability_index=0.0,
        gunning_fog_index=0.0,
        average_words_per_sentence=0.0,
        average_syllables_per_word=0.0,
        complex_word_percentage=0.0,
        academic_vocabulary_percentage=0.0,
        recommended_grade_level=0,
        reading_level=ReadingLevel.ELEMENTARY,
        appropriate_for_level=False,
    )


def calculate_readability_metrics(
    text: str,
    target_level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL,
) -> ReadabilityMetrics:
    """
    Calculate comprehensive readability metrics for plain text.

    Args:
        text: Plain text to analyze
        target_level: Audience used for academic vocabulary and appropriateness

    Returns:
        ReadabilityMetrics; all zero when the text contains no words
    """
    target_level = TargetLevel(target_level)
    stats = calculate_text_statistics(text)

    if stats.word_count == 0:
        return empty_metrics()

    complex_word_count = count_complex_words(stats.words)
    academic_word_count = count_academic_words(stats.words, target_level)

    scores = calculate_formula_scores(stats, complex_word_count)

    average_words_per_sentence = stats.word_count / stats.sentence_count
    average_syllables_per_word = stats.syllable_count / stats.word_count
    complex_word_percentage = (complex_word_count / stats.word_count) * 100
    academic_vocabulary_percentage = (academic_word_count / stats.word_count) * 100

    grade_level = recommended_grade_level(scores, average_words_per_sentence, complex_word_percentage)
    low, high = target_level.grade_range

    return ReadabilityMetrics(
        word_count=stats.word_count,
        sentence_count=stats.sentence_count,
        syllable_count=stats.syllable_count,
        character_count=stats.character_count,
        paragraph_count=stats.paragraph_count,
        flesch_reading_ease=round_half_up(clamp(scores.flesch_reading_ease, 0.0, 100.0), 1),
        flesch_kincaid_grade_level=round_half_up(scores.flesch_kincaid_grade_level, 1),
        coleman_liau_index=round_half_up(scores.coleman_liau_index, 1),
        automated_readability_index=round_half_up(scores.automated_readability_index, 1),
        gunning_fog_index=round_half_up(scores.gunning_fog_index, 1),
        average_words_per_sentence=round_half_up(average_words_per_sentence, 1),
        average_syllables_per_word=round_half_up(average_syllables_per_word, 2),
        complex_word_percentage=round_half_up(complex_word_percentage, 1),
        academic_vocabulary_percentage=round_half_up(academic_vocabulary_percentage, 1),
        recommended_grade_level=grade_level,
        reading_level=get_reading_level(grade_level),
        appropriate_for_level=low <= grade_level <= high,
    )
