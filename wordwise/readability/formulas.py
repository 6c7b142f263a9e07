"""
Readability formula implementations.

Each formula returns its raw value; clamping and rounding for display happen
when the metrics are assembled. All formulas return 0 when there are no words
or no sentences.
"""

from dataclasses import dataclass

from .text_stats import TextStatistics


@dataclass(frozen=True)
class FormulaScores:
    """Raw (unrounded, unclamped) scores from the formula bank."""

    flesch_reading_ease: float
    flesch_kincaid_grade_level: float
    coleman_liau_index: float
    automated_readability_index: float
    gunning_fog_index: float

    @property
    def grade_scores(self) -> tuple:
        """The four grade-oriented scores (everything except Flesch Reading Ease)."""
        return (
            self.flesch_kincaid_grade_level,
            self.coleman_liau_index,
            self.automated_readability_index,
            self.gunning_fog_index,
        )


def calculate_flesch_reading_ease(word_count: int, sentence_count: int, syllable_count: int) -> float:
    """
    Calculate Flesch Reading Ease score.

    Formula: 206.835 - (1.015 × ASL) - (84.6 × ASW)
    Where ASL = Average Sentence Length, ASW = Average Syllables per Word

    Score interpretation:
    90-100: Very Easy
    80-90: Easy
    70-80: Fairly Easy
    60-70: Standard
    50-60: Fairly Difficult
    30-50: Difficult
    0-30: Very Difficult
    """
    if word_count == 0 or sentence_count == 0:
        return 0.0

    asl = word_count / sentence_count
    asw = syllable_count / word_count

    return 206.835 - (1.015 * asl) - (84.6 * asw)


def calculate_flesch_kincaid_grade(word_count: int, sentence_count: int, syllable_count: int) -> float:
    """
    Calculate Flesch-Kincaid Grade Level.

    Formula: (0.39 × ASL) + (11.8 × ASW) - 15.59
    """
    if word_count == 0 or sentence_count == 0:
        return 0.0

    asl = word_count / sentence_count
    asw = syllable_count / word_count

    return (0.39 * asl) + (11.8 * asw) - 15.59


def calculate_coleman_liau(word_count: int, sentence_count: int, character_count: int) -> float:
    """
    Calculate Coleman-Liau Index.

    Formula: 0.0588 × L - 0.296 × S - 15.8
    Where L = characters per 100 words, S = sentences per 100 words
    """
    if word_count == 0 or sentence_count == 0:
        return 0.0

    l = (character_count / word_count) * 100
    s = (sentence_count / word_count) * 100

    return 0.0588 * l - 0.296 * s - 15.8


def calculate_automated_readability(word_count: int, sentence_count: int, character_count: int) -> float:
    """
    Calculate Automated Readability Index (ARI).

    Formula: 4.71 × (characters / words) + 0.5 × (words / sentences) - 21.43
    """
    if word_count == 0 or sentence_count == 0:
        return 0.0

    chars_per_word = character_count / word_count
    words_per_sentence = word_count / sentence_count

    return 4.71 * chars_per_word + 0.5 * words_per_sentence - 21.43


def calculate_gunning_fog(word_count: int, sentence_count: int, complex_word_count: int) -> float:
    """
    Calculate Gunning Fog Index.

    Formula: 0.4 × (ASL + PHW)
    Where PHW = percentage of complex words
    """
    if word_count == 0 or sentence_count == 0:
        return 0.0

    asl = word_count / sentence_count
    phw = (complex_word_count / word_count) * 100

    return 0.4 * (asl + phw)


def calculate_formula_scores(stats: TextStatistics, complex_word_count: int) -> FormulaScores:
    """Run the whole formula bank over one set of statistics."""
    return FormulaScores(
        flesch_reading_ease=calculate_flesch_reading_ease(
            stats.word_count, stats.sentence_count, stats.syllable_count
        ),
        flesch_kincaid_grade_level=calculate_flesch_kincaid_grade(
            stats.word_count, stats.sentence_count, stats.syllable_count
        ),
        coleman_liau_index=calculate_coleman_liau(
            stats.word_count, stats.sentence_count, stats.character_count
        ),
        automated_readability_index=calculate_automated_readability(
            stats.word_count, stats.sentence_count, stats.character_count
        ),
        gunning_fog_index=calculate_gunning_fog(
            stats.word_count, stats.sentence_count, complex_word_count
        ),
    )
