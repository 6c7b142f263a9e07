"""
Vocabulary analysis and enhancement for academic writing.

Uses the same tokenizer as the readability engine so word totals agree
between the two analyses.
"""

import logging
import math
from collections import Counter
from typing import List, Union

from wordwise.models.readability import TargetLevel
from wordwise.models.vocabulary import (
    AcademicLevel,
    SuggestionPosition,
    SuggestionPriority,
    SuggestionReason,
    TransitionContext,
    VocabularyAnalysis,
    VocabularyEnhancement,
    VocabularySuggestion,
)
from wordwise.readability.text_stats import tokenize_with_positions, tokenize_words
from wordwise.utils.rounding import clamp, round_half_up
from .word_lists import ACADEMIC_VOCABULARY_LISTS, INFORMAL_TO_ACADEMIC, OVERUSED_WORDS, TRANSITION_WORDS

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 10
CONTEXT_WINDOW = 20
LONG_TEXT_WORDS = 100
LONG_TEXT_DIVERSITY_BONUS = 1.2
MIN_REPETITIONS = 3
REPETITION_RATIO = 0.02


def is_academic_word(word: str, level: Union[AcademicLevel, str] = AcademicLevel.HIGH_SCHOOL) -> bool:
    """Membership in the academic list for ``level`` or any lower level."""
    level = AcademicLevel(level)
    lower_word = word.lower()
    return any(
        lower_word in words
        for list_level, words in ACADEMIC_VOCABULARY_LISTS.items()
        if list_level.rank <= level.rank
    )


def is_informal_word(word: str) -> bool:
    return word.lower() in INFORMAL_TO_ACADEMIC


def get_academic_alternatives(word: str) -> List[str]:
    return list(INFORMAL_TO_ACADEMIC.get(word.lower(), []))


def calculate_vocabulary_diversity(words: List[str]) -> int:
    """Type-token ratio on a 0-100 scale, with a bonus for longer texts."""
    if not words:
        return 0

    type_token_ratio = len(set(words)) / len(words)
    diversity_score = type_token_ratio * 100

    # Longer texts naturally repeat more
    if len(words) > LONG_TEXT_WORDS:
        diversity_score *= LONG_TEXT_DIVERSITY_BONUS

    return min(100, round_half_up(diversity_score))


def determine_academic_level(words: List[str]) -> AcademicLevel:
    """Estimate vocabulary level from the share of cumulative academic words."""
    total_words = len(words)
    if total_words == 0:
        return AcademicLevel.ELEMENTARY

    def percentage(level: AcademicLevel) -> float:
        return sum(1 for word in words if is_academic_word(word, level)) / total_words * 100

    if percentage(AcademicLevel.COLLEGE) > 5:
        return AcademicLevel.COLLEGE
    if percentage(AcademicLevel.HIGH_SCHOOL) > 8:
        return AcademicLevel.HIGH_SCHOOL
    if percentage(AcademicLevel.MIDDLE_SCHOOL) > 5:
        return AcademicLevel.MIDDLE_SCHOOL
    return AcademicLevel.ELEMENTARY


def find_repetitive_words(words: List[str]) -> List[str]:
    """Content words used at least max(3, 2% of all words) times, in first-use order."""
    counts = Counter(
        word for word in words
        if word not in OVERUSED_WORDS and len(word) > 3
    )
    threshold = max(MIN_REPETITIONS, math.ceil(len(words) * REPETITION_RATIO))
    return [word for word, count in counts.items() if count >= threshold]


def generate_vocabulary_suggestions(
    text: str,
    target_level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL,
) -> List[VocabularySuggestion]:
    """Suggest academic replacements for informal or imprecise words."""
    academic_level = AcademicLevel(TargetLevel(target_level).value)
    suggestions = []

    for word, start, end in tokenize_with_positions(text):
        alternatives = get_academic_alternatives(word)
        if not alternatives:
            continue

        context = text[max(0, start - CONTEXT_WINDOW):min(len(text), end + CONTEXT_WINDOW)]
        position = SuggestionPosition(start=start, end=end)

        if is_informal_word(word):
            suggestions.append(VocabularySuggestion(
                original_word=word,
                suggestions=alternatives,
                context=context,
                reason=SuggestionReason.ACADEMIC_UPGRADE,
                priority=SuggestionPriority.HIGH,
                explanation=f'Replace "{word}" with more academic vocabulary to improve formality and precision.',
                position=position,
            ))

        if not is_academic_word(word, academic_level) and len(word) > 3:
            suggestions.append(VocabularySuggestion(
                original_word=word,
                suggestions=alternatives,
                context=context,
                reason=SuggestionReason.PRECISION,
                priority=SuggestionPriority.MEDIUM,
                explanation=f'Consider using more precise academic vocabulary instead of "{word}".',
                position=position,
            ))

    suggestions.sort(key=lambda s: (-s.priority.weight, s.position.start))
    return suggestions[:MAX_SUGGESTIONS]


def analyze_vocabulary(
    text: str,
    target_level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL,
) -> VocabularyAnalysis:
    """
    Analyze vocabulary usage in text.

    Args:
        text: Plain text to analyze
        target_level: Audience used to decide which words count as academic

    Returns:
        VocabularyAnalysis with counts, diversity, level and suggestions
    """
    target_level = TargetLevel(target_level)
    words = tokenize_words(text)

    if not words:
        return VocabularyAnalysis(
            total_words=0,
            unique_words=0,
            academic_words=0,
            informal_words=0,
            repetitive_words=[],
            vocabulary_diversity=0,
            academic_level=AcademicLevel.ELEMENTARY,
            suggestions=[],
        )

    academic_level = AcademicLevel(target_level.value)

    analysis = VocabularyAnalysis(
        total_words=len(words),
        unique_words=len(set(words)),
        academic_words=sum(1 for word in words if is_academic_word(word, academic_level)),
        informal_words=sum(1 for word in words if is_informal_word(word)),
        repetitive_words=find_repetitive_words(words),
        vocabulary_diversity=calculate_vocabulary_diversity(words),
        academic_level=determine_academic_level(words),
        suggestions=generate_vocabulary_suggestions(text, target_level),
    )

    logger.debug(
        f"Vocabulary analyzed: {analysis.total_words} words, {analysis.academic_words} academic, "
        f"level {analysis.academic_level.value}"
    )
    return analysis


def enhance_vocabulary(
    text: str,
    target_level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL,
) -> VocabularyEnhancement:
    """Score vocabulary usage and produce strengths, improvements and recommendations."""
    target_level = TargetLevel(target_level)
    analysis = analyze_vocabulary(text, target_level)

    if analysis.total_words == 0:
        return VocabularyEnhancement(
            analysis=analysis,
            overall_score=0,
            strengths=[],
            improvement_areas=["Add content to receive vocabulary feedback"],
            recommendations=["Write some text to get vocabulary enhancement suggestions"],
        )

    strengths = []
    improvement_areas = []
    recommendations = []
    score = 50

    # Academic vocabulary usage
    academic_percentage = analysis.academic_words / analysis.total_words * 100
    if academic_percentage > 15:
        score += 20
        strengths.append("Strong use of academic vocabulary")
    elif academic_percentage > 8:
        score += 10
        strengths.append("Good use of academic vocabulary")
    else:
        score -= 10
        improvement_areas.append("Limited academic vocabulary usage")
        recommendations.append("Incorporate more academic terms and formal language")

    # Diversity
    if analysis.vocabulary_diversity > 70:
        score += 15
        strengths.append("Excellent vocabulary diversity")
    elif analysis.vocabulary_diversity > 50:
        score += 5
        strengths.append("Good vocabulary variety")
    else:
        score -= 10
        improvement_areas.append("Limited vocabulary variety")
        recommendations.append("Use more varied vocabulary to avoid repetition")

    # Informal language
    informal_percentage = analysis.informal_words / analysis.total_words * 100
    if informal_percentage > 5:
        score -= 15
        improvement_areas.append("Too many informal words")
        recommendations.append("Replace informal words with academic alternatives")
    elif informal_percentage > 2:
        score -= 5
        improvement_areas.append("Some informal language present")
    else:
        score += 5
        strengths.append("Appropriate formality level")

    # Repetition
    if len(analysis.repetitive_words) > 3:
        score -= 10
        improvement_areas.append("Repetitive word usage")
        recommendations.append(f"Vary your use of: {', '.join(analysis.repetitive_words[:3])}")
    elif analysis.repetitive_words:
        score -= 5
        recommendations.append("Consider synonyms for repeated words")
    else:
        strengths.append("Good word variety")

    # Level against target
    target_academic_level = AcademicLevel(target_level.value)
    if analysis.academic_level is target_academic_level:
        score += 10
        strengths.append(f"Vocabulary appropriate for {target_level.value} level")
    elif analysis.academic_level.rank < target_academic_level.rank:
        score -= 10
        improvement_areas.append(f"Vocabulary below {target_level.value} level")
        recommendations.append("Use more sophisticated academic vocabulary")
    else:
        improvement_areas.append("Vocabulary may be too advanced")
        recommendations.append("Balance complex terms with clearer explanations")

    high_priority = sum(1 for s in analysis.suggestions if s.priority is SuggestionPriority.HIGH)
    if high_priority > 5:
        score -= 10
        recommendations.append("Focus on high-priority vocabulary improvements first")

    if target_level is TargetLevel.HIGH_SCHOOL:
        recommendations.append("Use transition words to connect ideas clearly")
        recommendations.append("Replace simple words with more academic alternatives")
    else:
        recommendations.append("Incorporate discipline-specific terminology")
        recommendations.append("Use precise, technical vocabulary when appropriate")

    return VocabularyEnhancement(
        analysis=analysis,
        overall_score=int(clamp(score, 0, 100)),
        strengths=strengths,
        improvement_areas=improvement_areas,
        recommendations=recommendations,
    )


def suggest_transition_words(context: Union[TransitionContext, str]) -> List[str]:
    """Transition words for connecting ideas in the given way."""
    return list(TRANSITION_WORDS[TransitionContext(context)])


def get_academic_word_suggestions(level: Union[AcademicLevel, str]) -> List[str]:
    """The academic words introduced at ``level`` (not cumulative)."""
    return list(ACADEMIC_VOCABULARY_LISTS[AcademicLevel(level)])
