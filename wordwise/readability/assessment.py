"""
Readability assessment: turns metrics into feedback for a target audience.

Each rule below is independent; together they append to the four output
lists in a fixed order.
"""

import logging
from typing import Union

from wordwise.models.readability import ReadabilityAssessment, ReadabilityMetrics, TargetLevel
from .metrics import calculate_readability_metrics

logger = logging.getLogger(__name__)

SHORT_SENTENCE_WORDS = 10
LONG_SENTENCE_WORDS = 25
LOW_ACADEMIC_PERCENTAGE = 5
HIGH_ACADEMIC_PERCENTAGE = 15
LOW_COMPLEX_PERCENTAGE = 10
HIGH_COMPLEX_PERCENTAGE = 20
EASY_FLESCH_SCORE = 70
STANDARD_FLESCH_SCORE = 50
SHORT_PARAGRAPH_WORDS = 50
LONG_PARAGRAPH_WORDS = 200


def assess_readability(
    text: str,
    target_level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL,
) -> ReadabilityAssessment:
    """Generate a readability assessment with feedback for ``text``."""
    target_level = TargetLevel(target_level)
    metrics = calculate_readability_metrics(text, target_level)
    return build_assessment(metrics, target_level)


def build_assessment(
    metrics: ReadabilityMetrics,
    target_level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL,
) -> ReadabilityAssessment:
    """Apply the feedback rules to already computed metrics."""
    target_level = TargetLevel(target_level)

    if metrics.word_count == 0:
        return ReadabilityAssessment(
            metrics=metrics,
            feedback=["No text to analyze"],
            recommendations=["Add content to receive readability feedback"],
            strengths=[],
            improvement_areas=[],
        )

    feedback = []
    recommendations = []
    strengths = []
    improvement_areas = []

    low_grade, _ = target_level.grade_range
    target_name = target_level.display_name
    grade = metrics.recommended_grade_level

    # Overall level
    if metrics.appropriate_for_level:
        feedback.append(f"✅ Your writing is at an appropriate {target_name} level (Grade {grade}).")
        strengths.append(f"Appropriate complexity for {target_name} audience")
    elif grade < low_grade:
        feedback.append(
            f"📈 Your writing is below {target_name} level (Grade {grade}). "
            "Consider using more sophisticated vocabulary and sentence structures."
        )
        improvement_areas.append("Increase vocabulary sophistication")
        improvement_areas.append("Use more complex sentence structures")
        recommendations.append("Incorporate more academic vocabulary and transition words")
        recommendations.append("Vary sentence length and structure for better flow")
    else:
        feedback.append(
            f"📉 Your writing is above typical {target_name} level (Grade {grade}). "
            "Consider simplifying for better clarity."
        )
        improvement_areas.append("Simplify overly complex sentences")
        recommendations.append("Break down long sentences into shorter, clearer ones")

    # Sentence length
    if metrics.average_words_per_sentence < SHORT_SENTENCE_WORDS:
        improvement_areas.append("Sentence length too short")
        recommendations.append("Combine short sentences or add more detail to create better flow")
    elif metrics.average_words_per_sentence > LONG_SENTENCE_WORDS:
        improvement_areas.append("Sentences too long")
        recommendations.append("Break up long sentences for better readability")
    else:
        strengths.append("Good sentence length variety")

    # Academic vocabulary
    if metrics.academic_vocabulary_percentage < LOW_ACADEMIC_PERCENTAGE:
        improvement_areas.append("Limited academic vocabulary")
        recommendations.append("Incorporate more academic terms and formal language")
    elif metrics.academic_vocabulary_percentage > HIGH_ACADEMIC_PERCENTAGE:
        strengths.append("Strong use of academic vocabulary")
    else:
        strengths.append("Good balance of academic vocabulary")

    # Complex words
    if metrics.complex_word_percentage < LOW_COMPLEX_PERCENTAGE:
        if target_level is TargetLevel.COLLEGE:
            improvement_areas.append("Vocabulary could be more sophisticated")
            recommendations.append("Use more precise, advanced terminology")
        else:
            strengths.append("Clear, accessible vocabulary")
    elif metrics.complex_word_percentage > HIGH_COMPLEX_PERCENTAGE:
        improvement_areas.append("May be overly complex")
        recommendations.append("Balance complex terms with simpler explanations")
    else:
        strengths.append("Good balance of vocabulary complexity")

    # Flesch Reading Ease
    if metrics.flesch_reading_ease >= EASY_FLESCH_SCORE:
        if target_level is TargetLevel.HIGH_SCHOOL:
            strengths.append("Very readable and accessible")
        else:
            feedback.append("💡 Consider adding more complexity for college-level writing")
    elif metrics.flesch_reading_ease >= STANDARD_FLESCH_SCORE:
        strengths.append("Good readability for academic writing")
    else:
        improvement_areas.append("Text may be difficult to read")
        recommendations.append("Simplify sentence structure and word choice")

    # Paragraph structure
    words_per_paragraph = metrics.word_count / metrics.paragraph_count
    if words_per_paragraph < SHORT_PARAGRAPH_WORDS:
        recommendations.append("Consider developing paragraphs with more detail and examples")
    elif words_per_paragraph > LONG_PARAGRAPH_WORDS:
        recommendations.append("Break up long paragraphs for better organization")
    else:
        strengths.append("Good paragraph length and organization")

    logger.debug(
        f"Assessment generated: {len(strengths)} strengths, {len(improvement_areas)} improvement areas"
    )

    return ReadabilityAssessment(
        metrics=metrics,
        feedback=feedback,
        recommendations=recommendations,
        strengths=strengths,
        improvement_areas=improvement_areas,
    )


def interpret_readability_score(score: float, metric: str) -> str:
    """
    Describe a score in words.

    Args:
        score: Flesch Reading Ease score or grade level
        metric: "flesch" or "grade-level"
    """
    if metric == "flesch":
        if score >= 90:
            return "Very Easy (5th grade)"
        elif score >= 80:
            return "Easy (6th grade)"
        elif score >= 70:
            return "Fairly Easy (7th grade)"
        elif score >= 60:
            return "Standard (8th-9th grade)"
        elif score >= 50:
            return "Fairly Difficult (10th-12th grade)"
        elif score >= 30:
            return "Difficult (College level)"
        else:
            return "Very Difficult (Graduate level)"

    if metric == "grade-level":
        if score <= 6:
            return "Elementary School"
        elif score <= 8:
            return "Middle School"
        elif score <= 12:
            return "High School"
        elif score <= 16:
            return "College"
        else:
            return "Graduate School"

    raise ValueError(f"Unknown readability metric: {metric!r}")
