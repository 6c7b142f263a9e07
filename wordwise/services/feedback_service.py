"""
Writing feedback service.

Produces the AI-feedback payload locally when no language model is available,
and combines local metrics with a model-generated analysis when one is.
``blend_feedback`` has no route of its own; it is called by consumers that
hold a model analysis, such as the document viewer.
"""

import logging
import math
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from wordwise.config import settings
from wordwise.models.feedback import AIFeedbackAnalysis, AIFeedbackMetrics, TextAnalysis
from wordwise.models.readability import TargetLevel
from wordwise.readability.metrics import calculate_readability_metrics
from wordwise.readability.assessment import build_assessment
from wordwise.utils.rounding import clamp, round_half_up
from wordwise.vocabulary.analyzer import analyze_vocabulary

logger = logging.getLogger(__name__)

MIN_FEEDBACK_ITEMS = 3
LOW_ACADEMIC_RATIO = 0.1


class FeedbackService:
    """Service for building writing feedback from local analysis."""

    def __init__(self, words_per_minute: int = 200):
        self.words_per_minute = words_per_minute

    def generate_fallback_feedback(
        self,
        text: str,
        target_level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL,
    ) -> AIFeedbackAnalysis:
        """
        Build an AI-feedback style analysis purely from local metrics.

        Args:
            text: Plain text to analyze
            target_level: Audience the text is judged against

        Returns:
            AIFeedbackAnalysis with the same shape a language model would return
        """
        target_level = TargetLevel(target_level)
        metrics = calculate_readability_metrics(text, target_level)
        vocabulary = analyze_vocabulary(text, target_level)

        strengths = []
        areas_for_improvement = []
        recommendations = []

        low_grade, _ = target_level.grade_range
        if metrics.appropriate_for_level:
            strengths.append(f"Writing complexity appropriate for {target_level.value}")
        elif metrics.recommended_grade_level < low_grade:
            areas_for_improvement.append("Increase sentence complexity and vocabulary sophistication")
            recommendations.append("Use more varied sentence structures and academic vocabulary")
        else:
            areas_for_improvement.append("Simplify overly complex sentences for better clarity")
            recommendations.append("Break down long sentences into clearer, more digestible parts")

        academic_ratio = (
            vocabulary.academic_words / vocabulary.total_words if vocabulary.total_words else 0.0
        )
        if vocabulary.total_words and academic_ratio < LOW_ACADEMIC_RATIO:
            areas_for_improvement.append("Limited use of academic vocabulary")
            recommendations.append("Incorporate more formal, discipline-specific terminology")

        if metrics.average_words_per_sentence < 10:
            areas_for_improvement.append("Sentences could be more developed")
            recommendations.append("Add more detail and complexity to sentence structures")
        elif metrics.average_words_per_sentence > 25:
            areas_for_improvement.append("Some sentences are overly long")
            recommendations.append("Break up complex sentences for better readability")

        if len(areas_for_improvement) < MIN_FEEDBACK_ITEMS:
            areas_for_improvement.append("Continue developing academic writing skills")
        if len(recommendations) < MIN_FEEDBACK_ITEMS:
            recommendations.append("Practice writing with feedback to improve consistently")

        if metrics.flesch_reading_ease > 70:
            difficulty = "Easy"
        elif metrics.flesch_reading_ease > 50:
            difficulty = "Moderate"
        else:
            difficulty = "Difficult"

        analysis = AIFeedbackAnalysis(
            overall_score=int(clamp(70 - len(areas_for_improvement) * 5, 40, 85)),
            grade_level=metrics.recommended_grade_level,
            reading_level=metrics.reading_level.value,
            difficulty=difficulty,
            strengths=strengths or ["Shows effort in academic writing"],
            areas_for_improvement=areas_for_improvement,
            recommendations=recommendations,
            metrics=AIFeedbackMetrics(
                word_count=metrics.word_count,
                sentence_count=metrics.sentence_count,
                average_words_per_sentence=metrics.average_words_per_sentence,
                vocabulary_level=vocabulary.academic_level.value,
                academic_vocabulary_percentage=academic_ratio * 100,
                reading_time_minutes=math.ceil(metrics.word_count / self.words_per_minute),
            ),
            priority_focus=areas_for_improvement[:3],
        )

        logger.debug(f"Fallback feedback generated with score {analysis.overall_score}")
        return analysis

    def blend_feedback(
        self,
        text: str,
        target_level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL,
        ai_analysis: Optional[Union[AIFeedbackAnalysis, Dict[str, Any]]] = None,
    ) -> TextAnalysis:
        """
        Combine local metrics with an optional model-generated analysis.

        The model's overall score, strengths and areas for improvement win
        when present; otherwise the local engine's values are used.
        """
        target_level = TargetLevel(target_level)
        metrics = calculate_readability_metrics(text, target_level)
        vocabulary = analyze_vocabulary(text, target_level)
        assessment = build_assessment(metrics, target_level)

        ai_analysis = self._coerce_ai_analysis(ai_analysis)

        local_score = round_half_up(
            (metrics.flesch_reading_ease + (100 - vocabulary.informal_words * 2)) / 2
        )

        if ai_analysis is None:
            return TextAnalysis(
                readability=metrics,
                vocabulary=vocabulary,
                overall_score=local_score,
                strengths=assessment.strengths,
                improvements=assessment.improvement_areas,
                ai_generated=False,
            )

        return TextAnalysis(
            readability=metrics,
            vocabulary=vocabulary,
            overall_score=ai_analysis.overall_score or local_score,
            strengths=ai_analysis.strengths or assessment.strengths,
            improvements=ai_analysis.areas_for_improvement or assessment.improvement_areas,
            ai_generated=True,
        )

    def _coerce_ai_analysis(
        self, ai_analysis: Optional[Union[AIFeedbackAnalysis, Dict[str, Any]]]
    ) -> Optional[AIFeedbackAnalysis]:
        if ai_analysis is None or isinstance(ai_analysis, AIFeedbackAnalysis):
            return ai_analysis
        try:
            return AIFeedbackAnalysis.model_validate(ai_analysis)
        except ValidationError as e:
            logger.warning(f"Ignoring malformed AI analysis, using local feedback: {e}")
            return None


feedback_service = FeedbackService(words_per_minute=settings.reading_words_per_minute)
