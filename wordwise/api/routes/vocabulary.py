"""
Vocabulary analysis API routes.
"""

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from wordwise.config import Settings
from wordwise.models.vocabulary import AcademicLevel, TransitionContext
from wordwise.vocabulary.analyzer import (
    analyze_vocabulary,
    enhance_vocabulary,
    get_academic_word_suggestions,
    suggest_transition_words,
)
from ..dependencies import build_metadata, get_settings, validate_target_level, validate_text

logger = logging.getLogger(__name__)

router = APIRouter()

ANALYSIS_TYPES = ("full", "analysis-only", "suggestions-only")


class VocabularyRequest(BaseModel):
    """Request body for vocabulary analysis and word-list lookups."""

    text: Optional[str] = None
    target_level: Optional[str] = Field(None, alias="targetLevel")
    analysis_type: Optional[str] = Field(None, alias="analysisType")
    transition_context: Optional[str] = Field(None, alias="transitionContext")
    academic_level: Optional[str] = Field(None, alias="academicLevel")

    class Config:
        populate_by_name = True


def _transition_words_response(context: Optional[str]):
    try:
        transition_context = TransitionContext(context)
    except ValueError:
        raise HTTPException(status_code=400, detail="Valid context parameter required for transition words")

    return {
        "transitionWords": suggest_transition_words(transition_context),
        "context": transition_context.value,
        "metadata": build_metadata(),
    }


def _academic_words_response(level: Optional[str]):
    try:
        academic_level = AcademicLevel(level)
    except ValueError:
        raise HTTPException(status_code=400, detail="Valid level parameter required for academic words")

    return {
        "academicWords": get_academic_word_suggestions(academic_level),
        "level": academic_level.value,
        "metadata": build_metadata(),
    }


@router.post("/vocabulary")
async def analyze_vocabulary_route(
    body: VocabularyRequest,
    app_settings: Settings = Depends(get_settings),
):
    """Analyze vocabulary, or look up transition/academic word lists."""
    logger.info("Vocabulary analysis requested")

    if body.transition_context:
        logger.info(f"Transition words requested for context: {body.transition_context}")
        return _transition_words_response(body.transition_context)

    if body.academic_level:
        logger.info(f"Academic word suggestions requested for level: {body.academic_level}")
        return _academic_words_response(body.academic_level)

    text = validate_text(body.text, app_settings)
    target_level = validate_target_level(body.target_level, app_settings)

    analysis_type = body.analysis_type or "full"
    if analysis_type not in ANALYSIS_TYPES:
        logger.error(f"Invalid analysis type: {analysis_type}")
        raise HTTPException(
            status_code=400,
            detail='Analysis type must be "full", "analysis-only", or "suggestions-only"',
        )

    try:
        logger.info(
            f"Analyzing vocabulary for {len(text)} characters, "
            f"target level: {target_level.value}, type: {analysis_type}"
        )
        start_time = time.perf_counter()

        if analysis_type == "analysis-only":
            analysis = analyze_vocabulary(text, target_level)
            result = {"analysis": analysis.model_dump(by_alias=True, mode="json")}
        elif analysis_type == "suggestions-only":
            analysis = analyze_vocabulary(text, target_level)
            dumped = analysis.model_dump(by_alias=True, mode="json")
            result = {
                "suggestions": dumped["suggestions"],
                "totalWords": dumped["totalWords"],
                "informalWords": dumped["informalWords"],
            }
        else:
            result = enhance_vocabulary(text, target_level).model_dump(by_alias=True, mode="json")

        analysis_time = round((time.perf_counter() - start_time) * 1000)
        logger.info(f"Vocabulary analysis completed in {analysis_time}ms")

        result["metadata"] = build_metadata(
            analysisTime=analysis_time,
            textLength=len(text),
            targetLevel=target_level.value,
            analysisType=analysis_type,
        )
        return result

    except Exception as e:
        logger.error(f"Error in vocabulary analysis: {e}")
        raise HTTPException(
            status_code=500,
            detail=str(e) if app_settings.debug else "Internal server error during vocabulary analysis",
        )


@router.get("/vocabulary")
async def vocabulary_utilities(
    action: Optional[str] = Query(None),
    context: Optional[str] = Query(None),
    level: Optional[str] = Query(None),
):
    """Word-list lookups; without an action, describes the available endpoints."""
    if action == "transition-words":
        return _transition_words_response(context)

    if action == "academic-words":
        return _academic_words_response(level)

    return {
        "message": "Vocabulary Analysis API",
        "endpoints": {
            "POST": "Analyze vocabulary in text",
            "GET?action=transition-words&context=<context>": "Get transition words for specific context",
            "GET?action=academic-words&level=<level>": "Get academic words for specific level",
        },
        "contexts": [item.value for item in TransitionContext],
        "levels": [item.value for item in AcademicLevel],
    }
