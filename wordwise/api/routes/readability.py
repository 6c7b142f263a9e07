"""
Readability analysis API routes.
"""

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from wordwise.config import Settings
from wordwise.readability.analyzer import analyzer
from wordwise.readability.assessment import interpret_readability_score
from ..dependencies import build_metadata, get_settings, validate_target_level, validate_text

logger = logging.getLogger(__name__)

router = APIRouter()


class ReadabilityRequest(BaseModel):
    """Request body for readability analysis."""

    text: Optional[str] = None
    target_level: Optional[str] = Field(None, alias="targetLevel")
    include_metrics: bool = Field(False, alias="includeMetrics")
    is_html: bool = Field(False, alias="isHtml")

    class Config:
        populate_by_name = True


@router.post("/readability")
async def analyze_readability(
    body: ReadabilityRequest,
    app_settings: Settings = Depends(get_settings),
):
    """Analyze readability; returns the full assessment or only metrics."""
    logger.info("Readability analysis requested")

    text = validate_text(body.text, app_settings)
    target_level = validate_target_level(body.target_level, app_settings)

    try:
        logger.info(f"Analyzing readability for {len(text)} characters, target level: {target_level.value}")
        start_time = time.perf_counter()

        if body.include_metrics:
            metrics = analyzer.analyze_text(text, target_level, is_html=body.is_html)
            result = {"metrics": metrics.model_dump(by_alias=True, mode="json")}
        else:
            assessment = analyzer.assess_text(text, target_level, is_html=body.is_html)
            result = assessment.model_dump(by_alias=True, mode="json")

        analysis_time = round((time.perf_counter() - start_time) * 1000)
        logger.info(f"Readability analysis completed in {analysis_time}ms")

        result["metadata"] = build_metadata(
            analysisTime=analysis_time,
            textLength=len(text),
            targetLevel=target_level.value,
        )
        return result

    except Exception as e:
        logger.error(f"Error in readability analysis: {e}")
        raise HTTPException(
            status_code=500,
            detail=str(e) if app_settings.debug else "Internal server error during readability analysis",
        )


@router.get("/interpret")
async def interpret_score(
    score: float = Query(..., description="Flesch score or grade level"),
    metric: str = Query("flesch", description='"flesch" or "grade-level"'),
):
    """Describe a readability score in words."""
    try:
        label = interpret_readability_score(score, metric)
    except ValueError:
        raise HTTPException(status_code=400, detail='Metric must be either "flesch" or "grade-level"')

    return {"score": score, "metric": metric, "label": label}
