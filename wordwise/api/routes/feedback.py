"""
AI feedback API routes.

No language model is wired into this service, so responses come from the
local fallback analysis and are marked ``aiGenerated: false``.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from wordwise.config import Settings
from wordwise.services.feedback_service import feedback_service
from ..dependencies import build_metadata, get_settings, validate_target_level, validate_text

logger = logging.getLogger(__name__)

router = APIRouter()

ANALYSIS_TYPES = ("comprehensive", "readability", "vocabulary", "academic-style")


class AIFeedbackRequest(BaseModel):
    text: Optional[str] = None
    target_level: Optional[str] = Field(None, alias="targetLevel")
    analysis_type: Optional[str] = Field(None, alias="analysisType")

    class Config:
        populate_by_name = True


@router.post("/ai-feedback")
async def ai_feedback(
    body: AIFeedbackRequest,
    app_settings: Settings = Depends(get_settings),
):
    """Writing feedback in the AI-feedback format, generated locally."""
    text = validate_text(body.text, app_settings)
    target_level = validate_target_level(body.target_level, app_settings)

    analysis_type = body.analysis_type or "comprehensive"
    if analysis_type not in ANALYSIS_TYPES:
        raise HTTPException(status_code=400, detail=f"Unsupported analysis type: {analysis_type}")

    try:
        logger.info("Language model not configured, using local feedback analysis")
        analysis = feedback_service.generate_fallback_feedback(text, target_level)

        return {
            "success": True,
            "analysis": analysis.model_dump(by_alias=True, mode="json"),
            "metadata": build_metadata(
                textLength=len(text),
                targetLevel=target_level.value,
                analysisType=analysis_type,
                aiGenerated=False,
            ),
        }

    except Exception as e:
        logger.error(f"Error in AI feedback analysis: {e}")
        raise HTTPException(
            status_code=500,
            detail=str(e) if app_settings.debug else "Internal server error",
        )
