"""
FastAPI dependencies and shared request validation.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException

from wordwise.config import Settings, settings
from wordwise.models.readability import TargetLevel

logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    """Dependency to get application settings."""
    return settings


def validate_text(text: Optional[str], app_settings: Settings) -> str:
    """Reject missing or oversized text with a 400."""
    if not text or not isinstance(text, str):
        logger.error("Missing or invalid text field")
        raise HTTPException(status_code=400, detail="Text field is required and must be a string")

    if len(text) > app_settings.max_text_length:
        logger.error(f"Text too long: {len(text)} characters")
        raise HTTPException(
            status_code=400,
            detail=f"Text must be less than {app_settings.max_text_length:,} characters",
        )

    return text


def validate_target_level(target_level: Optional[str], app_settings: Settings) -> TargetLevel:
    """Resolve the requested target level, falling back to the configured default."""
    value = target_level or app_settings.default_target_level
    try:
        return TargetLevel(value)
    except ValueError:
        logger.error(f"Invalid target level: {value}")
        raise HTTPException(
            status_code=400,
            detail='Target level must be either "high-school" or "college"',
        )


def build_metadata(**fields: Any) -> Dict[str, Any]:
    """Response metadata with a UTC timestamp."""
    metadata = dict(fields)
    metadata["timestamp"] = datetime.now(timezone.utc).isoformat()
    return metadata
