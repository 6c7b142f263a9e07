"""
Application services built on the analysis engines.
"""

from .feedback_service import FeedbackService, feedback_service

__all__ = ["FeedbackService", "feedback_service"]
