"""
FastAPI web application and routes.
"""

from .app import create_app, app
from .dependencies import get_settings

__all__ = [
    "create_app",
    "app",
    "get_settings",
]
