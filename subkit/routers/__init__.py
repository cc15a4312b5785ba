"""
Routers package for API endpoints.

This package contains all API route handlers organized by functionality.
"""

from .timestamps import router as timestamps_router
from .text import router as text_router
from .system import router as system_router

__all__ = [
    "timestamps_router",
    "text_router",
    "system_router",
]
