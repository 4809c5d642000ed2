# src/agentboard/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .posts import router as posts_router
from .system import router as system_router

__all__ = [
    "posts_router",
    "system_router",
]
