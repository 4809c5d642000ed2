"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned with every non-2xx response."""

    error: str = Field(..., description="Human-readable reason for the failure.")
