"""
Request and response models for the HTTP boundary.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """Body of ``POST /generate``."""

    # Validated by the pipeline so callers get its human-readable messages
    url: Optional[str] = Field(default=None, description="Page the shortcut opens")


class ErrorResponse(BaseModel):
    detail: str
    error_code: str
    context: Dict[str, Any] = Field(default_factory=dict)


class StatusResponse(BaseModel):
    message: str
    service: str
    version: str
