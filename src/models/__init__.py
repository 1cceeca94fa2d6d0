"""
Models module - Pydantic schemas for API responses.

Request bodies are validated by src.core.validators instead of a
model, since the accepted shape depends on which key is present.
"""
from src.models.envelope import (
    SuccessResponse,
    ErrorResponse,
    HealthResponse,
    NotFoundResponse,
)

__all__ = [
    "SuccessResponse",
    "ErrorResponse",
    "HealthResponse",
    "NotFoundResponse",
]
