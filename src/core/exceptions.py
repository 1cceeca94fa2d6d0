"""
Custom Exceptions - Application-specific error classes.

This module defines a small hierarchy of exceptions for clean error handling:
- Each exception has a status code
- The API layer turns them into the failure envelope
- No stack traces leaked to clients
"""
from typing import Optional


class BFHLException(Exception):
    """
    Base exception for all request-level errors.

    Subclass this for specific error types.
    """
    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self, official_email: str) -> dict:
        """Convert to the failure envelope."""
        return {
            "is_success": False,
            "official_email": official_email,
            "error": self.message,
        }


class ValidationError(BFHLException):
    """Raised when the request body fails validation."""
    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field


class InternalError(BFHLException):
    """Raised (or substituted) for unexpected failures."""
    status_code = 500

    def __init__(self, message: str = "Internal server error", details: Optional[str] = None):
        super().__init__(message, details=details)


class LLMError(Exception):
    """
    Raised when the Gemini call fails or returns nothing usable.

    Never reaches the API layer; the AI service falls back on it.
    """
    pass
