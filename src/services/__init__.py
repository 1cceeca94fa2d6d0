"""
Services module - Business logic for the /bfhl operations.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- operations.py : pure math executors
- ai_service.py : lookup table plus Gemini fallback chain
"""
from src.services.ai_service import AIService, get_ai_service, reset_ai_service
from src.services.operations import execute, fibonacci, filter_primes, hcf, lcm

__all__ = [
    "AIService",
    "get_ai_service",
    "reset_ai_service",
    "execute",
    "fibonacci",
    "filter_primes",
    "hcf",
    "lcm",
]
