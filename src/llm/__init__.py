"""
LLM module - Language model integration.

This module handles all LLM interactions:
- Prompt construction
- API calls to Google Gemini
- Response parsing
- Error handling for LLM failures
"""
from src.core.exceptions import LLMError
from src.llm.client import GeminiClient, clean_answer

__all__ = [
    "GeminiClient",
    "LLMError",
    "clean_answer",
]
