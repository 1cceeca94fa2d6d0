"""
LLM Client for Google Gemini integration.

This module provides a thin interface to the Gemini API for the
/bfhl AI operation. It handles:
- API client initialization
- A single timed request per question
- Extraction and cleanup of the single-word answer

Every failure is raised as LLMError; callers decide how to fall back.
"""
import asyncio
import re
from typing import Any, Optional

import google.generativeai as genai

from src.core.config import Settings, get_settings
from src.core.exceptions import LLMError
from src.core.logging_config import LoggerMixin
from src.llm.prompts import get_single_word_prompt

# Punctuation stripped from the model's answer before taking the first word
_ANSWER_PUNCTUATION = re.compile(r"[.,!?;:]")


def clean_answer(text: str) -> str:
    """
    Reduce raw model output to its first word.

    Example:
        >>> clean_answer("  Delhi.\\n")
        'Delhi'
    """
    words = _ANSWER_PUNCTUATION.sub("", text.strip()).split()
    return words[0] if words else ""


def extract_text(response: Any) -> Optional[str]:
    """
    Pull the first candidate's first text part out of a Gemini response.

    Returns None when any level of the structure is missing, e.g. when
    the prompt was blocked and no candidates came back.
    """
    try:
        return response.candidates[0].content.parts[0].text or None
    except (AttributeError, IndexError, TypeError):
        return None


class GeminiClient(LoggerMixin):
    """
    Client for single-word answers from Google Gemini.

    Example:
        >>> client = GeminiClient()
        >>> await client.answer("What is the capital of France?")
        'Paris'
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the client.

        Args:
            settings: Optional Settings instance. Uses cached settings if not provided.

        Raises:
            LLMError: If no API key is configured
        """
        self.settings = settings or get_settings()

        if not self.settings.gemini_api_key:
            raise LLMError("GEMINI_API_KEY is not configured")

        genai.configure(api_key=self.settings.gemini_api_key)

        self.model_name = self.settings.gemini_model
        self.timeout = self.settings.ai_timeout_seconds
        self.generation_config = genai.types.GenerationConfig(
            temperature=self.settings.ai_temperature,
            max_output_tokens=self.settings.ai_max_tokens,
        )
        self.model = genai.GenerativeModel(model_name=self.model_name)

        self.logger.info(f"Gemini client initialized (model={self.model_name}, timeout={self.timeout}s)")

    async def generate(self, prompt: str) -> str:
        """
        Send one prompt and return the raw response text.

        Raises:
            LLMError: On timeout, API failure, or a response with no text
        """
        try:
            response = await asyncio.wait_for(
                self.model.generate_content_async(
                    prompt,
                    generation_config=self.generation_config,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise LLMError(f"Gemini request timed out after {self.timeout}s") from e
        except Exception as e:
            raise LLMError(f"Gemini request failed: {e}") from e

        text = extract_text(response)
        if text is None:
            raise LLMError("Gemini response contained no text")
        return text

    async def answer(self, question: str) -> str:
        """
        Ask a question and return a single cleaned word.

        Raises:
            LLMError: If the request fails or the answer cleans down to nothing
        """
        raw = await self.generate(get_single_word_prompt(question))

        word = clean_answer(raw)
        if not word:
            raise LLMError(f"Gemini answer was empty after cleanup: {raw!r}")

        self.logger.debug(f"Gemini answered {word!r} (raw={raw!r})")
        return word
