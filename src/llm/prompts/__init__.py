"""
Prompts module - LLM prompt templates.

Prompts are stored as separate Python files so prompt changes
show up clearly in version control.
"""
from src.llm.prompts.answer_prompts import get_single_word_prompt

__all__ = [
    "get_single_word_prompt",
]
