"""
Source code root package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, validation, and cross-cutting utilities
- services/  : Operation executors and the AI answer service
- llm/       : Gemini client and prompt templates
- models/    : Pydantic response envelopes
"""
