# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets up the environment before any application imports and provides
# shared fixtures. Gemini is never called for real.
# =============================================================================

import os
from dataclasses import replace

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# src.core.config loads .env on import; variables already present win.

os.environ["GEMINI_API_KEY"] = ""
os.environ["OFFICIAL_EMAIL"] = "tester@chitkara.edu.in"
os.environ["LOG_TO_FILE"] = "false"
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from src.core.config import get_settings
from src.services.ai_service import reset_ai_service


TEST_EMAIL = "tester@chitkara.edu.in"


@pytest.fixture(autouse=True)
def fresh_state():
    """Clear cached settings and the AI service around every test."""
    get_settings.cache_clear()
    reset_ai_service()
    yield
    get_settings.cache_clear()
    reset_ai_service()


@pytest.fixture
def client():
    """HTTP client for the FastAPI app."""
    from src.api.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def ai_settings():
    """Settings with a (fake) Gemini key configured."""
    return replace(get_settings(), gemini_api_key="test-gemini-key")
