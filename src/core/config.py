"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.

Every variable is optional. Without GEMINI_API_KEY the AI operation
answers from the built-in lookup table only.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


DEFAULT_OFFICIAL_EMAIL = "your.email@chitkara.edu.in"


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for daily log files
        log_to_file: Whether to write log files at all
        official_email: Contact identifier returned in every envelope
        host: Bind address for uvicorn
        port: Bind port for uvicorn
        gemini_api_key: API key for Google Gemini (None disables the call)
        gemini_model: Gemini model identifier
        ai_timeout_seconds: Hard timeout for a single Gemini request
        ai_temperature: Sampling temperature for the single-word answer
        ai_max_tokens: Output token cap for the single-word answer
        fibonacci_max: Largest accepted fibonacci term count
        ai_question_max_length: Longest accepted AI question
        enable_audit_logging: Log every request through AuditMiddleware
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_dir: Path
    log_to_file: bool
    official_email: str

    # Server settings
    host: str
    port: int

    # LLM settings
    gemini_api_key: Optional[str]
    gemini_model: str
    ai_timeout_seconds: float
    ai_temperature: float
    ai_max_tokens: int

    # Input limits
    fibonacci_max: int
    ai_question_max_length: int

    enable_audit_logging: bool

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    @property
    def ai_enabled(self) -> bool:
        """True when a Gemini API key is configured."""
        return bool(self.gemini_api_key)


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_bool(key: str, default: str) -> bool:
    return _get_env(key, default).strip().lower() in ("1", "true", "yes")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once; call get_settings.cache_clear() after
    changing the environment (tests do this).

    Returns:
        Settings instance with all configuration values
    """
    # Blank values in .env count as "not set"
    gemini_api_key = os.environ.get("GEMINI_API_KEY", "").strip() or None
    official_email = os.environ.get("OFFICIAL_EMAIL", "").strip() or DEFAULT_OFFICIAL_EMAIL

    log_dir = os.environ.get("LOG_DIR")

    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "BFHLOperationsAPI"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_dir=Path(log_dir) if log_dir else Path(__file__).parent.parent.parent / "logs",
        log_to_file=_get_bool("LOG_TO_FILE", "true"),
        official_email=official_email,

        # Server
        host=_get_env("HOST", "0.0.0.0"),
        port=int(_get_env("PORT", "3000")),

        # LLM
        gemini_api_key=gemini_api_key,
        gemini_model=_get_env("GEMINI_MODEL", "gemini-1.5-flash"),
        ai_timeout_seconds=float(_get_env("AI_TIMEOUT_SECONDS", "8")),
        ai_temperature=float(_get_env("AI_TEMPERATURE", "0.1")),
        ai_max_tokens=int(_get_env("AI_MAX_TOKENS", "10")),

        # Limits
        fibonacci_max=int(_get_env("FIBONACCI_MAX", "1000")),
        ai_question_max_length=int(_get_env("AI_QUESTION_MAX_LENGTH", "500")),

        enable_audit_logging=_get_bool("ENABLE_AUDIT_LOGGING", "true"),
    )
