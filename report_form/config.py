"""Application configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_REPORT_API_URL = "http://localhost:5000/api/sustainability-report"
DEFAULT_GENERATION_API_URL = "http://localhost:5000/api/gemini"
DEFAULT_REQUEST_TIMEOUT = 15.0
DEFAULT_MAX_FORMS = 1000


@dataclass(frozen=True)
class Settings:
    report_api_url: str = DEFAULT_REPORT_API_URL
    generation_api_url: str = DEFAULT_GENERATION_API_URL
    generation_api_token: str = ""
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    secret_key: str = "dev"
    log_level: str = "INFO"
    max_forms: int = DEFAULT_MAX_FORMS


def load_settings(environ=None) -> Settings:
    """Build settings from environment variables, falling back to defaults."""
    env = os.environ if environ is None else environ

    raw_timeout = env.get("REQUEST_TIMEOUT", "")
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_REQUEST_TIMEOUT
    except ValueError:
        raise ValueError(f"REQUEST_TIMEOUT must be a number, got {raw_timeout!r}") from None
    if timeout <= 0:
        raise ValueError("REQUEST_TIMEOUT must be positive")

    raw_max_forms = env.get("MAX_FORMS", "")
    try:
        max_forms = int(raw_max_forms) if raw_max_forms else DEFAULT_MAX_FORMS
    except ValueError:
        raise ValueError(f"MAX_FORMS must be an integer, got {raw_max_forms!r}") from None
    if max_forms < 1:
        raise ValueError("MAX_FORMS must be at least 1")

    return Settings(
        report_api_url=env.get("REPORT_API_URL", DEFAULT_REPORT_API_URL),
        generation_api_url=env.get("GENERATION_API_URL", DEFAULT_GENERATION_API_URL),
        generation_api_token=env.get("GENERATION_API_TOKEN", ""),
        request_timeout=timeout,
        secret_key=env.get("SECRET_KEY", "dev"),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        max_forms=max_forms,
    )
