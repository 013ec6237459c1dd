"""Test configuration and fixtures for the report form."""

from collections.abc import Generator

import pytest

from app import create_app
from report_form.client import BackendClient
from report_form.config import Settings

REPORT_URL = "http://backend.test/api/sustainability-report"
GENERATION_URL = "http://backend.test/api/gemini"


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake backend host."""
    return Settings(
        report_api_url=REPORT_URL,
        generation_api_url=GENERATION_URL,
        generation_api_token="test-token",
        request_timeout=2.0,
        secret_key="test-secret",
        log_level="DEBUG",
    )


@pytest.fixture
def backend(settings: Settings) -> Generator[BackendClient, None, None]:
    """Backend client that is closed after the test."""
    with BackendClient(settings) as client:
        yield client


@pytest.fixture
def app(settings: Settings, backend: BackendClient):
    """Flask app wired to the test backend client."""
    flask_app = create_app(settings, backend)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def report_values() -> dict[str, str]:
    """A complete, valid sustainability report draft."""
    return {
        "companyName": "Acme",
        "companySector": "Textiles",
        "sustainabilityPolicy": "Net zero by 2040",
        "environmentalPractices": "Closed-loop dyeing",
        "employeeSatisfaction": "Yearly survey, 82% satisfied",
    }


@pytest.fixture
def generation_values() -> dict[str, str]:
    """A complete, valid generation report draft."""
    return {
        "companyName": "Acme",
        "companySector": "Textiles",
        "overview": "Mid-size textile manufacturer with three plants.",
        "carbonEmissions": "1200 tCO2e",
        "esgPractices": "yes",
    }
