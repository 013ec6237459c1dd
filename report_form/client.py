"""HTTP client for the report and generation backends."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from report_form.config import Settings
from report_form.errors import ConfigurationError, TransportError, UnexpectedResponseError

logger = logging.getLogger(__name__)


class BackendClient:
    """Sync httpx client bound to the configured endpoints."""

    def __init__(self, settings: Settings, client: httpx.Client | None = None):
        self.settings = settings
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=settings.request_timeout)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def _post(self, url: str, json: dict[str, Any], headers: dict[str, str] | None = None) -> httpx.Response:
        try:
            response = self.client.post(
                url, json=json, headers=headers, timeout=self.settings.request_timeout
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request to {url} timed out") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc
        logger.debug("POST %s -> %d", url, response.status_code)
        return response

    def submit_report(self, payload: dict[str, str]) -> None:
        """POST the report; any 2xx status is success and the body is ignored."""
        url = self.settings.report_api_url
        response = self._post(url, payload)
        if not response.is_success:
            raise TransportError(
                f"Report endpoint returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

    def generate_html(self, report_data: str) -> str:
        """Relay the report text to the generation endpoint and return its HTML."""
        token = self.settings.generation_api_token
        if not token:
            raise ConfigurationError("GENERATION_API_TOKEN is not set")

        url = self.settings.generation_api_url
        response = self._post(
            url,
            {"reportData": report_data},
            headers={"Authorization": f"Bearer {token}"},
        )
        if response.status_code != 200:
            raise TransportError(
                f"Generation endpoint returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise UnexpectedResponseError("Generation endpoint did not return JSON") from exc
        html = body.get("htmlContent") if isinstance(body, dict) else None
        if not isinstance(html, str):
            raise UnexpectedResponseError("Generation response has no htmlContent")
        return html
