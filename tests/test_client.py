"""Tests for the backend HTTP client."""

import json

import httpx
import pytest
import respx
from httpx import Response

from report_form.client import BackendClient
from report_form.config import Settings
from report_form.errors import ConfigurationError, TransportError, UnexpectedResponseError

REPORT_URL = "http://backend.test/api/sustainability-report"
GENERATION_URL = "http://backend.test/api/gemini"


class TestSubmitReport:
    @respx.mock
    def test_posts_json_payload(self, backend):
        route = respx.post(REPORT_URL).mock(return_value=Response(201))

        backend.submit_report({"companyName": "Acme"})

        assert route.call_count == 1
        request = route.calls.last.request
        assert json.loads(request.content) == {"companyName": "Acme"}
        assert request.headers["content-type"] == "application/json"

    @respx.mock
    def test_non_success_status_raises(self, backend):
        respx.post(REPORT_URL).mock(return_value=Response(500, text="boom"))

        with pytest.raises(TransportError) as excinfo:
            backend.submit_report({"companyName": "Acme"})

        assert excinfo.value.status_code == 500

    @respx.mock
    def test_network_error_raises(self, backend):
        respx.post(REPORT_URL).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(TransportError):
            backend.submit_report({"companyName": "Acme"})

    @respx.mock
    def test_timeout_raises(self, backend):
        respx.post(REPORT_URL).mock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(TransportError, match="timed out"):
            backend.submit_report({"companyName": "Acme"})


class TestGenerateHtml:
    @respx.mock
    def test_sends_bearer_token_and_report_data(self, backend):
        route = respx.post(GENERATION_URL).mock(
            return_value=Response(200, json={"htmlContent": "<h1>Acme</h1>"})
        )

        html = backend.generate_html("Company name: Acme")

        assert html == "<h1>Acme</h1>"
        request = route.calls.last.request
        assert request.headers["authorization"] == "Bearer test-token"
        assert json.loads(request.content) == {"reportData": "Company name: Acme"}

    @respx.mock
    def test_non_200_status_raises(self, backend):
        respx.post(GENERATION_URL).mock(return_value=Response(201, json={"htmlContent": "<p></p>"}))

        with pytest.raises(TransportError) as excinfo:
            backend.generate_html("text")

        assert excinfo.value.status_code == 201

    @respx.mock
    def test_missing_html_content_raises(self, backend):
        respx.post(GENERATION_URL).mock(return_value=Response(200, json={"status": "done"}))

        with pytest.raises(UnexpectedResponseError):
            backend.generate_html("text")

    @respx.mock
    def test_non_json_body_raises(self, backend):
        respx.post(GENERATION_URL).mock(return_value=Response(200, text="<html>"))

        with pytest.raises(UnexpectedResponseError):
            backend.generate_html("text")

    @respx.mock(assert_all_called=False)
    def test_missing_token_sends_nothing(self, settings):
        route = respx.post(GENERATION_URL).mock(return_value=Response(200, json={"htmlContent": ""}))
        no_token = Settings(generation_api_url=settings.generation_api_url)

        with BackendClient(no_token) as client:
            with pytest.raises(ConfigurationError):
                client.generate_html("text")

        assert route.call_count == 0


def test_injected_client_is_not_closed(settings):
    http = httpx.Client()
    BackendClient(settings, client=http).close()

    assert not http.is_closed
    http.close()
