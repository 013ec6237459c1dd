"""Report form instance: draft state plus the submit flow."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Mapping

from report_form.client import BackendClient
from report_form.draft import ReportDraft
from report_form.errors import ReportFormError
from report_form.schema import DisclosureRecord, GenerationReport, SustainabilityReport
from report_form.serialize import report_payload, report_text
from report_form.validation import validate

logger = logging.getLogger(__name__)

SUCCESS_TITLE = "Report sent"
SUCCESS_MESSAGE = "Your report was sent successfully!"
FAILURE_TITLE = "Error"
FAILURE_MESSAGE = "Error sending report."
INVALID_MESSAGE = "Please correct the highlighted fields."
BUSY_TITLE = "Please wait"
BUSY_MESSAGE = "A submission is already in progress."


class SubmitState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class SubmissionResult:
    ok: bool
    message: str
    html_content: str | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return SUCCESS_TITLE if self.ok else FAILURE_TITLE


Sender = Callable[[DisclosureRecord], "str | None"]


class ReportForm:
    """One form session.

    Holds the draft, the inline validation errors and the submit state.
    At most one submission runs at a time; a submit issued while another is
    in flight returns ``None`` and sends nothing.
    """

    def __init__(self, model: type[DisclosureRecord], send: Sender):
        self.model = model
        self.draft = ReportDraft(model)
        self.errors: dict[str, str] = {}
        self.state = SubmitState.IDLE
        self.last_state: SubmitState | None = None
        # generated HTML waiting to be shown by the next page load
        self.preview: str | None = None
        self._send = send
        self._lock = threading.Lock()

    @classmethod
    def for_submission(cls, client: BackendClient) -> "ReportForm":
        """Variant that posts the disclosures as JSON to the report endpoint."""

        def send(report: DisclosureRecord) -> None:
            client.submit_report(report_payload(report))

        return cls(SustainabilityReport, send)

    @classmethod
    def for_generation(cls, client: BackendClient) -> "ReportForm":
        """Variant that relays the disclosures as text and receives generated HTML."""

        def send(report: DisclosureRecord) -> str:
            html = client.generate_html(report_text(report))
            logger.info("Received generated report (%d characters)", len(html))
            return html

        return cls(GenerationReport, send)

    @property
    def is_submitting(self) -> bool:
        return self.state is SubmitState.SUBMITTING

    def update(self, name: str, value: str) -> None:
        self.draft.update(name, value)

    def clear_errors(self) -> None:
        self.errors = {}

    def take_preview(self) -> str | None:
        preview, self.preview = self.preview, None
        return preview

    def submit(self, data: Mapping[str, str] | None = None) -> SubmissionResult | None:
        """Validate the draft and send it.

        ``data`` (submitted form input) is copied into the draft first, under
        the same guard as the send itself.
        """
        if not self._lock.acquire(blocking=False):
            logger.info("Submit ignored: a %s submission is already in flight", self.model.__name__)
            return None
        try:
            if data is not None:
                self.draft.load(data)
            return self._submit()
        finally:
            self.state = SubmitState.IDLE
            self._lock.release()

    def _submit(self) -> SubmissionResult:
        result = validate(self.draft)
        if not result.ok:
            self.errors = result.errors
            logger.info("Validation failed for %s: %s", self.model.__name__, ", ".join(sorted(result.errors)))
            return SubmissionResult(ok=False, message=INVALID_MESSAGE, errors=dict(result.errors))

        self.errors = {}
        self.state = SubmitState.SUBMITTING
        logger.info("Submitting %s for %s", self.model.__name__, result.report.company_name)
        try:
            content = self._send(result.report)
        except ReportFormError:
            self.last_state = SubmitState.FAILED
            logger.warning("%s submission failed", self.model.__name__, exc_info=True)
            return SubmissionResult(ok=False, message=FAILURE_MESSAGE)

        self.last_state = SubmitState.SUCCEEDED
        self.draft.reset()
        logger.info("%s submission succeeded", self.model.__name__)
        return SubmissionResult(ok=True, message=SUCCESS_MESSAGE, html_content=content)
