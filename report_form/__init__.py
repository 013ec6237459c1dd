"""Sustainability report form: disclosure records, validation and submission."""

from report_form.config import Settings, load_settings
from report_form.draft import ReportDraft
from report_form.form import ReportForm, SubmissionResult, SubmitState
from report_form.schema import GenerationReport, SustainabilityReport
from report_form.validation import ValidationResult, validate

__all__ = [
    "GenerationReport",
    "ReportDraft",
    "ReportForm",
    "Settings",
    "SubmissionResult",
    "SubmitState",
    "SustainabilityReport",
    "ValidationResult",
    "load_settings",
    "validate",
]
