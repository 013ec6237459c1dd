"""Client-side validation of report drafts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from pydantic import ValidationError

from report_form.draft import ReportDraft
from report_form.schema import DisclosureRecord, field_names


@dataclass
class ValidationResult:
    report: DisclosureRecord | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.report is not None and not self.errors


def validate(draft, model: type[DisclosureRecord] | None = None) -> ValidationResult:
    """Check every field of ``draft`` against ``model``'s rules.

    ``draft`` is a ReportDraft or a plain mapping of wire names to strings;
    a mapping must come with ``model``.
    All failing fields are reported together; nothing is raised for bad input.
    """
    if model is None:
        if not isinstance(draft, ReportDraft):
            raise TypeError("validate() needs a model when draft is a plain mapping")
        model = draft.model
    values: Mapping[str, str] = draft.values() if isinstance(draft, ReportDraft) else draft

    try:
        report = model.model_validate(dict(values))
    except ValidationError as exc:
        return ValidationResult(errors=_field_errors(exc, model))
    return ValidationResult(report=report)


def _field_errors(exc: ValidationError, model: type[DisclosureRecord]) -> dict[str, str]:
    known = set(field_names(model))
    aliases = {name: info.alias for name, info in model.model_fields.items() if info.alias}
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("__all__",)
        key = aliases.get(loc[0], loc[0]) if loc[0] not in known else loc[0]
        # first message per field wins
        errors.setdefault(str(key), error["msg"])
    return errors
