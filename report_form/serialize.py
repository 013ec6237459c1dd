"""Payloads sent to the report backends."""

from __future__ import annotations

from report_form.schema import DisclosureRecord, sections

EMPTY_VALUE = "Not provided"


def report_payload(report: DisclosureRecord) -> dict[str, str]:
    """JSON body for the report endpoint, keyed by every wire name."""
    return report.to_payload()


def report_text(report: DisclosureRecord) -> str:
    """Readable text block for the generation endpoint.

    Lines follow the record's declaration order, grouped by section, so the
    output does not depend on how the form happens to lay out its fields.
    """
    values = report.to_payload()
    blocks = []
    for section, specs in sections(type(report)):
        lines = [f"## {section}"]
        for spec in specs:
            value = values.get(spec.name, "")
            if spec.choices:
                value = dict(spec.choices).get(value, value) if value else ""
            lines.append(f"{spec.label}: {value or EMPTY_VALUE}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
