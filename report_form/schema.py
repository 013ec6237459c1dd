"""Disclosure records for the sustainability report forms.

Each record has one string field per disclosure question. Wire names are the
camelCase aliases (``companyName``); Python code uses the snake_case names.
Field metadata (label, placeholder, section, widget) lives in
``json_schema_extra`` so the templates can render the form from the model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


def min_length(length: int, message: str) -> AfterValidator:
    """Reject values shorter than ``length`` with a field-specific message."""

    def check(value: str) -> str:
        if len(value) < length:
            raise PydanticCustomError("too_short", message)
        return value

    return AfterValidator(check)


def one_of(choices: tuple[tuple[str, str], ...], message: str) -> AfterValidator:
    """Reject values that are not one of the ``choices`` keys."""
    allowed = {value for value, _ in choices}

    def check(value: str) -> str:
        if value not in allowed:
            raise PydanticCustomError("invalid_choice", message)
        return value

    return AfterValidator(check)


def disclosure(
    label: str,
    section: str,
    placeholder: str = "",
    widget: str = "textarea",
    required: bool = False,
    choices: tuple[tuple[str, str], ...] = (),
):
    extra = {"section": section, "widget": widget, "required": required}
    if choices:
        extra["choices"] = [list(choice) for choice in choices]
    return Field(default="", title=label, description=placeholder, json_schema_extra=extra)


class DisclosureRecord(BaseModel):
    # Whitespace is stripped before any length rule runs, so "   " counts as empty.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_default=True,
        extra="ignore",
        frozen=True,
    )

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


CompanyName = Annotated[str, min_length(2, "Company name must be at least 2 characters.")]
CompanySector = Annotated[str, min_length(2, "Company sector must be provided.")]


class SustainabilityReport(DisclosureRecord):
    company_name: CompanyName = disclosure(
        "Company name", "Company", "Company name", widget="input", required=True
    )
    company_sector: CompanySector = disclosure(
        "Sector", "Company", "Sector the company operates in", widget="input", required=True
    )

    sustainability_policy: str = disclosure(
        "Sustainability policy",
        "Governance and management",
        "Describe the company's sustainability policy",
    )
    integrated_sustainability: str = disclosure(
        "Sustainability in strategy",
        "Governance and management",
        "How is sustainability integrated into the corporate strategy?",
    )

    environmental_practices: str = disclosure(
        "Environmental practices",
        "Environmental performance",
        "What are the main environmental practices adopted by the company?",
    )
    environmental_indicators: str = disclosure(
        "Environmental indicators",
        "Environmental performance",
        "Which environmental indicators are being monitored?",
    )
    environmental_results: str = disclosure(
        "Environmental results",
        "Environmental performance",
        "What were the results against the environmental indicators?",
    )
    environmental_certifications: str = disclosure(
        "Environmental certifications",
        "Environmental performance",
        "Does the company hold environmental certifications? Which ones?",
    )

    human_rights_policies: str = disclosure(
        "Human rights policies",
        "Social performance",
        "What are the company's policies regarding human rights?",
    )
    social_initiatives: str = disclosure(
        "Social initiatives",
        "Social performance",
        "Are there social or cultural initiatives with the local community?",
    )
    employee_satisfaction: str = disclosure(
        "Employee satisfaction",
        "Social performance",
        "Does the company assess employee satisfaction?",
    )

    sustainable_investments: str = disclosure(
        "Sustainable investments",
        "Economic performance",
        "Which investments were made in sustainable projects?",
    )
    sustainability_financial_goals: str = disclosure(
        "Financial sustainability goals",
        "Economic performance",
        "Which financial goals are tied to sustainability?",
    )

    supplier_sustainability_evaluations: str = disclosure(
        "Supplier evaluations",
        "Supply chain",
        "How are suppliers evaluated on sustainability criteria?",
    )

    applicable_laws: str = disclosure(
        "Applicable laws and standards",
        "Legal compliance",
        "Which environmental and social regulations apply to the company?",
    )

    future_sustainability_goals: str = disclosure(
        "Future sustainability goals",
        "Future goals",
        "What are the company's sustainability commitments for the coming years?",
    )

    communication_with_stakeholders: str = disclosure(
        "Stakeholder communication",
        "Communication and transparency",
        "How does the company report sustainability results to stakeholders?",
    )
    stakeholder_feedback_channels: str = disclosure(
        "Feedback channels",
        "Communication and transparency",
        "Which channels do stakeholders use to give feedback?",
    )

    additional_information: str = disclosure(
        "Additional information", "Notes", "Anything else worth reporting"
    )


ESG_PRACTICE_CHOICES = (("", "Not answered"), ("yes", "Yes"), ("no", "No"))
EsgFlag = Annotated[str, one_of(ESG_PRACTICE_CHOICES, "ESG practices must be answered with yes or no.")]


class GenerationReport(DisclosureRecord):
    company_name: CompanyName = disclosure(
        "Company name", "Company", "Company name", widget="input", required=True
    )
    company_sector: CompanySector = disclosure(
        "Sector", "Company", "Sector the company operates in", widget="input", required=True
    )
    overview: Annotated[str, min_length(10, "Overview must be at least 10 characters.")] = disclosure(
        "Overview",
        "Company",
        "Summarize the company's activities and sustainability context",
        required=True,
    )

    carbon_emissions: str = disclosure(
        "Carbon emissions",
        "Environmental performance",
        "Annual emissions (e.g. tCO2e, scopes covered)",
        widget="input",
    )
    water_consumption: str = disclosure(
        "Water consumption",
        "Environmental performance",
        "Annual water consumption (e.g. m3)",
        widget="input",
    )
    waste_management: str = disclosure(
        "Waste management",
        "Environmental performance",
        "How is waste handled, recycled or disposed of?",
    )

    esg_practices: EsgFlag = disclosure(
        "Formal ESG practices",
        "Governance and management",
        widget="select",
        choices=ESG_PRACTICE_CHOICES,
    )
    esg_description: str = disclosure(
        "ESG practices description",
        "Governance and management",
        "Describe the ESG practices in place",
    )

    additional_information: str = disclosure(
        "Additional information", "Notes", "Anything else worth reporting"
    )


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    section: str
    placeholder: str
    widget: str
    required: bool
    choices: tuple[tuple[str, str], ...] = ()


def field_specs(model: type[DisclosureRecord]) -> list[FieldSpec]:
    """Rendering metadata for every field of ``model``, in declaration order."""
    specs = []
    for name, info in model.model_fields.items():
        extra = info.json_schema_extra or {}
        specs.append(
            FieldSpec(
                name=info.alias or to_camel(name),
                label=info.title or name,
                section=extra.get("section", ""),
                placeholder=info.description or "",
                widget=extra.get("widget", "textarea"),
                required=bool(extra.get("required", False)),
                choices=tuple(tuple(choice) for choice in extra.get("choices", ())),
            )
        )
    return specs


def field_names(model: type[DisclosureRecord]) -> list[str]:
    return [spec.name for spec in field_specs(model)]


def sections(model: type[DisclosureRecord]) -> list[tuple[str, list[FieldSpec]]]:
    """Fields grouped by section, keeping first-seen section order."""
    grouped: dict[str, list[FieldSpec]] = {}
    for spec in field_specs(model):
        grouped.setdefault(spec.section, []).append(spec)
    return list(grouped.items())
