"""In-memory draft of a report form."""

from __future__ import annotations

from typing import Mapping

from report_form.schema import DisclosureRecord, field_names


class ReportDraft:
    """Field name -> string value for one form session.

    Every field starts as an empty string. Keys are the wire names of the
    record the draft belongs to.
    """

    def __init__(self, model: type[DisclosureRecord]):
        self.model = model
        self._fields = field_names(model)
        self._values = {name: "" for name in self._fields}

    @property
    def fields(self) -> list[str]:
        return list(self._fields)

    def update(self, name: str, value: str) -> None:
        if name not in self._values:
            raise KeyError(f"{self.model.__name__} has no field {name!r}")
        self._values[name] = "" if value is None else str(value)

    def load(self, data: Mapping[str, str]) -> None:
        """Copy matching keys from submitted form data; other keys are ignored."""
        for name in self._fields:
            if name in data:
                self.update(name, data[name])

    def get(self, name: str) -> str:
        return self._values[name]

    def values(self) -> dict[str, str]:
        return dict(self._values)

    def reset(self) -> None:
        self._values = {name: "" for name in self._fields}

    def is_empty(self) -> bool:
        return not any(self._values.values())

    def __repr__(self) -> str:
        filled = sum(1 for value in self._values.values() if value)
        return f"<ReportDraft {self.model.__name__} {filled}/{len(self._fields)} filled>"
