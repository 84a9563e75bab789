"""Pydantic models for stored custom form definitions."""

from typing import Literal

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from form_api.elements import READONLY_TYPES, ElementType

# Fields each element type requires beyond type/text.
_REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "slider": ("min", "max"),
    "step_slider": ("steps",),
    "dropdown": ("options",),
}


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# Check applied to ``default`` per element type, with its description.
_DEFAULT_CHECKS = {
    "toggle": (lambda v: isinstance(v, bool), "a boolean"),
    "slider": (_is_number, "a number"),
    "step_slider": (_is_index, "an integer index"),
    "dropdown": (_is_index, "an integer index"),
    "input": (lambda v: isinstance(v, str), "a string"),
}


class ElementSpec(BaseModel):
    """One element in a form definition.

    Carries the union of all descriptor fields; which ones apply depends
    on ``type``.
    """

    type: ElementType
    text: str = ""
    label: str | None = None
    default: bool | int | float | str | None = None
    min: int | float | None = None
    max: int | float | None = None
    step: int | float | None = None
    steps: list[str] | None = None
    options: list[str] | None = None
    placeholder: str | None = None

    @field_validator("min", "max", "step", mode="before")
    @classmethod
    def check_numeric(cls, value: object, info: ValidationInfo) -> object:
        """Reject non-numeric bounds before pydantic can coerce them."""
        if value is not None and not _is_number(value):
            raise ValueError(f"'{info.field_name}' must be a number")
        return value

    @model_validator(mode="after")
    def check_required_fields(self) -> "ElementSpec":
        """Ensure the fields the element type needs are present and typed."""
        for field_name in _REQUIRED_FIELDS.get(self.type, ()):
            if getattr(self, field_name) is None:
                raise ValueError(f"{self.type} element requires '{field_name}'")

        if self.default is not None:
            if self.type in READONLY_TYPES:
                raise ValueError(f"{self.type} elements cannot carry a default")
            check, expected = _DEFAULT_CHECKS[self.type]
            if not check(self.default):
                raise ValueError(f"{self.type} element 'default' must be {expected}")

        if self.type == "divider" and self.label is not None:
            raise ValueError("divider elements cannot carry a label")
        return self


class FormDefinition(BaseModel):
    """Complete custom form definition."""

    type: Literal["custom_form"]
    form_id: str
    version: str
    title: str = ""
    description: str | None = None
    elements: list[ElementSpec] = Field(default_factory=list)
