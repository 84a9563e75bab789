"""Pydantic models for custom form element descriptors.

A descriptor is the serializable record sent to the client for one UI
element. Optional display fields are omitted from the serialized form when
they are unset, with the exception of ``input.default`` which the client
always expects (possibly as null).
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

ElementType = Literal[
    "label",
    "toggle",
    "slider",
    "step_slider",
    "dropdown",
    "input",
    "header",
    "divider",
]

# Element types that have no slot in the client's response array.
READONLY_TYPES: frozenset[str] = frozenset({"label", "header", "divider"})


class Element(BaseModel):
    """Base class for all element descriptors."""

    type: str
    text: str

    model_config = ConfigDict(extra="forbid")

    @property
    def readonly(self) -> bool:
        """Whether the client omits this element from its response."""
        return self.type in READONLY_TYPES

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the client-facing shape, dropping unset fields.

        Values are emitted exactly as stored, without coercion.
        """
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if getattr(self, name) is not None
        }


class LabelElement(Element):
    """Plain read-only text."""

    type: Literal["label"] = "label"


class HeaderElement(Element):
    """Read-only text rendered with a larger font."""

    type: Literal["header"] = "header"


class DividerElement(Element):
    """Read-only horizontal separator."""

    type: Literal["divider"] = "divider"
    text: str = ""


class ToggleElement(Element):
    """On/off switch."""

    type: Literal["toggle"] = "toggle"
    default: bool | None = None


class SliderElement(Element):
    """Numeric slider between min and max."""

    type: Literal["slider"] = "slider"
    min: int | float
    max: int | float
    step: int | float | None = None
    default: int | float | None = None


class StepSliderElement(Element):
    """Slider over a fixed list of labelled steps."""

    type: Literal["step_slider"] = "step_slider"
    steps: list[str]
    default: int | None = None


class DropdownElement(Element):
    """Single choice from a list of options."""

    type: Literal["dropdown"] = "dropdown"
    options: list[str]
    default: int | None = None


class InputElement(Element):
    """Free text input."""

    type: Literal["input"] = "input"
    placeholder: str = ""
    default: str | None = None

    def to_dict(self) -> dict[str, Any]:
        # default is part of the wire shape even when null
        return {name: getattr(self, name) for name in type(self).model_fields}
