"""Element descriptors for custom forms."""

from form_api.elements.models import (
    READONLY_TYPES,
    DividerElement,
    DropdownElement,
    Element,
    ElementType,
    HeaderElement,
    InputElement,
    LabelElement,
    SliderElement,
    StepSliderElement,
    ToggleElement,
)

__all__ = [
    "READONLY_TYPES",
    "DividerElement",
    "DropdownElement",
    "Element",
    "ElementType",
    "HeaderElement",
    "InputElement",
    "LabelElement",
    "SliderElement",
    "StepSliderElement",
    "ToggleElement",
]
