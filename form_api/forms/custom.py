"""Custom form builder.

A custom form is a titled, ordered list of elements. Interactive elements
(toggle, slider, step_slider, dropdown, input) occupy one slot each in the
client's response array, in declaration order. Readonly elements (label,
header, divider) have no slot in the response but still appear in the
processed output, mapped to None.

Caller-supplied text, options and defaults are stored as given; only the
client response is validated.
"""

import logging
from typing import Any

from pydantic import BaseModel

from form_api.elements import (
    DividerElement,
    DropdownElement,
    Element,
    HeaderElement,
    InputElement,
    LabelElement,
    SliderElement,
    StepSliderElement,
    ToggleElement,
)
from form_api.forms.base import Form, FormCallback, FormValidationError
from form_api.validation import ElementValidator, FormValue

logger = logging.getLogger(__name__)

# Marker for "not supplied" slider step/default and step slider default.
UNSET = -1


class ElementMeta(BaseModel):
    """Per-element bookkeeping used when processing a response."""

    label: str
    readonly: bool
    validator: ElementValidator


class CustomForm(Form):
    """Builder for ``custom_form`` payloads and their responses."""

    def __init__(self, callback: FormCallback | None = None) -> None:
        super().__init__(callback)
        self.data["type"] = "custom_form"
        self.data["title"] = ""
        self.data["content"] = []
        self._elements: list[Element] = []
        self._meta: list[ElementMeta] = []

    def set_title(self, title: str) -> None:
        self.data["title"] = title

    def get_title(self) -> str:
        return self.data["title"]

    def get_elements(self) -> list[Element]:
        return list(self._elements)

    def get_labels(self) -> list[str]:
        return [meta.label for meta in self._meta]

    def get_element_count(self) -> int:
        return len(self._elements)

    def get_expected_response_size(self) -> int:
        """Number of values the client must send back."""
        return sum(1 for meta in self._meta if not meta.readonly)

    def add_label(self, text: str, label: str | None = None) -> None:
        """Add a read-only text label."""
        self._add_element(
            LabelElement.model_construct(text=text),
            label,
            ElementValidator.exactly_null(),
        )

    def add_toggle(
        self,
        text: str,
        default: bool | None = None,
        label: str | None = None,
    ) -> None:
        """Add an on/off toggle."""
        self._add_element(
            ToggleElement.model_construct(text=text, default=default),
            label,
            ElementValidator.is_bool(),
        )

    def add_slider(
        self,
        text: str,
        min: int | float,
        max: int | float,
        step: int | float = UNSET,
        default: int | float = UNSET,
        label: str | None = None,
    ) -> None:
        """Add a numeric slider.

        Args:
            text: Caption shown next to the slider.
            min: Lowest selectable value.
            max: Highest selectable value.
            step: Increment between values, or UNSET to let the client decide.
            default: Initial value, or UNSET.
            label: Output key; defaults to the element index.
        """
        self._add_element(
            SliderElement.model_construct(
                text=text,
                min=min,
                max=max,
                step=None if step == UNSET else step,
                default=None if default == UNSET else default,
            ),
            label,
            ElementValidator.numeric_range(min, max),
        )

    def add_step_slider(
        self,
        text: str,
        steps: list[str],
        default_index: int = UNSET,
        label: str | None = None,
    ) -> None:
        """Add a slider over a fixed list of steps.

        The client responds with the index of the selected step.
        """
        steps = list(steps)
        self._add_element(
            StepSliderElement.model_construct(
                text=text,
                steps=steps,
                default=None if default_index == UNSET else default_index,
            ),
            label,
            ElementValidator.index_in_range(len(steps)),
        )

    def add_dropdown(
        self,
        text: str,
        options: list[str],
        default: int | None = None,
        label: str | None = None,
    ) -> None:
        """Add a dropdown. The client responds with the selected option index."""
        options = list(options)
        self._add_element(
            DropdownElement.model_construct(text=text, options=options, default=default),
            label,
            ElementValidator.index_in_range(len(options)),
        )

    def add_input(
        self,
        text: str,
        placeholder: str = "",
        default: str | None = None,
        label: str | None = None,
    ) -> None:
        """Add a free text input."""
        self._add_element(
            InputElement.model_construct(text=text, placeholder=placeholder, default=default),
            label,
            ElementValidator.is_string(),
        )

    def add_divider(self) -> None:
        """Add a read-only divider. Dividers are always labelled by index."""
        self._add_element(
            DividerElement.model_construct(),
            None,
            ElementValidator.exactly_null(),
        )

    def add_header(self, text: str, label: str | None = None) -> None:
        """Add a read-only header."""
        self._add_element(
            HeaderElement.model_construct(text=text),
            label,
            ElementValidator.exactly_null(),
        )

    def process_data(self, data: Any) -> dict[str, FormValue] | None:
        """Validate a raw client response and map it to element labels.

        Args:
            data: None if the client closed the form, otherwise a sequence
                with one value per non-readonly element, in declaration order.

        Returns:
            None for a closed form, otherwise a dict with one entry per
            element keyed by label. Readonly elements map to None.

        Raises:
            FormValidationError: If the response is not a sequence, has the
                wrong size, or holds a value its element does not accept.
        """
        if data is None:
            return None
        if not isinstance(data, (list, tuple)):
            raise FormValidationError(
                f"Expected a sequence response, got {type(data).__name__}"
            )

        expected_count = self.get_expected_response_size()
        if len(data) != expected_count:
            raise FormValidationError(
                f"Expected a sequence response with the size {expected_count}, "
                f"got {len(data)}"
            )

        processed: dict[str, FormValue] = {}
        cursor = 0
        for meta in self._meta:
            if meta.readonly:
                processed[meta.label] = None
                continue

            value = data[cursor]
            if not meta.validator.accepts(value):
                raise FormValidationError(
                    f"Invalid type given for element {meta.label}"
                )
            processed[meta.label] = value
            cursor += 1

        logger.debug(
            "Processed response for form %r: %d values", self.get_title(), len(processed)
        )
        return processed

    def _add_element(
        self,
        element: Element,
        label: str | None,
        validator: ElementValidator,
    ) -> None:
        """Append a descriptor and its metadata together."""
        resolved_label = label if label is not None else str(len(self._meta))
        if resolved_label in self.get_labels():
            logger.warning(
                "Duplicate label %r in form %r; the later element wins in responses",
                resolved_label,
                self.get_title(),
            )

        meta = ElementMeta.model_construct(
            label=resolved_label,
            readonly=element.readonly,
            validator=validator,
        )
        self.data["content"].append(element.to_dict())
        self._elements.append(element)
        self._meta.append(meta)
