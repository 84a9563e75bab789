"""Build CustomForm instances from stored definitions."""

from form_api.forms import UNSET, CustomForm, FormCallback
from form_api.registry.models import ElementSpec, FormDefinition


def _add_element(form: CustomForm, spec: ElementSpec) -> None:
    if spec.type == "label":
        form.add_label(spec.text, label=spec.label)
    elif spec.type == "header":
        form.add_header(spec.text, label=spec.label)
    elif spec.type == "divider":
        form.add_divider()
    elif spec.type == "toggle":
        form.add_toggle(spec.text, default=spec.default, label=spec.label)
    elif spec.type == "slider":
        form.add_slider(
            spec.text,
            spec.min,
            spec.max,
            step=UNSET if spec.step is None else spec.step,
            default=UNSET if spec.default is None else spec.default,
            label=spec.label,
        )
    elif spec.type == "step_slider":
        form.add_step_slider(
            spec.text,
            spec.steps,
            default_index=UNSET if spec.default is None else spec.default,
            label=spec.label,
        )
    elif spec.type == "dropdown":
        form.add_dropdown(spec.text, spec.options, default=spec.default, label=spec.label)
    elif spec.type == "input":
        form.add_input(
            spec.text,
            placeholder=spec.placeholder or "",
            default=spec.default,
            label=spec.label,
        )
    else:
        raise ValueError(f"Unknown element type: {spec.type}")


def build_form(
    definition: FormDefinition,
    callback: FormCallback | None = None,
) -> CustomForm:
    """Create a CustomForm by replaying a definition's elements in order.

    Args:
        definition: The form definition.
        callback: Optional completion callback for the form.

    Returns:
        A populated CustomForm.
    """
    form = CustomForm(callback)
    form.set_title(definition.title)
    for spec in definition.elements:
        _add_element(form, spec)
    return form
