"""Form abstractions and the custom form builder."""

from form_api.forms.base import Form, FormCallback, FormValidationError
from form_api.forms.custom import UNSET, CustomForm, ElementMeta

__all__ = [
    "UNSET",
    "CustomForm",
    "ElementMeta",
    "Form",
    "FormCallback",
    "FormValidationError",
]
