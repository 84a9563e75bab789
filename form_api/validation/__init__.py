"""Value validators for custom form elements."""

from form_api.validation.validators import ElementValidator, FormValue, ValidatorKind

__all__ = [
    "ElementValidator",
    "FormValue",
    "ValidatorKind",
]
