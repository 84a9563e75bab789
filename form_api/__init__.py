"""form-api: Builder and response validator for custom client forms."""

__version__ = "0.1.0"

# Callable imports must come after __version__ to avoid circular import
from form_api.callable import CallableResult, execute
from form_api.forms import CustomForm, Form, FormValidationError

__all__ = [
    "__version__",
    "CallableResult",
    "CustomForm",
    "Form",
    "FormValidationError",
    "execute",
]
