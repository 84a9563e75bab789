"""Form definition registry."""

from form_api.registry.builder import build_form
from form_api.registry.forms import (
    FormDefinitionError,
    FormNotFoundError,
    FormRegistry,
    load_definition,
)
from form_api.registry.models import ElementSpec, FormDefinition

__all__ = [
    "ElementSpec",
    "FormDefinition",
    "FormDefinitionError",
    "FormNotFoundError",
    "FormRegistry",
    "build_form",
    "load_definition",
]
