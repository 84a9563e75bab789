"""Form registry for loading and caching custom form definitions."""

import json
import logging
from pathlib import Path

import jsonschema
import pydantic

from form_api.registry.models import FormDefinition

logger = logging.getLogger(__name__)


class FormNotFoundError(Exception):
    """Raised when a form definition is not found."""

    pass


class FormDefinitionError(Exception):
    """Raised when a form definition fails validation."""

    pass


class FormRegistry:
    """Registry for loading and caching custom form definitions.

    Loads definitions from a directory structure:
        <registry_path>/forms/<form_id>/<version>.json

    Where version uses dashes instead of dots (e.g., 1-0-0.json for 1.0.0).
    """

    def __init__(
        self,
        registry_path: Path | str,
        schema_path: Path | str | None = None,
    ) -> None:
        """Initialize the form registry.

        Args:
            registry_path: Path to the form registry directory.
            schema_path: Optional path to the form definition schema.
        """
        self.registry_path = Path(registry_path)
        self.forms_path = self.registry_path / "forms"
        self._cache: dict[tuple[str, str], FormDefinition] = {}
        self._schema: dict | None = None

        if schema_path:
            with open(schema_path) as f:
                self._schema = json.load(f)

    def _get_definition_path(self, form_id: str, version: str) -> Path:
        filename = version.replace(".", "-") + ".json"
        return self.forms_path / form_id / filename

    def get(self, form_id: str, version: str) -> FormDefinition:
        """Get a form definition by ID and version.

        Raises:
            FormNotFoundError: If the definition file doesn't exist.
            FormDefinitionError: If the definition fails validation.
        """
        cache_key = (form_id, version)
        if cache_key in self._cache:
            return self._cache[cache_key]

        path = self._get_definition_path(form_id, version)
        if not path.exists():
            raise FormNotFoundError(
                f"Form definition not found: {form_id}@{version} (expected at {path})"
            )

        with open(path) as f:
            data = json.load(f)

        definition = load_definition(data, schema=self._schema, source=f"{form_id}@{version}")
        self._cache[cache_key] = definition
        logger.debug("Loaded form definition %s@%s from %s", form_id, version, path)
        return definition

    def list_forms(self) -> list[str]:
        """List all available form IDs."""
        if not self.forms_path.exists():
            return []
        return sorted(d.name for d in self.forms_path.iterdir() if d.is_dir())

    def list_versions(self, form_id: str) -> list[str]:
        """List all available versions for a form, oldest first."""
        form_path = self.forms_path / form_id
        if not form_path.exists():
            return []
        versions = [f.stem.replace("-", ".") for f in form_path.glob("*.json")]
        return sorted(versions, key=_version_key)

    def get_latest(self, form_id: str) -> FormDefinition:
        """Get the latest version of a form.

        Raises:
            FormNotFoundError: If no versions exist.
        """
        versions = self.list_versions(form_id)
        if not versions:
            raise FormNotFoundError(f"No versions found for form: {form_id}")
        return self.get(form_id, versions[-1])


def _version_key(version: str) -> tuple:
    return tuple(int(part) if part.isdigit() else part for part in version.split("."))


def load_definition(
    data: dict,
    schema: dict | None = None,
    source: str = "<inline>",
) -> FormDefinition:
    """Validate raw definition data and build a FormDefinition.

    Args:
        data: Parsed JSON definition.
        schema: Optional JSON Schema to check before model validation.
        source: Name used in error messages.

    Raises:
        FormDefinitionError: If schema or model validation fails.
    """
    if schema:
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise FormDefinitionError(
                f"Form definition validation failed for {source}: {e.message}"
            ) from e

    try:
        return FormDefinition.model_validate(data)
    except pydantic.ValidationError as e:
        raise FormDefinitionError(
            f"Form definition validation failed for {source}: {e}"
        ) from e
