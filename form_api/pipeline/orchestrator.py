"""Pipeline for processing custom form responses.

Resolves a form definition, builds the form once, and validates each
response record against it. Invalid responses are recorded per record
instead of aborting the batch.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from form_api.forms import FormValidationError
from form_api.registry import FormDefinition, FormRegistry, build_form
from form_api.validation import FormValue

logger = logging.getLogger(__name__)


class ResponseStatus(str, Enum):
    """Outcome of processing one response."""

    OK = "ok"  # Response matched the form
    CANCELLED = "cancelled"  # Client closed the form
    INVALID = "invalid"  # Response rejected by validation


class ProcessingResult(BaseModel):
    """Result of processing a single response record."""

    submission_id: str
    form_id: str
    form_version: str
    player: str | None = None
    status: ResponseStatus
    values: dict[str, FormValue] | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.status != ResponseStatus.INVALID


class PipelineConfig(BaseModel):
    """Configuration for the processing pipeline."""

    registry_path: Path | None = None
    form_id: str | None = None
    form_version: str | None = None
    schema_path: Path | None = None


class Pipeline:
    """Loads a form definition and processes responses against it."""

    def __init__(
        self,
        config: PipelineConfig,
        definition: FormDefinition | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: Pipeline configuration specifying registry and form.
            definition: Optional in-memory definition. When given, the
                registry is not consulted.

        Raises:
            ValueError: If neither a definition nor registry_path and
                form_id are provided.
        """
        self.config = config
        self.registry: FormRegistry | None = None

        if definition is None:
            if config.registry_path is None or config.form_id is None:
                raise ValueError(
                    "PipelineConfig needs registry_path and form_id when no definition is given"
                )
            self.registry = FormRegistry(config.registry_path, schema_path=config.schema_path)
            if config.form_version:
                definition = self.registry.get(config.form_id, config.form_version)
            else:
                definition = self.registry.get_latest(config.form_id)

        self.definition = definition
        self.form = build_form(definition)

    @classmethod
    def from_definition(cls, definition: FormDefinition) -> "Pipeline":
        """Create a pipeline for an in-memory form definition."""
        return cls(PipelineConfig(form_id=definition.form_id), definition=definition)

    def process(self, record: dict[str, Any]) -> ProcessingResult:
        """Process one response record.

        Args:
            record: Dict with keys:
                - submission_id: str (optional, defaults to "unknown")
                - player: str (optional)
                - response: list of raw values, or null if the form was closed

        Returns:
            ProcessingResult with the labelled values or the validation error.
            Records that are not dicts come back INVALID.
        """
        if not isinstance(record, dict):
            result = ProcessingResult(
                submission_id="unknown",
                form_id=self.definition.form_id,
                form_version=self.definition.version,
                status=ResponseStatus.INVALID,
                error=f"Expected a record object, got {type(record).__name__}",
            )
            logger.warning("Record rejected: %s", result.error)
            return result

        submission_id = str(record.get("submission_id", "unknown"))
        result = ProcessingResult(
            submission_id=submission_id,
            form_id=self.definition.form_id,
            form_version=self.definition.version,
            player=_player_name(record.get("player")),
            status=ResponseStatus.INVALID,
        )

        if "response" not in record:
            result.error = "Record has no 'response' field"
            logger.warning("Submission %s rejected: %s", submission_id, result.error)
            return result

        try:
            values = self.form.process_data(record["response"])
        except FormValidationError as e:
            result.error = str(e)
            logger.warning("Submission %s rejected: %s", submission_id, e)
            return result

        if values is None:
            result.status = ResponseStatus.CANCELLED
        else:
            result.status = ResponseStatus.OK
            result.values = values
        return result

    def process_batch(self, records: list[dict[str, Any]]) -> list[ProcessingResult]:
        """Process a batch of response records."""
        return [self.process(r) for r in records]


def _player_name(player: Any) -> str | None:
    return None if player is None else str(player)
