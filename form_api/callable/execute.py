"""Execute interface for the form-api callable protocol.

Provides an in-proc execute() function for hosts that want to validate a
batch of responses without going through the CLI.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from form_api.callable.result import CallableResult
from form_api.config import get_registry_path
from form_api.io import read_jsonl
from form_api.pipeline import Pipeline, PipelineConfig, ResponseStatus
from form_api.registry import load_definition


def execute(params: dict[str, Any]) -> dict[str, Any]:
    """Validate response records against a custom form.

    Args:
        params: Dictionary containing:
            - form_id: str - Form to load from the registry, or
            - form: dict - Inline form definition (takes precedence)
            - responses: list[dict] | dict - Response records, each with
              ``submission_id``, optional ``player`` and ``response``, or
            - responses_path: str - JSONL file of response records
            - config: dict - Optional configuration overrides:
                - registry_path: str - Override form registry path
                - form_version: str - Specific version (default: latest)
                - schema_path: str - Definition schema to validate against

    Returns:
        CallableResult dict with:
            - schema_version: "1.0"
            - items: list[dict] - ProcessingResults serialized
            - stats: dict - input/output/cancelled/errors counts

    Raises:
        ValueError: If required parameters are missing or invalid.
        FormNotFoundError: If the form is not in the registry.
        FormDefinitionError: If the definition fails validation.
    """
    form = params.get("form")
    form_id = params.get("form_id")
    if form is None and not form_id:
        raise ValueError("Either 'form' or 'form_id' is required in params")

    responses = params.get("responses")
    if responses is None and params.get("responses_path"):
        responses = list(read_jsonl(params["responses_path"]))
    if responses is None:
        raise ValueError("'responses' is required in params")
    if isinstance(responses, dict):
        responses = [responses]
    elif not isinstance(responses, list):
        raise ValueError("'responses' must be a response record or list of records")

    config = params.get("config", {})
    schema_path = config.get("schema_path")

    if form is not None:
        schema = None
        if schema_path:
            with open(schema_path) as f:
                schema = json.load(f)
        pipeline = Pipeline.from_definition(load_definition(form, schema=schema))
    else:
        pipeline = Pipeline(
            PipelineConfig(
                registry_path=get_registry_path(config.get("registry_path")),
                form_id=form_id,
                form_version=config.get("form_version"),
                schema_path=Path(schema_path) if schema_path else None,
            )
        )

    results = pipeline.process_batch(responses)

    stats = {
        "input": len(results),
        "output": sum(1 for r in results if r.status == ResponseStatus.OK),
        "cancelled": sum(1 for r in results if r.status == ResponseStatus.CANCELLED),
        "errors": sum(1 for r in results if r.status == ResponseStatus.INVALID),
    }

    result = CallableResult(
        schema_version="1.0",
        items=[r.model_dump(mode="json") for r in results],
        stats=stats,
    )
    return result.to_dict()
