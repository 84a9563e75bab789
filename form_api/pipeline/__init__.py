"""Response processing pipeline."""

from form_api.pipeline.orchestrator import (
    Pipeline,
    PipelineConfig,
    ProcessingResult,
    ResponseStatus,
)

__all__ = ["Pipeline", "PipelineConfig", "ProcessingResult", "ResponseStatus"]
