"""CallableResult model for the form-api callable protocol."""

from __future__ import annotations

from pydantic import BaseModel


class CallableResult(BaseModel):
    """Result returned by the form-api execute() interface.

    Attributes:
        schema_version: Version of the CallableResult schema.
        items: One processed record per input response.
        stats: Processing statistics.
    """

    schema_version: str = "1.0"
    items: list[dict] = []
    stats: dict = {}

    model_config = {"extra": "forbid"}

    def to_dict(self) -> dict:
        """Convert to dictionary, omitting empty stats."""
        result: dict = {"schema_version": self.schema_version, "items": self.items}
        if self.stats:
            result["stats"] = self.stats
        return result
