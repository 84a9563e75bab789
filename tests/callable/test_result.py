"""Tests for the CallableResult model."""

import pydantic
import pytest

from form_api.callable import CallableResult


class TestCallableResult:
    """Tests for CallableResult model."""

    def test_defaults(self) -> None:
        result = CallableResult()

        assert result.schema_version == "1.0"
        assert result.items == []
        assert result.stats == {}

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            CallableResult(items=[], items_ref="artifact://bucket/key")

    def test_to_dict_with_stats(self) -> None:
        result = CallableResult(items=[{"a": 1}], stats={"input": 1, "output": 1})

        assert result.to_dict() == {
            "schema_version": "1.0",
            "items": [{"a": 1}],
            "stats": {"input": 1, "output": 1},
        }

    def test_to_dict_omits_empty_stats(self) -> None:
        assert CallableResult(items=[]).to_dict() == {"schema_version": "1.0", "items": []}
