"""Tests for JSONL helpers."""

from pathlib import Path

import pytest

from form_api.io import read_jsonl, write_jsonl


class TestJsonl:
    """Tests for read_jsonl and write_jsonl."""

    def test_write_then_read(self, tmp_path: Path) -> None:
        path = tmp_path / "responses.jsonl"
        records = [
            {"submission_id": "a", "response": [True, 1]},
            {"submission_id": "b", "response": None},
        ]

        assert write_jsonl(path, records) == 2
        assert list(read_jsonl(path)) == records

    def test_read_skips_blank_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "responses.jsonl"
        path.write_text('{"a": 1}\n\n{"a": 2}\n')

        assert list(read_jsonl(path)) == [{"a": 1}, {"a": 2}]

    def test_read_invalid_line(self, tmp_path: Path) -> None:
        path = tmp_path / "responses.jsonl"
        path.write_text('{"a": 1}\nnot json\n')

        with pytest.raises(ValueError, match="line 2"):
            list(read_jsonl(path))

    def test_read_reports_invalid_lines_to_handler(self, tmp_path: Path) -> None:
        path = tmp_path / "responses.jsonl"
        path.write_text('{"a": 1}\nnot json\n\n{"a": 2}\n')
        seen = []

        records = list(read_jsonl(path, on_invalid=lambda line_num, e: seen.append(line_num)))

        assert records == [{"a": 1}, {"a": 2}]
        assert seen == [2]

    def test_read_yields_non_object_records(self, tmp_path: Path) -> None:
        path = tmp_path / "responses.jsonl"
        path.write_text('[true, 42]\nnull\n')

        assert list(read_jsonl(path)) == [[True, 42], None]
