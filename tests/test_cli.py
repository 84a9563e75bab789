"""Tests for the form-api CLI."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from form_api import __version__
from form_api.cli import app

runner = CliRunner()


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"form-api version {__version__}" in result.output


class TestRender:
    """Tests for the render command."""

    def test_render_latest(self, registry_path: Path) -> None:
        result = runner.invoke(app, ["render", "player_settings", "--registry", str(registry_path)])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["type"] == "custom_form"
        assert payload["title"] == "Settings"
        assert len(payload["content"]) == 8

    def test_render_pinned_version(self, registry_path: Path) -> None:
        result = runner.invoke(
            app,
            ["render", "player_settings", "--form-version", "1.0.0", "--registry", str(registry_path)],
        )

        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["content"]) == 4

    def test_render_registry_from_env(
        self, registry_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FORM_API_REGISTRY", str(registry_path))

        result = runner.invoke(app, ["render", "feedback"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["title"] == "Feedback"

    def test_render_unknown_form(self, registry_path: Path) -> None:
        result = runner.invoke(app, ["render", "nope", "--registry", str(registry_path)])

        assert result.exit_code == 1
        assert "No versions found" in result.output

    def test_render_mistyped_default(self, tmp_path: Path, feedback_definition: dict) -> None:
        feedback_definition["elements"][1]["default"] = 5
        form_dir = tmp_path / "forms" / "feedback"
        form_dir.mkdir(parents=True)
        (form_dir / "1-0-0.json").write_text(json.dumps(feedback_definition))

        result = runner.invoke(app, ["render", "feedback", "--registry", str(tmp_path)])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Error" in result.output

    def test_render_missing_registry(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", "feedback", "--registry", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Form registry not found" in result.output


class TestProcess:
    """Tests for the process command."""

    @pytest.fixture
    def input_path(self, tmp_path: Path) -> Path:
        path = tmp_path / "responses.jsonl"
        lines = [
            json.dumps({"submission_id": "a", "player": "alex", "response": [True, 42]}),
            json.dumps({"submission_id": "b", "response": None}),
            "",
            "not json",
            json.dumps({"submission_id": "c", "response": [True, 101]}),
            json.dumps([True, 42]),
        ]
        path.write_text("\n".join(lines) + "\n")
        return path

    def test_process(self, registry_path: Path, input_path: Path, tmp_path: Path) -> None:
        output_path = tmp_path / "out.jsonl"

        result = runner.invoke(
            app,
            [
                "process",
                "--form", "feedback",
                "--in", str(input_path),
                "--out", str(output_path),
                "--registry", str(registry_path),
            ],
        )

        assert result.exit_code == 0
        assert "Summary" in result.output
        assert "Invalid JSON on line 4" in result.output
        records = [json.loads(line) for line in output_path.read_text().splitlines()]
        assert [r["submission_id"] for r in records] == ["a", "b", "c", "unknown"]
        assert [r["status"] for r in records] == ["ok", "cancelled", "invalid", "invalid"]
        assert "Expected a record object" in records[3]["error"]
        assert records[0]["values"] == {"0": None, "1": True, "2": 42}
        assert records[0]["player"] == "alex"

    def test_process_missing_input(self, registry_path: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "process",
                "--form", "feedback",
                "--in", str(tmp_path / "missing.jsonl"),
                "--out", str(tmp_path / "out.jsonl"),
                "--registry", str(registry_path),
            ],
        )

        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_process_unknown_form(
        self, registry_path: Path, input_path: Path, tmp_path: Path
    ) -> None:
        result = runner.invoke(
            app,
            [
                "process",
                "--form", "nope",
                "--in", str(input_path),
                "--out", str(tmp_path / "out.jsonl"),
                "--registry", str(registry_path),
            ],
        )

        assert result.exit_code == 1
        assert "Error loading form" in result.output


class TestValidate:
    """Tests for the validate command."""

    def test_valid_definition(self, registry_path: Path, schema_path: Path) -> None:
        definition = registry_path / "forms" / "player_settings" / "1-1-0.json"

        result = runner.invoke(app, ["validate", str(definition), "--schema", str(schema_path)])

        assert result.exit_code == 0
        assert "Valid" in result.output

    def test_invalid_definition(
        self, tmp_path: Path, schema_path: Path, feedback_definition: dict
    ) -> None:
        del feedback_definition["elements"][2]["min"]
        path = tmp_path / "broken.json"
        path.write_text(json.dumps(feedback_definition))

        result = runner.invoke(app, ["validate", str(path), "--schema", str(schema_path)])

        assert result.exit_code == 1
        assert "Invalid" in result.output

    def test_missing_definition(self, tmp_path: Path, schema_path: Path) -> None:
        result = runner.invoke(
            app, ["validate", str(tmp_path / "missing.json"), "--schema", str(schema_path)]
        )

        assert result.exit_code == 1
        assert "Definition file not found" in result.output

    def test_missing_schema(self, registry_path: Path, tmp_path: Path) -> None:
        definition = registry_path / "forms" / "feedback" / "1-0-0.json"

        result = runner.invoke(
            app, ["validate", str(definition), "--schema", str(tmp_path / "none.json")]
        )

        assert result.exit_code == 1
        assert "Schema file not found" in result.output
