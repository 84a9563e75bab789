"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point form-api at an empty config home for every test."""
    home = tmp_path / "form-api-home"
    monkeypatch.setenv("FORM_API_HOME", str(home))
    monkeypatch.delenv("FORM_API_REGISTRY", raising=False)
    monkeypatch.delenv("FORM_API_LOG_LEVEL", raising=False)
    return home


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def schemas_dir(project_root: Path) -> Path:
    """Return the schemas directory."""
    return project_root / "schemas"


@pytest.fixture
def registry_path(project_root: Path) -> Path:
    """Return the form registry path."""
    return project_root / "form-registry"


@pytest.fixture
def schema_path(schemas_dir: Path) -> Path:
    """Return the form definition schema path."""
    return schemas_dir / "form_definition.schema.json"


@pytest.fixture
def feedback_definition() -> dict:
    """Inline definition with a label, a toggle and a 0-100 slider."""
    return {
        "type": "custom_form",
        "form_id": "feedback",
        "version": "1.0.0",
        "title": "Feedback",
        "elements": [
            {"type": "label", "text": "info"},
            {"type": "toggle", "text": "agree"},
            {"type": "slider", "text": "age", "min": 0, "max": 100},
        ],
    }
