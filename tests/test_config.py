"""Tests for global configuration."""

from pathlib import Path

import pytest
import yaml

from form_api.config import (
    GlobalConfig,
    get_config_path,
    get_form_api_home,
    get_registry_path,
    get_schema_path,
    load_global_config,
)


def write_config(home: Path, data: dict) -> None:
    home.mkdir(parents=True, exist_ok=True)
    with open(home / "config.yaml", "w") as f:
        yaml.dump(data, f)


class TestConfig:
    """Tests for config loading and path resolution."""

    def test_home_from_env(self, isolated_config: Path) -> None:
        assert get_form_api_home() == isolated_config
        assert get_config_path() == isolated_config / "config.yaml"

    def test_home_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FORM_API_HOME")
        assert get_form_api_home() == Path.home() / ".config" / "form-api"

    def test_missing_config_uses_defaults(self) -> None:
        assert load_global_config() == GlobalConfig()

    def test_load_config(self, isolated_config: Path) -> None:
        write_config(isolated_config, {
            "default_form_registry_path": "/srv/forms",
            "log_level": "DEBUG",
        })

        config = load_global_config()

        assert config.default_form_registry_path == "/srv/forms"
        assert config.log_level == "DEBUG"

    def test_empty_config_file(self, isolated_config: Path) -> None:
        isolated_config.mkdir(parents=True)
        (isolated_config / "config.yaml").write_text("")

        assert load_global_config() == GlobalConfig()

    def test_registry_path_override_wins(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FORM_API_REGISTRY", "/env/forms")
        write_config(isolated_config, {"default_form_registry_path": "/cfg/forms"})

        assert get_registry_path("/cli/forms") == Path("/cli/forms")

    def test_registry_path_env_before_config(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FORM_API_REGISTRY", "/env/forms")
        write_config(isolated_config, {"default_form_registry_path": "/cfg/forms"})

        assert get_registry_path() == Path("/env/forms")

    def test_registry_path_from_config(self, isolated_config: Path) -> None:
        write_config(isolated_config, {"default_form_registry_path": "/cfg/forms"})

        assert get_registry_path() == Path("/cfg/forms")

    def test_registry_path_default(self) -> None:
        assert get_registry_path() == Path("form-registry")

    def test_schema_path_from_config(self, isolated_config: Path) -> None:
        write_config(isolated_config, {"default_schema_path": "/cfg/schema.json"})

        assert get_schema_path() == Path("/cfg/schema.json")

    def test_schema_path_absent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        assert get_schema_path() is None
