"""Global configuration for form-api.

Configuration lives in ``$FORM_API_HOME/config.yaml`` (default
``~/.config/form-api/config.yaml``). Every setting is optional.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel

DEFAULT_REGISTRY_DIRNAME = "form-registry"


class GlobalConfig(BaseModel):
    """Settings read from config.yaml."""

    default_form_registry_path: str | None = None
    default_schema_path: str | None = None
    log_level: str = "WARNING"


def get_form_api_home() -> Path:
    """Return the configuration home directory."""
    env_home = os.environ.get("FORM_API_HOME")
    if env_home:
        return Path(env_home)
    return Path.home() / ".config" / "form-api"


def get_config_path() -> Path:
    return get_form_api_home() / "config.yaml"


def load_global_config() -> GlobalConfig:
    """Load config.yaml, returning defaults if it does not exist."""
    config_path = get_config_path()
    if not config_path.exists():
        return GlobalConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}
    return GlobalConfig.model_validate(data)


def get_registry_path(override: Path | str | None = None) -> Path:
    """Resolve the form registry path.

    Order: explicit override, FORM_API_REGISTRY, global config,
    then ./form-registry.
    """
    if override is not None:
        return Path(override)

    env_path = os.environ.get("FORM_API_REGISTRY")
    if env_path:
        return Path(env_path)

    config = load_global_config()
    if config.default_form_registry_path:
        return Path(config.default_form_registry_path)

    return Path(DEFAULT_REGISTRY_DIRNAME)


def get_schema_path(override: Path | str | None = None) -> Path | None:
    """Resolve the form definition schema path, if one is available."""
    if override is not None:
        return Path(override)

    config = load_global_config()
    if config.default_schema_path:
        return Path(config.default_schema_path)

    default = Path("schemas") / "form_definition.schema.json"
    return default if default.exists() else None
