from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from livegen.config.models import EngineConfig


class ConfigError(ValueError):
    # Raised for invalid engine config or script files (fail fast).
    pass


def load_yaml(path: Path) -> object:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc


def load_yaml_config(path: Path) -> dict[str, object]:
    # Returns a raw mapping for validation; an empty file is an empty config.
    raw = load_yaml(path)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def load_engine_config(path: Path | None) -> EngineConfig:
    if path is None:
        return EngineConfig()
    try:
        return EngineConfig.model_validate(load_yaml_config(path))
    except ValidationError as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def load_script(path: Path) -> list[object]:
    # Scripts are statement lists, either bare or under a top-level "statements" key.
    raw = load_yaml(path)
    if isinstance(raw, dict):
        if set(raw) != {"statements"}:
            raise ConfigError("Script mapping must contain only a 'statements' list")
        raw = raw["statements"]
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigError("Script must be a list of statements")
    return raw
