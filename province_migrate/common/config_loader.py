"""Configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from province_migrate.common.errors import ConfigError
from province_migrate.common.fs import read_yaml
from province_migrate.common.schema import validate_code_overrides_config, validate_directory_config

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


@dataclass(frozen=True)
class ConfigBundle:
    directory: dict
    code_overrides: Mapping[str, str]


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Missing config file: {path}")
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    return _deep_merge(base, overlay)


def load_config(
    config_dir: Path = DEFAULT_CONFIG_DIR,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> ConfigBundle:
    def overlay_for(name: str) -> Path | None:
        if overlay_config_dir is None:
            return None
        return overlay_config_dir / name

    directory = validate_directory_config(
        _load_yaml_with_overlay(config_dir / "directory.yml", overlay_for("directory.yml")),
        allow_unknown=allow_unknown,
    )
    overrides = validate_code_overrides_config(
        _load_yaml_with_overlay(config_dir / "code_overrides.yml", overlay_for("code_overrides.yml"))
    )
    return ConfigBundle(directory=directory, code_overrides=MappingProxyType(overrides))
