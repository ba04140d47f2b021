"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

import unicodedata

from province_migrate.common.errors import ConfigError


def _assert_mapping(obj: object, ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def validate_directory_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    _assert_mapping(cfg, "directory config")
    top_required = {"api", "output"}
    _assert_required_keys(cfg, top_required, "directory config")
    _assert_no_unknown_keys(cfg, top_required, "directory config", allow_unknown)

    api = cfg["api"]
    _assert_mapping(api, "api")
    api_required = {"base_url", "api_key", "api_key_header", "timeout", "request_delay_seconds"}
    _assert_required_keys(api, api_required, "api")
    _assert_no_unknown_keys(api, api_required, "api", allow_unknown)
    _assert_mapping(api["timeout"], "api.timeout")
    _assert_required_keys(api["timeout"], {"connect", "read"}, "api.timeout")

    if not str(api["base_url"]).startswith(("http://", "https://")):
        raise ConfigError(f"api.base_url must be an http(s) URL: {api['base_url']}")
    if float(api["request_delay_seconds"]) < 0:
        raise ConfigError("api.request_delay_seconds must be >= 0")

    output = cfg["output"]
    _assert_mapping(output, "output")
    output_required = {"index_filename", "region_dir"}
    _assert_required_keys(output, output_required, "output")
    _assert_no_unknown_keys(output, output_required, "output", allow_unknown)

    return cfg


def validate_code_overrides_config(cfg: dict) -> dict[str, str]:
    _assert_mapping(cfg, "code overrides config")
    _assert_required_keys(cfg, {"overrides"}, "code overrides config")
    overrides = cfg["overrides"] or {}
    _assert_mapping(overrides, "overrides")

    seen: dict[str, str] = {}
    for name, code in overrides.items():
        if not isinstance(code, str) or not code:
            raise ConfigError(f"Override for {name!r} must be a non-empty string")
        if code in seen:
            raise ConfigError(f"Duplicate override code {code!r} for {seen[code]!r} and {name!r}")
        seen[code] = name

    return {unicodedata.normalize("NFC", str(name)): code for name, code in overrides.items()}
