from pathlib import Path

import pytest

from province_migrate.common.config_loader import DEFAULT_CONFIG_DIR, load_config
from province_migrate.common.errors import ConfigError


def test_load_bundled_config():
    bundle = load_config()

    assert bundle.directory["api"]["base_url"].startswith("https://")
    assert bundle.directory["api"]["api_key_header"] == "apikey"
    assert bundle.directory["api"]["request_delay_seconds"] == 0.15
    assert bundle.directory["output"] == {"index_filename": "province.json", "region_dir": "provinces_v2"}
    assert len(bundle.code_overrides) == 34
    assert bundle.code_overrides["Hà Nội"] == "HN"
    assert bundle.code_overrides["Nghệ An"] == "NA"


def test_code_overrides_are_read_only():
    bundle = load_config()

    with pytest.raises(TypeError):
        bundle.code_overrides["Hà Nam"] = "HNA"


def test_overlay_values_are_merged(tmp_path: Path):
    (tmp_path / "directory.yml").write_text("api:\n  request_delay_seconds: 0\n", encoding="utf-8")
    (tmp_path / "code_overrides.yml").write_text('overrides:\n  "Hà Nam": "HNM"\n', encoding="utf-8")

    bundle = load_config(overlay_config_dir=tmp_path)

    assert bundle.directory["api"]["request_delay_seconds"] == 0
    assert bundle.directory["api"]["api_key_header"] == "apikey"
    assert bundle.code_overrides["Hà Nam"] == "HNM"
    assert len(bundle.code_overrides) == 35


def _write_config(config_dir: Path, directory: str, overrides: str) -> None:
    config_dir.mkdir()
    (config_dir / "directory.yml").write_text(directory, encoding="utf-8")
    (config_dir / "code_overrides.yml").write_text(overrides, encoding="utf-8")


def test_missing_keys_raise_config_error(tmp_path: Path):
    _write_config(
        tmp_path / "cfg",
        "api:\n  base_url: https://example.test\noutput:\n  index_filename: p.json\n  region_dir: out\n",
        "overrides: {}\n",
    )

    with pytest.raises(ConfigError, match="Missing keys in api"):
        load_config(tmp_path / "cfg")


def test_duplicate_override_codes_raise_config_error(tmp_path: Path):
    directory = (DEFAULT_CONFIG_DIR / "directory.yml").read_text(encoding="utf-8")
    _write_config(tmp_path / "cfg", directory, 'overrides:\n  "Hà Nội": "HN"\n  "Hà Nam": "HN"\n')

    with pytest.raises(ConfigError, match="Duplicate override code"):
        load_config(tmp_path / "cfg")


def test_missing_config_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(tmp_path)
