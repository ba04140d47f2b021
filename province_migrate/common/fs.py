"""Filesystem helpers."""

from __future__ import annotations

import json
import os
from pathlib import Path


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_yaml(path: Path):
    import yaml

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def write_json(path: Path, payload, *, sort_keys: bool = False) -> None:
    """Write ``payload`` to ``path`` so that readers see the old file or the new one.

    A failed write leaves nothing behind at ``path`` it did not already hold.
    """
    ensure_dir(path.parent)
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2, sort_keys=sort_keys)
            f.write("\n")
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def read_json(path: Path):
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)
