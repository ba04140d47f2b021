"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from province_migrate.common.text import extract_prefix


@dataclass(frozen=True)
class RegionSummary:
    service_code: str
    name: str


@dataclass(frozen=True)
class AssignedRegion:
    service_code: str
    code: str
    name: str

    def index_entry(self, region_dir: str) -> dict[str, str]:
        return {"code": self.code, "file_path": f"./{region_dir}/{self.code}.json"}


@dataclass(frozen=True)
class LegacyAlias:
    service_code: str
    name: str
    full_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "vnCode": self.service_code,
            "name": self.name,
            "pre": extract_prefix(self.full_name, self.name),
        }


@dataclass(frozen=True)
class SubRegion:
    service_code: str
    name: str
    full_name: str
    legacy: tuple[LegacyAlias, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "vnCode": self.service_code,
            "name": self.name,
            "pre": extract_prefix(self.full_name, self.name),
            "legacy": [alias.to_dict() for alias in self.legacy],
        }
