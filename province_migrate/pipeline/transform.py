"""Reshape directory wards into the two-level province document."""

from __future__ import annotations

from typing import Any, Iterable

from province_migrate.common.models import AssignedRegion, SubRegion


def build_region_document(region: AssignedRegion, wards: Iterable[SubRegion]) -> dict[str, Any]:
    return {
        "vnCode": region.service_code,
        "code": region.code,
        "name": region.name,
        "ward": [ward.to_dict() for ward in wards],
    }


def build_index_document(regions: Iterable[AssignedRegion], region_dir: str) -> dict[str, dict[str, str]]:
    """Map province name to its code and document path, in iteration order."""
    return {region.name: region.index_entry(region_dir) for region in regions}
