"""Province migration: fetch, assign codes, reshape and persist.

The run aborts only when the province list cannot be fetched, when it holds
names that cannot be coded, or when the index cannot be written. Anything
that goes wrong for a single province is logged and its document skipped.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping

from province_migrate.common.collation import sorted_vietnamese
from province_migrate.common.errors import StageError
from province_migrate.common.fs import ensure_dir, write_json
from province_migrate.common.logging import log_event
from province_migrate.common.models import AssignedRegion
from province_migrate.common.time_utils import elapsed_ms
from province_migrate.directory.client import DirectoryClient
from province_migrate.pipeline.codes import assign_codes
from province_migrate.pipeline.transform import build_index_document, build_region_document


@dataclass
class RegionFailure:
    region: AssignedRegion
    error: str
    error_code: str


@dataclass
class MigrationResult:
    regions: list[AssignedRegion]
    index_path: Path
    written: list[Path] = field(default_factory=list)
    failed: list[RegionFailure] = field(default_factory=list)


def _migrate_region(
    client: DirectoryClient,
    region: AssignedRegion,
    region_dir: Path,
) -> tuple[Path, int]:
    wards = client.list_subregions(region.service_code)
    document = build_region_document(region, wards)
    path = region_dir / f"{region.code}.json"
    write_json(path, document)
    return path, len(wards)


def write_index(regions: list[AssignedRegion], index_path: Path, region_dir_name: str) -> Path:
    index = build_index_document(regions, region_dir_name)
    try:
        write_json(index_path, index)
    except OSError as exc:
        raise StageError(f"Failed to write index {index_path}: {exc}") from exc
    return index_path


def run_migration(
    directory_config: dict,
    code_overrides: Mapping[str, str],
    data_dir: Path,
    *,
    client: DirectoryClient,
    logger: logging.Logger,
    run_id: str,
    sleep: Callable[[float], None] = time.sleep,
) -> MigrationResult:
    output_cfg = directory_config["output"]
    delay = float(directory_config["api"]["request_delay_seconds"])
    region_dir_name = output_cfg["region_dir"]
    region_dir = data_dir / region_dir_name
    index_path = data_dir / output_cfg["index_filename"]

    summaries = client.list_regions()
    log_event(
        logger,
        f"fetched {len(summaries)} provinces",
        run_id=run_id,
        stage="fetch-regions",
        event="REGIONS_FETCHED",
        status="ok",
        rows_out=len(summaries),
    )

    # Claims follow service order; sorting afterwards only affects output order.
    assigned = assign_codes(summaries, code_overrides)
    log_event(
        logger,
        f"assigned {len(assigned)} province codes",
        run_id=run_id,
        stage="assign-codes",
        event="CODES_ASSIGNED",
        status="ok",
        rows_out=len(assigned),
    )
    regions = sorted_vietnamese(assigned, key=lambda region: region.name)

    if not region_dir.exists():
        ensure_dir(region_dir)
        log_event(logger, f"created directory {region_dir}", run_id=run_id, stage="fetch-wards", status="ok")

    result = MigrationResult(regions=regions, index_path=index_path)
    total = len(regions)
    for position, region in enumerate(regions, start=1):
        started = time.monotonic()
        try:
            path, ward_count = _migrate_region(client, region, region_dir)
        except Exception as exc:
            error_code = getattr(exc, "error_code", "UNEXPECTED_ERROR")
            result.failed.append(RegionFailure(region=region, error=str(exc), error_code=error_code))
            log_event(
                logger,
                f"[{position}/{total}] failed to migrate {region.name}: {exc}",
                run_id=run_id,
                stage="fetch-wards",
                region=region.name,
                service_code=region.service_code,
                event="REGION_FAIL",
                status="error",
                error_code=error_code,
                duration_ms=elapsed_ms(started, time.monotonic()),
            )
        else:
            result.written.append(path)
            log_event(
                logger,
                f"[{position}/{total}] wrote {ward_count} wards for {region.name}",
                run_id=run_id,
                stage="fetch-wards",
                region=region.name,
                service_code=region.service_code,
                event="REGION_WRITTEN",
                status="ok",
                rows_out=ward_count,
                duration_ms=elapsed_ms(started, time.monotonic()),
            )
        sleep(delay)

    # Failed provinces stay in the index even though their file is missing.
    write_index(regions, index_path, region_dir_name)
    log_event(
        logger,
        f"index written with {len(regions)} provinces",
        run_id=run_id,
        stage="write-index",
        event="INDEX_WRITTEN",
        status="ok",
        rows_out=len(regions),
    )
    return result
