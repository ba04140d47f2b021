"""Run report aggregation."""

from __future__ import annotations

from pathlib import Path

from province_migrate.common.fs import write_json
from province_migrate.common.time_utils import utc_timestamp_iso
from province_migrate.pipeline.migrate import MigrationResult


def write_run_summary(data_dir: Path, run_id: str, result: MigrationResult) -> Path:
    summary = {
        "run_id": run_id,
        "generated_at": utc_timestamp_iso(),
        "index_path": str(result.index_path),
        "counts": {
            "provinces": len(result.regions),
            "documents_written": len(result.written),
            "documents_failed": len(result.failed),
        },
        "codes": {region.name: region.code for region in result.regions},
        "failures": [
            {
                "name": failure.region.name,
                "vnCode": failure.region.service_code,
                "code": failure.region.code,
                "error_code": failure.error_code,
                "error": failure.error,
            }
            for failure in result.failed
        ],
    }
    path = data_dir / "run_meta" / f"{run_id}_summary.json"
    write_json(path, summary)
    return path
