"""CLI entrypoint for the province v2 migration."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from province_migrate.common.config_loader import DEFAULT_CONFIG_DIR, load_config
from province_migrate.common.constants import EXIT_HARD_FAIL, EXIT_SUCCESS
from province_migrate.common.errors import PipelineError
from province_migrate.common.logging import build_logger, close_logger, log_event
from province_migrate.common.time_utils import generate_run_id
from province_migrate.directory.client import DirectoryClient
from province_migrate.pipeline.migrate import MigrationResult, run_migration
from province_migrate.pipeline.reports import write_run_summary


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--data-dir", default=".")
    parser.add_argument("--config-dir", default=str(DEFAULT_CONFIG_DIR))
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    return parser.parse_args(argv)


def _write_summary(logger: logging.Logger, data_dir: Path, run_id: str, result: MigrationResult) -> None:
    # Documents and index are already on disk; a missing summary does not fail the run.
    try:
        write_run_summary(data_dir, run_id, result)
    except OSError as exc:
        log_event(
            logger,
            f"could not write run summary: {exc}",
            run_id=run_id,
            event="SUMMARY_FAIL",
            status="error",
            error_code="SUMMARY_WRITE_ERROR",
        )


def _migrate(args: argparse.Namespace, data_dir: Path, run_id: str, logger: logging.Logger) -> MigrationResult:
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None
    bundle = load_config(Path(args.config_dir), overlay_config_dir=overlay_config_dir)
    with DirectoryClient.from_config(bundle.directory) as client:
        return run_migration(
            bundle.directory,
            bundle.code_overrides,
            data_dir,
            client=client,
            logger=logger,
            run_id=run_id,
        )


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    data_dir = Path(args.data_dir)

    logger = build_logger(run_id, data_dir=data_dir, level=args.log_level)
    log_event(logger, "run start", run_id=run_id, event="RUN_START", status="ok")
    try:
        try:
            result = _migrate(args, data_dir, run_id, logger)
        except PipelineError as exc:
            log_event(
                logger,
                f"fatal error: {exc}",
                run_id=run_id,
                event="RUN_FAIL",
                status="error",
                error_code=exc.error_code,
            )
            return EXIT_HARD_FAIL
        except Exception as exc:
            log_event(
                logger,
                f"unexpected fatal error: {exc!r}",
                run_id=run_id,
                event="RUN_FAIL",
                status="error",
                error_code="UNEXPECTED_ERROR",
            )
            return EXIT_HARD_FAIL

        _write_summary(logger, data_dir, run_id, result)
        log_event(
            logger,
            f"run end: {len(result.written)} documents written, {len(result.failed)} provinces skipped",
            run_id=run_id,
            event="RUN_END",
            status="ok",
            rows_out=len(result.written),
        )
        return EXIT_SUCCESS
    finally:
        close_logger(logger)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    return run_command(args)


if __name__ == "__main__":
    raise SystemExit(main())
