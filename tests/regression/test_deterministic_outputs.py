import json
from pathlib import Path

import pytest

from province_migrate.common.config_loader import load_config
from province_migrate.common.logging import build_logger, close_logger
from province_migrate.common.models import RegionSummary, SubRegion
from province_migrate.pipeline.migrate import run_migration


class StaticDirectoryClient:
    def __init__(self, regions):
        self.regions = regions

    def list_regions(self):
        return list(self.regions)

    def list_subregions(self, service_code):
        return [SubRegion(f"{service_code}1", "Tân Hòa", "Xã Tân Hòa")]


NAMES = ["Hà Nội", "Hà Nam", "Hà Giang", "Huế", "Hải Dương", "Hòa Bình", "Đồng Tháp", "Đồng Nai", "Hậu Giang"]


def _run_once(data_dir: Path, run_id: str, regions) -> None:
    logger = build_logger(run_id, data_dir=data_dir)
    try:
        run_migration(
            load_config().directory,
            load_config().code_overrides,
            data_dir,
            client=StaticDirectoryClient(regions),
            logger=logger,
            run_id=run_id,
            sleep=lambda _seconds: None,
        )
    finally:
        close_logger(logger)


@pytest.mark.regression
def test_outputs_are_byte_stable_for_same_inputs(tmp_path: Path):
    regions = [RegionSummary(str(i), name) for i, name in enumerate(NAMES)]
    first = tmp_path / "first"
    second = tmp_path / "second"

    _run_once(first, "run-a", regions)
    _run_once(second, "run-b", regions)

    assert (first / "province.json").read_bytes() == (second / "province.json").read_bytes()
    first_docs = sorted(p.name for p in (first / "provinces_v2").iterdir())
    assert first_docs == sorted(p.name for p in (second / "provinces_v2").iterdir())
    for name in first_docs:
        assert (first / "provinces_v2" / name).read_bytes() == (second / "provinces_v2" / name).read_bytes()


@pytest.mark.regression
def test_codes_are_unique_and_index_matches_documents(tmp_path: Path):
    regions = [RegionSummary(str(i), name) for i, name in enumerate(NAMES)]
    _run_once(tmp_path, "run-c", regions)

    index = json.loads((tmp_path / "province.json").read_text(encoding="utf-8"))
    codes = [entry["code"] for entry in index.values()]
    assert len(codes) == len(set(codes)) == len(NAMES)
    for entry in index.values():
        assert (tmp_path / entry["file_path"]).exists()
