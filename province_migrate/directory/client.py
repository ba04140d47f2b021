"""Read operations against the MDI address directory service (v2)."""

from __future__ import annotations

from types import TracebackType
from typing import Any

from province_migrate.common.errors import ContractError
from province_migrate.common.http import HttpClient, TimeoutConfig
from province_migrate.common.models import LegacyAlias, RegionSummary, SubRegion


def _unwrap(payload: Any, list_key: str, url: str) -> list[dict]:
    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, dict) or not isinstance(data.get(list_key), list):
        raise ContractError(f"Missing data.{list_key} in response from {url}")
    return data[list_key]


def _as_code(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def _parse_legacy(item: dict) -> LegacyAlias:
    return LegacyAlias(
        service_code=_as_code(item.get("code")),
        name=item.get("nameVi") or "",
        full_name=item.get("fullNameVi") or "",
    )


def _parse_ward(item: dict) -> SubRegion:
    return SubRegion(
        service_code=_as_code(item.get("code")),
        name=item.get("nameVi") or "",
        full_name=item.get("fullNameVi") or "",
        legacy=tuple(_parse_legacy(alias) for alias in item.get("legacy") or []),
    )


class DirectoryClient:
    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        api_key_header: str = "apikey",
        http_client: HttpClient | None = None,
        timeout: TimeoutConfig | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.auth_headers = {api_key_header: api_key}
        self.timeout = timeout
        self._owns_client = http_client is None
        self.http = http_client or HttpClient(timeout=timeout)

    @classmethod
    def from_config(cls, directory_config: dict, http_client: HttpClient | None = None) -> "DirectoryClient":
        api = directory_config["api"]
        return cls(
            api["base_url"],
            api["api_key"],
            api_key_header=api["api_key_header"],
            http_client=http_client,
            timeout=TimeoutConfig(
                connect=float(api["timeout"]["connect"]),
                read=float(api["timeout"]["read"]),
            ),
        )

    def close(self) -> None:
        if self._owns_client:
            self.http.close()

    def __enter__(self) -> "DirectoryClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _get(self, path: str) -> tuple[str, dict]:
        url = f"{self.base_url}/{path}"
        payload = self.http.get_json(url, headers=self.auth_headers, timeout=self.timeout)
        return url, payload

    def list_regions(self) -> list[RegionSummary]:
        url, payload = self._get("provinces")
        regions = []
        for item in _unwrap(payload, "listProvinces", url):
            if not isinstance(item, dict):
                raise ContractError(f"Province entry is not an object in response from {url}")
            regions.append(RegionSummary(service_code=_as_code(item.get("code")), name=item.get("nameVi")))
        return regions

    def list_subregions(self, service_code: str) -> list[SubRegion]:
        url, payload = self._get(f"province/{service_code}/communes")
        return [_parse_ward(item) for item in _unwrap(payload, "listWards", url)]
