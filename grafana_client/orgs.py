"""Grafana organisations and the API calls that manage them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .transport import Transport


@dataclass
class Org:
    """A Grafana organisation."""

    id: int = 0
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Org:
        return cls(id=data.get("id") or 0, name=data.get("name") or "")


class OrgsAPI:
    """Organisation endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def orgs(self) -> list[Org]:
        result = self._transport.request("GET", "/api/orgs/")
        return [Org.from_dict(item) for item in result or []]

    def org_by_name(self, name: str) -> Org:
        result = self._transport.request("GET", f"/api/orgs/name/{name}")
        return Org.from_dict(result or {})

    def org(self, org_id: int) -> Org:
        result = self._transport.request("GET", f"/api/orgs/{org_id}")
        return Org.from_dict(result or {})

    def new_org(self, name: str) -> int:
        """Create an organisation and return its ID."""
        result = self._transport.request("POST", "/api/orgs", body={"name": name})
        return (result or {}).get("orgId") or 0

    def update_org(self, org_id: int, name: str) -> None:
        self._transport.request("PUT", f"/api/orgs/{org_id}", body={"name": name})

    def delete_org(self, org_id: int) -> None:
        self._transport.request("DELETE", f"/api/orgs/{org_id}")