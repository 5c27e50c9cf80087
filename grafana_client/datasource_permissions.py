"""Per-data-source permissions and the API calls that manage them."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import requests

from .errors import GrafanaAPIError
from .transport import Transport


class DatasourcePermissionType(enum.IntEnum):
    """Permission levels on a data source; 0 is not a valid level."""

    QUERY = 1


def _permission_type(value: Any) -> DatasourcePermissionType | int:
    try:
        return DatasourcePermissionType(value)
    except ValueError:
        return int(value)


@contextmanager
def _reported(action: str, path: str) -> Iterator[None]:
    """Re-raise failures with the action and path, keeping the original as cause."""
    try:
        yield
    except (GrafanaAPIError, requests.RequestException, ValueError) as err:
        raise RuntimeError(f"error {action} at {path}: {err}") from err


@dataclass
class DatasourcePermission:
    """One permission entry: a user or team and the level it holds."""

    id: int = 0
    datasource_id: int = 0
    user_id: int = 0
    user_email: str = ""
    team_id: int = 0
    permission: DatasourcePermissionType | int = 0
    permission_name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DatasourcePermission:
        return cls(
            id=data.get("id") or 0,
            datasource_id=data.get("datasourceId") or 0,
            user_id=data.get("userId") or 0,
            user_email=data.get("userEmail") or "",
            team_id=data.get("teamId") or 0,
            permission=_permission_type(data.get("permission") or 0),
            permission_name=data.get("permissionName") or "",
        )


@dataclass
class DatasourcePermissionsResponse:
    """The permissions of one data source and whether they are enforced."""

    datasource_id: int = 0
    enabled: bool = False
    permissions: list[DatasourcePermission] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DatasourcePermissionsResponse:
        return cls(
            datasource_id=data.get("datasourceId") or 0,
            enabled=bool(data.get("enabled")),
            permissions=[
                DatasourcePermission.from_dict(item) for item in data.get("permissions") or []
            ],
        )


@dataclass
class DatasourcePermissionAddPayload:
    """A permission to grant to a user or a team."""

    user_id: int = 0
    team_id: int = 0
    permission: DatasourcePermissionType | int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "teamId": self.team_id,
            "permission": int(self.permission),
        }


class DatasourcePermissionsAPI:
    """Data source permission endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def enable_datasource_permissions(self, data_source_id: int) -> None:
        path = f"/api/datasources/{data_source_id}/enable-permissions"
        with _reported("enabling permissions", path):
            self._transport.request("POST", path)

    def disable_datasource_permissions(self, data_source_id: int) -> None:
        path = f"/api/datasources/{data_source_id}/disable-permissions"
        with _reported("disabling permissions", path):
            self._transport.request("POST", path)

    def datasource_permissions(self, data_source_id: int) -> DatasourcePermissionsResponse:
        path = f"/api/datasources/{data_source_id}/permissions"
        with _reported("getting permissions", path):
            result = self._transport.request("GET", path)
        return DatasourcePermissionsResponse.from_dict(result or {})

    def add_datasource_permission(
        self, data_source_id: int, item: DatasourcePermissionAddPayload
    ) -> None:
        path = f"/api/datasources/{data_source_id}/permissions"
        with _reported("adding permissions", path):
            self._transport.request("POST", path, body=item.to_dict())

    def remove_datasource_permission(self, data_source_id: int, permission_id: int) -> None:
        path = f"/api/datasources/{data_source_id}/permissions/{permission_id}"
        with _reported("deleting permissions", path):
            self._transport.request("DELETE", path)