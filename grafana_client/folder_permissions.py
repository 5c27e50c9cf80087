"""Folder permissions and the API calls that manage them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .transport import Transport


@dataclass
class FolderPermission:
    """A permission on a folder; levels are 1 view, 2 edit, 4 admin."""

    id: int = 0
    folder_uid: str = ""
    user_id: int = 0
    team_id: int = 0
    role: str = ""
    is_folder: bool = False
    permission: int = 0
    permission_name: str = ""
    folder_id: int = 0
    dashboard_id: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FolderPermission:
        return cls(
            id=data.get("id") or 0,
            folder_uid=data.get("uid") or "",
            user_id=data.get("userId") or 0,
            team_id=data.get("teamId") or 0,
            role=data.get("role") or "",
            is_folder=bool(data.get("isFolder")),
            permission=data.get("permission") or 0,
            permission_name=data.get("permissionName") or "",
            folder_id=data.get("folderId") or 0,
            dashboard_id=data.get("dashboardId") or 0,
        )


@dataclass
class PermissionItem:
    """One of a role, team or user, paired with a permission level."""

    role: str = ""
    team_id: int = 0
    user_id: int = 0
    permission: int = 0

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.role:
            result["role"] = self.role
        if self.team_id:
            result["teamId"] = self.team_id
        if self.user_id:
            result["userId"] = self.user_id
        result["permission"] = self.permission
        return result


@dataclass
class PermissionItems:
    """The complete set of permissions to give a folder."""

    items: list[PermissionItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"items": [item.to_dict() for item in self.items]}


class FolderPermissionsAPI:
    """Folder permission endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def folder_permissions(self, folder_uid: str) -> list[FolderPermission]:
        result = self._transport.request("GET", f"/api/folders/{folder_uid}/permissions")
        return [FolderPermission.from_dict(item) for item in result or []]

    def update_folder_permissions(self, folder_uid: str, items: PermissionItems) -> None:
        """Replace the folder's permissions; any not listed are removed."""
        self._transport.request(
            "POST", f"/api/folders/{folder_uid}/permissions", body=items.to_dict()
        )