"""Grafana library panels and the API calls that manage them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

from .transport import Transport

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_TIME = re.compile(r"(?P<main>[^.]+?)(?:\.(?P<frac>\d+))?(?P<tz>Z|[+-]\d\d:\d\d)")

PANEL_KIND = 1


def _parse_time(text: str | None) -> datetime:
    """Parse an RFC 3339 timestamp; missing values give the zero time."""
    if not text:
        return _ZERO_TIME
    match = _TIME.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    fraction = (match["frac"] or "")[:6].ljust(6, "0")
    offset = "+00:00" if match["tz"] == "Z" else match["tz"]
    return datetime.fromisoformat(f"{match['main']}.{fraction}{offset}")


def _format_time(moment: datetime) -> str:
    text = moment.isoformat()
    return text[: -len("+00:00")] + "Z" if text.endswith("+00:00") else text


@dataclass
class LibraryPanelMetaUser:
    """The user who created or last updated a library panel."""

    id: int = 0
    name: str = ""
    avatar_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LibraryPanelMetaUser:
        return cls(
            id=data.get("id") or 0,
            name=data.get("name") or "",
            avatar_url=data.get("folderId") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "folderId": self.avatar_url}


@dataclass
class LibraryPanelMeta:
    """Metadata the server keeps about a library panel."""

    folder_name: str = ""
    folder_uid: str = ""
    connected_dashboards: int = 0
    created: datetime = _ZERO_TIME
    updated: datetime = _ZERO_TIME
    created_by: LibraryPanelMetaUser = field(default_factory=LibraryPanelMetaUser)
    updated_by: LibraryPanelMetaUser = field(default_factory=LibraryPanelMetaUser)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LibraryPanelMeta:
        return cls(
            folder_name=data.get("folderName") or "",
            folder_uid=data.get("folderUid") or "",
            connected_dashboards=data.get("connectedDashboards") or 0,
            created=_parse_time(data.get("created")),
            updated=_parse_time(data.get("updated")),
            created_by=LibraryPanelMetaUser.from_dict(data.get("createdBy") or {}),
            updated_by=LibraryPanelMetaUser.from_dict(data.get("updatedBy") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.folder_name:
            result["folderName"] = self.folder_name
        if self.folder_uid:
            result["folderUid"] = self.folder_uid
        if self.connected_dashboards:
            result["connectedDashboards"] = self.connected_dashboards
        result["created"] = _format_time(self.created)
        result["updated"] = _format_time(self.updated)
        result["createdBy"] = self.created_by.to_dict()
        result["updatedBy"] = self.updated_by.to_dict()
        return result


@dataclass
class LibraryPanel:
    """A Grafana library panel."""

    folder: int = 0
    name: str = ""
    model: dict[str, Any] | None = None
    type: str = ""
    description: str = ""
    id: int = 0
    kind: int = 0
    org_id: int = 0
    uid: str = ""
    version: int = 0
    meta: LibraryPanelMeta = field(default_factory=LibraryPanelMeta)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LibraryPanel:
        return cls(
            folder=data.get("folderId") or 0,
            name=data.get("name") or "",
            model=data.get("model"),
            type=data.get("type") or "",
            description=data.get("description") or "",
            id=data.get("id") or 0,
            kind=data.get("kind") or 0,
            org_id=data.get("orgId") or 0,
            uid=data.get("uid") or "",
            version=data.get("version") or 0,
            meta=LibraryPanelMeta.from_dict(data.get("meta") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.folder:
            result["folderId"] = self.folder
        result["name"] = self.name
        result["model"] = self.model
        optional = {
            "type": self.type,
            "description": self.description,
            "id": self.id,
            "kind": self.kind,
            "orgId": self.org_id,
            "uid": self.uid,
            "version": self.version,
        }
        result.update((key, value) for key, value in optional.items() if value)
        result["meta"] = self.meta.to_dict()
        return result


@dataclass
class LibraryPanelDeleteResponse:
    """The server's answer to deleting a library panel."""

    message: str = ""
    id: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LibraryPanelDeleteResponse:
        return cls(message=data.get("message") or "", id=data.get("id") or 0)


@dataclass
class LibraryPanelConnection:
    """A link between a library panel and a dashboard that uses it."""

    id: int = 0
    kind: int = 0
    panel_id: int = 0
    dashboard_id: int = 0
    created: datetime = _ZERO_TIME
    created_by: LibraryPanelMetaUser = field(default_factory=LibraryPanelMetaUser)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LibraryPanelConnection:
        return cls(
            id=data.get("id") or 0,
            kind=data.get("kind") or 0,
            panel_id=data.get("elementId") or 0,
            dashboard_id=data.get("connectionId") or 0,
            created=_parse_time(data.get("created")),
            created_by=LibraryPanelMetaUser.from_dict(data.get("createdBy") or {}),
        )


class LibraryPanelAPI:
    """Library panel endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def new_library_panel(self, panel: LibraryPanel) -> LibraryPanel:
        body = replace(panel, kind=PANEL_KIND).to_dict()
        result = self._transport.request("POST", "/api/library-elements", body=body)
        return LibraryPanel.from_dict((result or {}).get("result") or {})

    def library_panels(self) -> list[LibraryPanel]:
        result = self._transport.request("GET", "/api/library-elements")
        page = (result or {}).get("result") or {}
        return [LibraryPanel.from_dict(item) for item in page.get("elements") or []]

    def library_panel_by_uid(self, uid: str) -> LibraryPanel:
        result = self._transport.request("GET", f"/api/library-elements/{uid}")
        return LibraryPanel.from_dict((result or {}).get("result") or {})

    def library_panel_by_name(self, name: str) -> LibraryPanel:
        """Fetch the one library panel with this name; raise ValueError otherwise."""
        result = self._transport.request("GET", f"/api/library-elements/name/{name}")
        panels = [LibraryPanel.from_dict(item) for item in (result or {}).get("result") or []]
        if len(panels) != 1:
            raise ValueError(f"expected 1 panel from GET library panel by name, got: {panels}")
        return panels[0]

    def patch_library_panel(self, uid: str, panel: LibraryPanel) -> LibraryPanel:
        """Update a panel; without a version, the panel's current one is used."""
        panel = replace(panel, kind=PANEL_KIND)
        if panel.version == 0:
            panel = replace(panel, version=self.library_panel_by_uid(panel.uid).version)
        result = self._transport.request(
            "PATCH", f"/api/library-elements/{uid}", body=panel.to_dict()
        )
        return LibraryPanel.from_dict((result or {}).get("result") or {})

    def delete_library_panel(self, uid: str) -> LibraryPanelDeleteResponse:
        result = self._transport.request("DELETE", f"/api/library-elements/{uid}")
        return LibraryPanelDeleteResponse.from_dict(result or {})

    def library_panel_connections(self, uid: str) -> list[LibraryPanelConnection]:
        result = self._transport.request("GET", f"/api/library-elements/{uid}/connections")
        return [
            LibraryPanelConnection.from_dict(item) for item in (result or {}).get("result") or []
        ]