"""The combined folder and dashboard search endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .transport import Transport


@dataclass
class FolderDashboardSearchResponse:
    """One hit of a folder and dashboard search."""

    id: int = 0
    uid: str = ""
    title: str = ""
    uri: str = ""
    url: str = ""
    slug: str = ""
    type: str = ""
    tags: list[str] = field(default_factory=list)
    is_starred: bool = False
    folder_id: int = 0
    folder_uid: str = ""
    folder_title: str = ""
    folder_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FolderDashboardSearchResponse:
        return cls(
            id=data.get("id") or 0,
            uid=data.get("uid") or "",
            title=data.get("title") or "",
            uri=data.get("uri") or "",
            url=data.get("url") or "",
            slug=data.get("slug") or "",
            type=data.get("type") or "",
            tags=list(data.get("tags") or []),
            is_starred=bool(data.get("isStarred")),
            folder_id=data.get("folderId") or 0,
            folder_uid=data.get("folderUid") or "",
            folder_title=data.get("folderTitle") or "",
            folder_url=data.get("folderUrl") or "",
        )


class FolderDashboardSearchAPI:
    """Search endpoint; expects a Transport in `_transport`."""

    _transport: Transport

    def folder_dashboard_search(self, params: Any = None) -> list[FolderDashboardSearchResponse]:
        """Search folders and dashboards; params are sent as the query string."""
        result = self._transport.request("GET", "/api/search", query=params)
        return [FolderDashboardSearchResponse.from_dict(item) for item in result or []]