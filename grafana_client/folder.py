"""Grafana folders and the API calls that manage them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .transport import Transport


@dataclass
class Folder:
    """A Grafana folder."""

    id: int = 0
    uid: str = ""
    title: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Folder:
        return cls(
            id=data.get("id") or 0,
            uid=data.get("uid") or "",
            title=data.get("title") or "",
            url=data.get("url") or "",
        )


@dataclass
class FolderPayload:
    """The body sent to create or update a folder."""

    title: str = ""
    uid: str = ""
    overwrite: bool = False

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"title": self.title}
        if self.uid:
            result["uid"] = self.uid
        if self.overwrite:
            result["overwrite"] = True
        return result


class FolderAPI:
    """Folder endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def folders(self) -> list[Folder]:
        result = self._transport.request("GET", "/api/folders/")
        return [Folder.from_dict(item) for item in result or []]

    def folder(self, folder_id: int) -> Folder:
        result = self._transport.request("GET", f"/api/folders/id/{folder_id}")
        return Folder.from_dict(result or {})

    def folder_by_uid(self, uid: str) -> Folder:
        result = self._transport.request("GET", f"/api/folders/{uid}")
        return Folder.from_dict(result or {})

    def new_folder(self, title: str, uid: str = "") -> Folder:
        """Create a folder, with a chosen UID if one is given."""
        payload = FolderPayload(title=title, uid=uid)
        result = self._transport.request("POST", "/api/folders", body=payload.to_dict())
        return Folder.from_dict(result or {})

    def update_folder(self, uid: str, title: str, new_uid: str = "") -> None:
        """Rename the folder, and change its UID if a new one is given."""
        payload = FolderPayload(title=title, uid=new_uid, overwrite=True)
        self._transport.request("PUT", f"/api/folders/{uid}", body=payload.to_dict())

    def delete_folder(self, uid: str) -> None:
        self._transport.request("DELETE", f"/api/folders/{uid}")