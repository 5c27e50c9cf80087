"""Dashboard snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .transport import Transport


@dataclass
class Snapshot:
    """A dashboard model to snapshot and its lifetime in seconds."""

    model: dict[str, Any] | None = None
    expires: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"dashboard": self.model, "expires": self.expires}


@dataclass
class SnapshotCreateResponse:
    """The server's answer to creating a snapshot."""

    delete_key: str = ""
    delete_url: str = ""
    key: str = ""
    url: str = ""
    id: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SnapshotCreateResponse:
        return cls(
            delete_key=data.get("deleteKey") or "",
            delete_url=data.get("deleteUrl") or "",
            key=data.get("key") or "",
            url=data.get("url") or "",
            id=data.get("id") or 0,
        )


class SnapshotAPI:
    """Snapshot endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def new_snapshot(self, snapshot: Snapshot) -> SnapshotCreateResponse:
        result = self._transport.request("POST", "/api/snapshots", body=snapshot.to_dict())
        return SnapshotCreateResponse.from_dict(result or {})