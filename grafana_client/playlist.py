"""Grafana playlists and the API calls that manage them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .transport import Transport


@dataclass
class PlaylistItem:
    """One entry of a playlist."""

    type: str = ""
    value: str = ""
    order: int = 0
    title: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "value": self.value, "order": self.order, "title": self.title}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlaylistItem:
        return cls(
            type=data.get("type") or "",
            value=data.get("value") or "",
            order=data.get("order") or 0,
            title=data.get("title") or "",
        )


@dataclass
class Playlist:
    """A Grafana playlist."""

    id: int = 0
    name: str = ""
    interval: str = ""
    items: list[PlaylistItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "interval": self.interval,
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Playlist:
        return cls(
            id=data.get("id") or 0,
            name=data.get("name") or "",
            interval=data.get("interval") or "",
            items=[PlaylistItem.from_dict(item) for item in data.get("items") or []],
        )


class PlaylistAPI:
    """Playlist endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def playlist(self, playlist_id: int) -> Playlist:
        result = self._transport.request("GET", f"/api/playlists/{playlist_id}")
        return Playlist.from_dict(result or {})

    def new_playlist(self, playlist: Playlist) -> int:
        """Create a playlist and return its ID."""
        result = self._transport.request("POST", "/api/playlists", body=playlist.to_dict())
        return (result or {}).get("id") or 0

    def update_playlist(self, playlist: Playlist) -> None:
        self._transport.request(
            "PUT", f"/api/playlists/{playlist.id}", body=playlist.to_dict()
        )

    def delete_playlist(self, playlist_id: int) -> None:
        self._transport.request("DELETE", f"/api/playlists/{playlist_id}")