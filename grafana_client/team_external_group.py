"""External groups synced to Grafana teams."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .org_users import _field
from .transport import Transport


@dataclass
class TeamGroup:
    """An external group linked to a team."""

    org_id: int = 0
    team_id: int = 0
    group_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TeamGroup:
        return cls(
            org_id=_field(data, "orgId") or 0,
            team_id=_field(data, "teamId") or 0,
            group_id=_field(data, "groupID") or "",
        )


class TeamGroupAPI:
    """Team group endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def team_groups(self, team_id: int) -> list[TeamGroup]:
        result = self._transport.request("GET", f"/api/teams/{team_id}/groups")
        return [TeamGroup.from_dict(item) for item in result or []]

    def new_team_group(self, team_id: int, group_id: str) -> None:
        self._transport.request(
            "POST", f"/api/teams/{team_id}/groups", body={"groupId": group_id}
        )

    def delete_team_group(self, team_id: int, group_id: str) -> None:
        self._transport.request("DELETE", f"/api/teams/{team_id}/groups/{group_id}")