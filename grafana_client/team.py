"""Grafana teams, their members and preferences."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .org_users import _field
from .preferences import Preferences
from .transport import Transport

_SEARCH_PAGE = "1"
_SEARCH_PER_PAGE = "1000"


@dataclass
class Team:
    """A Grafana team, as read from and sent to the API."""

    id: int = 0
    org_id: int = 0
    name: str = ""
    email: str = ""
    avatar_url: str = ""
    member_count: int = 0
    permission: int = 0

    def to_dict(self) -> dict[str, Any]:
        values = {
            "id": self.id,
            "orgId": self.org_id,
            "name": self.name,
            "email": self.email,
            "avatarUrl": self.avatar_url,
            "memberCount": self.member_count,
            "permission": self.permission,
        }
        return {key: value for key, value in values.items() if key == "name" or value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Team:
        return cls(
            id=_field(data, "id") or 0,
            org_id=_field(data, "orgId") or 0,
            name=_field(data, "name") or "",
            email=_field(data, "email") or "",
            avatar_url=_field(data, "avatarUrl") or "",
            member_count=_field(data, "memberCount") or 0,
            permission=_field(data, "permission") or 0,
        )


@dataclass
class TeamMember:
    """A user's membership of a team."""

    org_id: int = 0
    team_id: int = 0
    user_id: int = 0
    email: str = ""
    login: str = ""
    avatar_url: str = ""
    permission: int = 0

    def to_dict(self) -> dict[str, Any]:
        values = {
            "orgId": self.org_id,
            "teamId": self.team_id,
            "userID": self.user_id,
            "email": self.email,
            "login": self.login,
            "avatarUrl": self.avatar_url,
            "permission": self.permission,
        }
        return {key: value for key, value in values.items() if value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TeamMember:
        return cls(
            org_id=_field(data, "orgId") or 0,
            team_id=_field(data, "teamId") or 0,
            user_id=_field(data, "userID") or 0,
            email=_field(data, "email") or "",
            login=_field(data, "login") or "",
            avatar_url=_field(data, "avatarUrl") or "",
            permission=_field(data, "permission") or 0,
        )


@dataclass
class SearchTeam:
    """One page of a team search."""

    total_count: int = 0
    teams: list[Team] = field(default_factory=list)
    page: int = 0
    per_page: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchTeam:
        return cls(
            total_count=_field(data, "totalCount") or 0,
            teams=[Team.from_dict(item) for item in _field(data, "teams") or []],
            page=_field(data, "page") or 0,
            per_page=_field(data, "perPage") or 0,
        )


class TeamAPI:
    """Team endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def search_team(self, query: str) -> SearchTeam:
        """Search teams by name, returning the first page of up to 1000 results."""
        params = {"page": _SEARCH_PAGE, "perPage": _SEARCH_PER_PAGE, "query": query}
        result = self._transport.request("GET", "/api/teams/search", query=params)
        return SearchTeam.from_dict(result or {})

    def team(self, team_id: int) -> Team:
        result = self._transport.request("GET", f"/api/teams/{team_id}")
        return Team.from_dict(result or {})

    def add_team(self, name: str, email: str = "") -> int:
        """Create a team, with an e-mail address if one is given; return its ID."""
        body = Team(name=name, email=email).to_dict()
        result = self._transport.request("POST", "/api/teams", body=body)
        return (result or {}).get("teamId") or 0

    def update_team(self, team_id: int, name: str, email: str = "") -> None:
        body = Team(name=name, email=email).to_dict()
        self._transport.request("PUT", f"/api/teams/{team_id}", body=body)

    def delete_team(self, team_id: int) -> None:
        self._transport.request("DELETE", f"/api/teams/{team_id}")

    def team_members(self, team_id: int) -> list[TeamMember]:
        result = self._transport.request("GET", f"/api/teams/{team_id}/members")
        return [TeamMember.from_dict(item) for item in result or []]

    def add_team_member(self, team_id: int, user_id: int) -> None:
        body = TeamMember(user_id=user_id).to_dict()
        self._transport.request("POST", f"/api/teams/{team_id}/members", body=body)

    def remove_member_from_team(self, team_id: int, user_id: int) -> None:
        self._transport.request("DELETE", f"/api/teams/{team_id}/members/{user_id}")

    def team_preferences(self, team_id: int) -> Preferences:
        result = self._transport.request("GET", f"/api/teams/{team_id}/preferences")
        return Preferences.from_dict(result or {})

    def update_team_preferences(self, team_id: int, preferences: Preferences) -> None:
        self._transport.request(
            "PUT", f"/api/teams/{team_id}/preferences", body=preferences.to_dict()
        )