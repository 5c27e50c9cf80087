"""Grafana users and the API calls that read and change them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .library_panel import _ZERO_TIME, _format_time, _parse_time
from .transport import Transport


@dataclass
class User:
    """A Grafana user profile."""

    id: int = 0
    email: str = ""
    name: str = ""
    login: str = ""
    theme: str = ""
    org_id: int = 0
    is_admin: bool = False
    is_disabled: bool = False
    is_external: bool = False
    updated_at: datetime = _ZERO_TIME
    created_at: datetime = _ZERO_TIME
    auth_labels: list[str] = field(default_factory=list)
    avatar_url: str = ""
    password: str = ""

    def to_dict(self) -> dict[str, Any]:
        values = {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "login": self.login,
            "theme": self.theme,
            "orgId": self.org_id,
            "isGrafanaAdmin": self.is_admin,
            "isDisabled": self.is_disabled,
            "isExternal": self.is_external,
        }
        result: dict[str, Any] = {key: value for key, value in values.items() if value}
        result["updatedAt"] = _format_time(self.updated_at)
        result["createdAt"] = _format_time(self.created_at)
        if self.auth_labels:
            result["authLabels"] = list(self.auth_labels)
        if self.avatar_url:
            result["avatarUrl"] = self.avatar_url
        if self.password:
            result["password"] = self.password
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(
            id=data.get("id") or 0,
            email=data.get("email") or "",
            name=data.get("name") or "",
            login=data.get("login") or "",
            theme=data.get("theme") or "",
            org_id=data.get("orgId") or 0,
            is_admin=bool(data.get("isGrafanaAdmin")),
            is_disabled=bool(data.get("isDisabled")),
            is_external=bool(data.get("isExternal")),
            updated_at=_parse_time(data.get("updatedAt")),
            created_at=_parse_time(data.get("createdAt")),
            auth_labels=list(data.get("authLabels") or []),
            avatar_url=data.get("avatarUrl") or "",
            password=data.get("password") or "",
        )


@dataclass
class UserSearch:
    """A user as listed by the endpoints that return many users."""

    id: int = 0
    email: str = ""
    name: str = ""
    login: str = ""
    is_admin: bool = False
    is_disabled: bool = False
    last_seen_at: datetime = _ZERO_TIME
    last_seen_at_age: str = ""
    auth_labels: list[str] = field(default_factory=list)
    avatar_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserSearch:
        return cls(
            id=data.get("id") or 0,
            email=data.get("email") or "",
            name=data.get("name") or "",
            login=data.get("login") or "",
            is_admin=bool(data.get("isAdmin")),
            is_disabled=bool(data.get("isDisabled")),
            last_seen_at=_parse_time(data.get("lastSeenAt")),
            last_seen_at_age=data.get("lastSeenAtAge") or "",
            auth_labels=list(data.get("authLabels") or []),
            avatar_url=data.get("avatarUrl") or "",
        )


class UserAPI:
    """User endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def users(self) -> list[UserSearch]:
        result = self._transport.request("GET", "/api/users")
        return [UserSearch.from_dict(item) for item in result or []]

    def user(self, user_id: int) -> User:
        result = self._transport.request("GET", f"/api/users/{user_id}")
        return User.from_dict(result or {})

    def user_by_email(self, email: str) -> User:
        result = self._transport.request(
            "GET", "/api/users/lookup", query={"loginOrEmail": email}
        )
        return User.from_dict(result or {})

    def user_update(self, user: User) -> None:
        self._transport.request("PUT", f"/api/users/{user.id}", body=user.to_dict())