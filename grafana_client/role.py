"""Access control roles (Grafana Enterprise 8 and later)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .transport import Transport

_ROOT = "/api/access-control/roles"


def _role_path(uid: str) -> str:
    return f"{_ROOT}/{uid}"


@dataclass
class Permission:
    """An action allowed on a scope."""

    action: str = ""
    scope: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"action": self.action, "scope": self.scope}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Permission:
        return cls(action=data.get("action") or "", scope=data.get("scope") or "")


@dataclass
class Role:
    """A role and the permissions it grants."""

    version: int = 0
    uid: str = ""
    name: str = ""
    description: str = ""
    is_global: bool = False
    group: str = ""
    # Sent and read under the key "string".
    display_name: str = ""
    hidden: bool = False
    permissions: list[Permission] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"version": self.version}
        if self.uid:
            result["uid"] = self.uid
        result.update(
            {
                "name": self.name,
                "description": self.description,
                "global": self.is_global,
                "group": self.group,
                "string": self.display_name,
                "hidden": self.hidden,
            }
        )
        if self.permissions:
            result["permissions"] = [p.to_dict() for p in self.permissions]
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Role:
        return cls(
            version=data.get("version") or 0,
            uid=data.get("uid") or "",
            name=data.get("name") or "",
            description=data.get("description") or "",
            is_global=bool(data.get("global")),
            group=data.get("group") or "",
            display_name=data.get("string") or "",
            hidden=bool(data.get("hidden")),
            permissions=[Permission.from_dict(p) for p in data.get("permissions") or []],
        )


class RoleAPI:
    """Role endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def get_role(self, uid: str) -> Role:
        result = self._transport.request("GET", _role_path(uid))
        return Role.from_dict(result or {})

    def new_role(self, role: Role) -> Role:
        result = self._transport.request("POST", _ROOT, body=role.to_dict())
        return Role.from_dict(result or {})

    def update_role(self, role: Role) -> None:
        self._transport.request("PUT", _role_path(role.uid), body=role.to_dict())

    def delete_role(self, uid: str, is_global: bool) -> None:
        query = {"global": "true" if is_global else "false"}
        self._transport.request("DELETE", _role_path(uid), query=query)