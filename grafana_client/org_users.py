"""Users of Grafana organisations and the API calls that manage them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .transport import Transport


def _field(data: dict[str, Any], key: str) -> Any:
    """Look a key up exactly, falling back to a case-insensitive match."""
    if key in data:
        return data[key]
    lowered = key.lower()
    return next((value for name, value in data.items() if name.lower() == lowered), None)


@dataclass
class OrgUser:
    """A user's membership of an organisation."""

    org_id: int = 0
    user_id: int = 0
    email: str = ""
    login: str = ""
    role: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrgUser:
        return cls(
            org_id=_field(data, "orgId") or 0,
            user_id=_field(data, "userId") or 0,
            email=_field(data, "email") or "",
            login=_field(data, "login") or "",
            role=_field(data, "role") or "",
        )


class OrgUsersAPI:
    """Org user endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def org_users_current(self) -> list[OrgUser]:
        """List the users of the current organisation (org admins only)."""
        result = self._transport.request("GET", "/api/org/users")
        return [OrgUser.from_dict(item) for item in result or []]

    def org_users(self, org_id: int) -> list[OrgUser]:
        result = self._transport.request("GET", f"/api/orgs/{org_id}/users")
        return [OrgUser.from_dict(item) for item in result or []]

    def add_org_user(self, org_id: int, user: str, role: str) -> None:
        """Add a user, by login or e-mail, to an organisation with a role."""
        body = {"loginOrEmail": user, "role": role}
        self._transport.request("POST", f"/api/orgs/{org_id}/users", body=body)

    def update_org_user(self, org_id: int, user_id: int, role: str) -> None:
        self._transport.request(
            "PATCH", f"/api/orgs/{org_id}/users/{user_id}", body={"role": role}
        )

    def remove_org_user(self, org_id: int, user_id: int) -> None:
        self._transport.request("DELETE", f"/api/orgs/{org_id}/users/{user_id}")