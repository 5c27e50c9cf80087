"""Organisation preferences endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .preferences import Preferences
from .transport import Transport

_PATH = "/api/org/preferences"


@dataclass
class UpdateOrgPreferencesResponse:
    """The server's answer to an update of org preferences."""

    message: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UpdateOrgPreferencesResponse:
        return cls(message=data.get("message") or "")


class OrgPreferencesAPI:
    """Org preferences endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def org_preferences(self) -> Preferences:
        result = self._transport.request("GET", _PATH)
        return Preferences.from_dict(result or {})

    def update_org_preferences(self, preferences: Preferences) -> UpdateOrgPreferencesResponse:
        """Update only the preferences given, leaving the others alone."""
        result = self._transport.request("PATCH", _PATH, body=preferences.to_dict())
        return UpdateOrgPreferencesResponse.from_dict(result or {})

    def update_all_org_preferences(
        self, preferences: Preferences
    ) -> UpdateOrgPreferencesResponse:
        """Overwrite all org preferences with those given."""
        result = self._transport.request("PUT", _PATH, body=preferences.to_dict())
        return UpdateOrgPreferencesResponse.from_dict(result or {})