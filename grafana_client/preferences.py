"""User, team and organisation preferences as Grafana stores them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class NavLink:
    """A link saved in the navigation bar."""

    id: str = ""
    text: str = ""
    url: str = ""
    target: str = ""

    def to_dict(self) -> dict[str, Any]:
        values = {"id": self.id, "text": self.text, "url": self.url, "target": self.target}
        return {key: value for key, value in values.items() if value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NavLink:
        return cls(
            id=data.get("id") or "",
            text=data.get("text") or "",
            url=data.get("url") or "",
            target=data.get("target") or "",
        )


@dataclass
class NavbarPreference:
    """Links the user keeps in the navigation bar."""

    saved_items: list[NavLink] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"savedItems": [item.to_dict() for item in self.saved_items]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NavbarPreference:
        return cls(saved_items=[NavLink.from_dict(item) for item in data.get("savedItems") or []])


@dataclass
class QueryHistoryPreference:
    """Which tab the query history opens on."""

    home_tab: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"homeTab": self.home_tab}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QueryHistoryPreference:
        return cls(home_tab=data.get("homeTab") or "")


@dataclass
class Preferences:
    """Grafana preferences."""

    theme: str = ""
    home_dashboard_id: int = 0
    home_dashboard_uid: str = ""
    timezone: str = ""
    week_start: str = ""
    locale: str = ""
    navbar: NavbarPreference = field(default_factory=NavbarPreference)
    query_history: QueryHistoryPreference = field(default_factory=QueryHistoryPreference)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "theme": self.theme,
            "homeDashboardId": self.home_dashboard_id,
        }
        optional = {
            "homeDashboardUID": self.home_dashboard_uid,
            "timezone": self.timezone,
            "weekStart": self.week_start,
            "locale": self.locale,
        }
        result.update((key, value) for key, value in optional.items() if value)
        result["navbar"] = self.navbar.to_dict()
        result["queryHistory"] = self.query_history.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Preferences:
        return cls(
            theme=data.get("theme") or "",
            home_dashboard_id=data.get("homeDashboardId") or 0,
            home_dashboard_uid=data.get("homeDashboardUID") or "",
            timezone=data.get("timezone") or "",
            week_start=data.get("weekStart") or "",
            locale=data.get("locale") or "",
            navbar=NavbarPreference.from_dict(data.get("navbar") or {}),
            query_history=QueryHistoryPreference.from_dict(data.get("queryHistory") or {}),
        )