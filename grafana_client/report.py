"""Grafana reports and the API calls that manage them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .library_panel import _format_time, _parse_time
from .transport import Transport


def _optional_time(text: str | None) -> datetime | None:
    return _parse_time(text) if text else None


@dataclass
class ReportSchedule:
    """When and how often a report is sent."""

    start_date: datetime | None = None
    end_date: datetime | None = None
    frequency: str = ""
    interval_frequency: str = ""
    interval_amount: int = 0
    workdays_only: bool = False
    time_zone: str = ""

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.start_date is not None:
            result["startDate"] = _format_time(self.start_date)
        if self.end_date is not None:
            result["endDate"] = _format_time(self.end_date)
        result.update(
            frequency=self.frequency,
            intervalFrequency=self.interval_frequency,
            intervalAmount=self.interval_amount,
            workdaysOnly=self.workdays_only,
            timeZone=self.time_zone,
        )
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReportSchedule:
        return cls(
            start_date=_optional_time(data.get("startDate")),
            end_date=_optional_time(data.get("endDate")),
            frequency=data.get("frequency") or "",
            interval_frequency=data.get("intervalFrequency") or "",
            interval_amount=data.get("intervalAmount") or 0,
            workdays_only=bool(data.get("workdaysOnly")),
            time_zone=data.get("timeZone") or "",
        )


@dataclass
class ReportTimeRange:
    """The dashboard time range a report covers."""

    from_: str = ""
    to: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.from_, "to": self.to}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReportTimeRange:
        return cls(from_=data.get("from") or "", to=data.get("to") or "")


@dataclass
class ReportOptions:
    """Page layout of a report."""

    orientation: str = ""
    layout: str = ""
    time_range: ReportTimeRange = field(default_factory=ReportTimeRange)

    def to_dict(self) -> dict[str, Any]:
        return {
            "orientation": self.orientation,
            "layout": self.layout,
            "timeRange": self.time_range.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReportOptions:
        return cls(
            orientation=data.get("orientation") or "",
            layout=data.get("layout") or "",
            time_range=ReportTimeRange.from_dict(data.get("timeRange") or {}),
        )


@dataclass
class Report:
    """A Grafana report; id, user_id, org_id and state are set by the server."""

    id: int = 0
    user_id: int = 0
    org_id: int = 0
    state: str = ""
    dashboard_id: int = 0
    dashboard_uid: str = ""
    name: str = ""
    recipients: str = ""
    reply_to: str = ""
    message: str = ""
    schedule: ReportSchedule = field(default_factory=ReportSchedule)
    options: ReportOptions = field(default_factory=ReportOptions)
    enable_dashboard_url: bool = False
    enable_csv: bool = False

    def to_dict(self) -> dict[str, Any]:
        server_set = {
            "id": self.id,
            "userId": self.user_id,
            "orgId": self.org_id,
            "state": self.state,
        }
        result: dict[str, Any] = {key: value for key, value in server_set.items() if value}
        result.update(
            dashboardId=self.dashboard_id,
            dashboardUid=self.dashboard_uid,
            name=self.name,
            recipients=self.recipients,
            replyTo=self.reply_to,
            message=self.message,
            schedule=self.schedule.to_dict(),
            options=self.options.to_dict(),
            enableDashboardUrl=self.enable_dashboard_url,
            enableCsv=self.enable_csv,
        )
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Report:
        return cls(
            id=data.get("id") or 0,
            user_id=data.get("userId") or 0,
            org_id=data.get("orgId") or 0,
            state=data.get("state") or "",
            dashboard_id=data.get("dashboardId") or 0,
            dashboard_uid=data.get("dashboardUid") or "",
            name=data.get("name") or "",
            recipients=data.get("recipients") or "",
            reply_to=data.get("replyTo") or "",
            message=data.get("message") or "",
            schedule=ReportSchedule.from_dict(data.get("schedule") or {}),
            options=ReportOptions.from_dict(data.get("options") or {}),
            enable_dashboard_url=bool(data.get("enableDashboardUrl")),
            enable_csv=bool(data.get("enableCsv")),
        )


class ReportAPI:
    """Report endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def report(self, report_id: int) -> Report:
        result = self._transport.request("GET", f"/api/reports/{report_id}")
        return Report.from_dict(result or {})

    def new_report(self, report: Report) -> int:
        """Create a report and return its ID."""
        result = self._transport.request("POST", "/api/reports", body=report.to_dict())
        return (result or {}).get("id") or 0

    def update_report(self, report: Report) -> None:
        self._transport.request("PUT", f"/api/reports/{report.id}", body=report.to_dict())

    def delete_report(self, report_id: int) -> None:
        self._transport.request("DELETE", f"/api/reports/{report_id}")