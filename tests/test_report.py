import json
from datetime import datetime, timezone

import pytest
import responses

from grafana_client.client import Client
from grafana_client.errors import GrafanaAPIError
from grafana_client.report import (
    Report,
    ReportOptions,
    ReportSchedule,
    ReportTimeRange,
)
from grafana_client.transport import Config

BASE = "http://my-grafana.com"
RECIPIENTS = "reports@example.com"

_SCHEDULE = dict(
    startDate="2020-01-01T00:00:00Z", endDate=None, frequency="custom",
    intervalFrequency="weeks", intervalAmount=2, workdaysOnly=True,
    dayOfMonth="1", day="wednesday", hour=0, minute=0, timeZone="GMT",
)
_OPTIONS = dict(
    orientation="landscape", layout="grid", timeRange={"from": "now-1h", "to": "now"}
)
REPORT_PAYLOAD = json.dumps(
    dict(
        id=4, userId=0, orgId=1, dashboardId=33, dashboardName="Acceptance",
        dashboardUid="", name="My Report", recipients=RECIPIENTS, replyTo="",
        message="", schedule=_SCHEDULE, options=_OPTIONS, templateVars={},
        enableDashboardUrl=True, enableCsv=True, state="",
        created="2022-01-11T15:09:13Z", updated="2022-01-11T16:18:34Z",
    )
)
CREATED_PAYLOAD = json.dumps({"id": 4})

START = datetime(2020, 1, 1, tzinfo=timezone.utc)


def _sample_report():
    return Report(
        dashboard_id=33,
        name="My Report",
        recipients=RECIPIENTS,
        schedule=ReportSchedule(
            start_date=START,
            end_date=None,
            frequency="custom",
            interval_frequency="weeks",
            interval_amount=2,
            workdays_only=True,
            time_zone="GMT",
        ),
        options=ReportOptions(
            orientation="landscape",
            layout="grid",
            time_range=ReportTimeRange(from_="now-1h", to="now"),
        ),
        enable_dashboard_url=True,
        enable_csv=True,
    )


@pytest.fixture
def mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    return Client(BASE, Config(api_key="placeholder"))


def test_report(mock, client):
    mock.add(responses.GET, BASE + "/api/reports/4", body=REPORT_PAYLOAD)
    resp = client.report(4)
    assert resp.id == 4
    assert resp.name == "My Report"
    assert resp.schedule.start_date == START
    assert resp.schedule.end_date is None
    assert resp.options.time_range.from_ == "now-1h"


def test_new_report(mock, client):
    mock.add(responses.POST, BASE + "/api/reports", body=CREATED_PAYLOAD)
    assert client.new_report(_sample_report()) == 4
    sent = json.loads(mock.calls[0].request.body)
    assert sent["schedule"]["startDate"] == "2020-01-01T00:00:00Z"
    assert "endDate" not in sent["schedule"]
    assert "id" not in sent


def test_update_report(mock, client):
    mock.add(responses.PUT, BASE + "/api/reports/0", body="")
    assert client.update_report(_sample_report()) is None
    sent = json.loads(mock.calls[0].request.body)
    assert sent["name"] == "My Report"
    assert sent["options"]["timeRange"] == {"from": "now-1h", "to": "now"}


def test_delete_report(mock, client):
    mock.add(responses.DELETE, BASE + "/api/reports/4", body="")
    assert client.delete_report(4) is None
    assert mock.calls[0].request.method == "DELETE"


def test_report_round_trip():
    report = _sample_report()
    assert Report.from_dict(report.to_dict()) == report


def test_report_error(mock, client):
    mock.add(responses.GET, BASE + "/api/reports/9", body="{}", status=404)
    with pytest.raises(GrafanaAPIError) as info:
        client.report(9)
    assert info.value.status_code == 404