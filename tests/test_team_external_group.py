import json

import pytest
import responses

from grafana_client.client import Client
from grafana_client.errors import GrafanaAPIError
from grafana_client.team_external_group import TeamGroup
from grafana_client.transport import Config

BASE = "http://my-grafana.com"

GET_TEAM_GROUPS_JSON = """
[
  {
    "orgId": 1,
    "teamId": 1,
    "groupId": "test"
  }
]
"""
CREATED_TEAM_GROUP_JSON = '{"message":"Group added to Team"}'
DELETED_TEAM_GROUP_JSON = '{"message":"Team Group removed"}'


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


@pytest.fixture
def client():
    return Client(BASE, Config(api_key="placeholder"))


def test_team_groups(rsps, client):
    rsps.add(responses.GET, f"{BASE}/api/teams/1/groups", body=GET_TEAM_GROUPS_JSON)
    groups = client.team_groups(1)
    assert len(groups) == 1
    assert groups[0] == TeamGroup(org_id=1, team_id=1, group_id="test")


def test_new_team_group(rsps, client):
    rsps.add(responses.POST, f"{BASE}/api/teams/1/groups", body=CREATED_TEAM_GROUP_JSON)
    assert client.new_team_group(1, "test") is None
    assert json.loads(rsps.calls[0].request.body) == {"groupId": "test"}


def test_delete_team_group(rsps, client):
    rsps.add(responses.DELETE, f"{BASE}/api/teams/1/groups/test", body=DELETED_TEAM_GROUP_JSON)
    assert client.delete_team_group(1, "test") is None
    assert rsps.calls[0].request.method == "DELETE"
    assert rsps.calls[0].request.url == f"{BASE}/api/teams/1/groups/test"


def test_team_groups_error(rsps, client):
    rsps.add(responses.GET, f"{BASE}/api/teams/1/groups", body="{}", status=403)
    with pytest.raises(GrafanaAPIError) as info:
        client.team_groups(1)
    assert info.value.status_code == 403