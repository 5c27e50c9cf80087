import json
import re

import pytest
import responses

from grafana_client.errors import GrafanaAPIError
from grafana_client.folder_permissions import (
    FolderPermission,
    FolderPermissionsAPI,
    PermissionItem,
    PermissionItems,
)
from grafana_client.transport import Config, Transport

BASE_URL = "http://my-grafana.com"
_ANY_URL = re.compile(re.escape(BASE_URL) + r"/.*")
_METHODS = (responses.GET, responses.POST)

_STAMP = "2017-06-20T02:00:00+02:00"


def _entry(**fields):
    entry = dict(
        created=_STAMP,
        updated=_STAMP,
        userId=0,
        userLogin="",
        userEmail="",
        teamId=0,
        team="",
        uid="",
        title="",
        slug="",
        isFolder=False,
        url="",
    )
    entry.update(fields)
    return entry


GET_FOLDER_PERMISSIONS_JSON = json.dumps(
    [
        _entry(
            id=1,
            folderId=-1,
            role="Viewer",
            permission=1,
            permissionName="View",
            uid="nErXDvCkzz",
        ),
        _entry(id=2, dashboardId=-1, role="Editor", permission=2, permissionName="Edit"),
    ]
)
UPDATE_FOLDER_PERMISSIONS_JSON = json.dumps({"message": "Folder permissions updated"})


class _Client(FolderPermissionsAPI):
    def __init__(self, transport):
        self._transport = transport


@pytest.fixture
def mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    return _Client(Transport(BASE_URL, Config(api_key="placeholder")))


def serve(rsps, body, status=200):
    rsps.reset()
    for method in _METHODS:
        rsps.add(method, _ANY_URL, body=body, status=status, content_type="application/json")


def test_folder_permissions(mock, client):
    serve(mock, GET_FOLDER_PERMISSIONS_JSON)
    resp = client.folder_permissions("nErXDvCkzz")
    assert resp == [
        FolderPermission(
            id=1,
            folder_uid="nErXDvCkzz",
            role="Viewer",
            permission=1,
            permission_name="View",
            folder_id=-1,
        ),
        FolderPermission(
            id=2,
            role="Editor",
            permission=2,
            permission_name="Edit",
            dashboard_id=-1,
        ),
    ]
    assert mock.calls[0].request.url == BASE_URL + "/api/folders/nErXDvCkzz/permissions"


def test_update_folder_permissions(mock, client):
    serve(mock, UPDATE_FOLDER_PERMISSIONS_JSON)
    items = PermissionItems(
        items=[
            PermissionItem(role="viewer", permission=1),
            PermissionItem(role="Editor", permission=2),
            PermissionItem(team_id=1, permission=1),
            PermissionItem(user_id=11, permission=4),
        ]
    )
    expected = {
        "items": [
            {"role": "viewer", "permission": 1},
            {"role": "Editor", "permission": 2},
            {"teamId": 1, "permission": 1},
            {"userId": 11, "permission": 4},
        ]
    }
    assert items.to_dict() == expected
    assert client.update_folder_permissions("nErXDvCkzz", items) is None

    request = mock.calls[0].request
    assert request.method == "POST"
    assert request.url == BASE_URL + "/api/folders/nErXDvCkzz/permissions"
    assert json.loads(request.body) == expected


def test_permission_item_keeps_zero_permission():
    assert PermissionItem().to_dict() == {"permission": 0}


def test_folder_permissions_error(mock, client):
    serve(mock, '{"message":"forbidden"}', status=403)
    with pytest.raises(GrafanaAPIError) as excinfo:
        client.folder_permissions("nErXDvCkzz")
    assert excinfo.value.status_code == 403