import json
import re

import pytest
import responses

from grafana_client.errors import GrafanaAPIError
from grafana_client.folder import Folder, FolderAPI, FolderPayload
from grafana_client.transport import Config, Transport

BASE_URL = "http://my-grafana.com"
_ANY_URL = re.compile(re.escape(BASE_URL) + r"/.*")
_METHODS = (responses.GET, responses.POST, responses.PUT, responses.PATCH, responses.DELETE)

FOLDER_JSON = """{
  "id": 1,
  "uid": "nErXDvCkzz",
  "title": "Departmenet ABC",
  "url": "/dashboards/f/nErXDvCkzz/department-abc",
  "hasAcl": false,
  "canSave": true,
  "canEdit": true,
  "canAdmin": true,
  "createdBy": "admin",
  "created": "2018-01-31T17:43:12+01:00",
  "updatedBy": "admin",
  "updated": "2018-01-31T17:43:12+01:00",
  "version": 1
}"""
GET_FOLDERS_JSON = f"[{FOLDER_JSON}]"
UPDATED_FOLDER_JSON = FOLDER_JSON.replace("ABC", "DEF").replace("abc", "def")
DELETED_FOLDER_JSON = '{"message":"Folder deleted"}'


class _Client(FolderAPI):
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


def test_folders(mock, client):
    serve(mock, GET_FOLDERS_JSON)
    folders = client.folders()
    assert len(folders) == 1
    assert folders[0].id == 1
    assert folders[0].title == "Departmenet ABC"
    assert mock.calls[0].request.url == BASE_URL + "/api/folders/"


def test_folder(mock, client):
    serve(mock, FOLDER_JSON)
    folder = client.folder(1)
    assert folder == Folder(
        id=1,
        uid="nErXDvCkzz",
        title="Departmenet ABC",
        url="/dashboards/f/nErXDvCkzz/department-abc",
    )
    assert mock.calls[0].request.url == BASE_URL + "/api/folders/id/1"


def test_folder_by_uid(mock, client):
    serve(mock, FOLDER_JSON)
    folder = client.folder_by_uid("nErXDvCkzz")
    assert folder.uid == "nErXDvCkzz"
    assert folder.title == "Departmenet ABC"
    assert mock.calls[0].request.url == BASE_URL + "/api/folders/nErXDvCkzz"


def test_new_folder(mock, client):
    serve(mock, FOLDER_JSON)
    folder = client.new_folder("test-folder")
    assert folder.uid == "nErXDvCkzz"
    request = mock.calls[0].request
    assert request.method == "POST"
    assert json.loads(request.body) == {"title": "test-folder"}


def test_new_folder_with_uid(mock, client):
    serve(mock, FOLDER_JSON)
    folder = client.new_folder("test-folder", "my-uid")
    assert folder.id == 1
    assert json.loads(mock.calls[0].request.body) == {"title": "test-folder", "uid": "my-uid"}


def test_update_folder(mock, client):
    serve(mock, UPDATED_FOLDER_JSON)
    assert client.update_folder("nErXDvCkzz", "test-folder") is None
    request = mock.calls[0].request
    assert request.method == "PUT"
    assert request.url == BASE_URL + "/api/folders/nErXDvCkzz"
    assert json.loads(request.body) == {"title": "test-folder", "overwrite": True}


def test_update_folder_with_new_uid(mock, client):
    serve(mock, UPDATED_FOLDER_JSON)
    assert client.update_folder("nErXDvCkzz", "test-folder", "other-uid") is None
    assert json.loads(mock.calls[0].request.body) == {
        "title": "test-folder",
        "uid": "other-uid",
        "overwrite": True,
    }


def test_delete_folder(mock, client):
    serve(mock, DELETED_FOLDER_JSON)
    assert client.delete_folder("nErXDvCkzz") is None
    request = mock.calls[0].request
    assert request.method == "DELETE"
    assert request.url == BASE_URL + "/api/folders/nErXDvCkzz"


def test_folder_error(mock, client):
    serve(mock, '{"message":"folder not found"}', status=404)
    with pytest.raises(GrafanaAPIError) as excinfo:
        client.folder(5)
    assert excinfo.value.status_code == 404


def test_payload_omits_empty_fields():
    assert FolderPayload(title="x").to_dict() == {"title": "x"}