import pytest
import responses

from grafana_client.datasource import DataSourceAPI
from grafana_client.errors import GrafanaAPIError, get_api_error, is_not_found
from grafana_client.transport import Config, Transport

BASE_URL = "http://my-grafana.com"
SOME_ERROR_JSON = '{"message":"some unknown error occurred"}'
DATA_SOURCE_NOT_FOUND_JSON = '{"message":"datasource not found"}'


class _Client(DataSourceAPI):
    def __init__(self, transport):
        self._transport = transport


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    return _Client(Transport(BASE_URL, Config(api_key="placeholder")))


def test_gapi_error(mocked, client):
    mocked.add(responses.GET, BASE_URL + "/api/datasources/100", body=SOME_ERROR_JSON, status=500)
    with pytest.raises(GrafanaAPIError) as excinfo:
        client.data_source(100)
    api_error = get_api_error(excinfo.value)
    assert api_error is excinfo.value
    assert api_error.status_code == 500
    assert api_error.message == SOME_ERROR_JSON


def test_is_not_found_error(mocked, client):
    mocked.add(
        responses.GET, BASE_URL + "/api/datasources/100", body=DATA_SOURCE_NOT_FOUND_JSON, status=404
    )
    with pytest.raises(GrafanaAPIError) as excinfo:
        client.data_source(100)
    assert is_not_found(excinfo.value) is True


def test_error_text():
    error = GrafanaAPIError(404, DATA_SOURCE_NOT_FOUND_JSON)
    assert str(error) == f"status: 404, body: {DATA_SOURCE_NOT_FOUND_JSON}"


def test_is_not_found_false_for_other_status():
    assert is_not_found(GrafanaAPIError(500, SOME_ERROR_JSON)) is False


def test_none_and_foreign_errors():
    assert get_api_error(None) is None
    assert is_not_found(None) is False
    assert get_api_error(ValueError("boom")) is None
    assert is_not_found(ValueError("boom")) is False


def test_wrapped_error_is_found():
    api_error = GrafanaAPIError(404, DATA_SOURCE_NOT_FOUND_JSON)
    try:
        try:
            raise api_error
        except GrafanaAPIError as inner:
            raise RuntimeError("error getting permissions") from inner
    except RuntimeError as outer:
        wrapped = outer
    assert get_api_error(wrapped) is api_error
    assert is_not_found(wrapped) is True