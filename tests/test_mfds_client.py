import pytest
import requests
from unittest.mock import MagicMock, patch
from recipe_explorer.core.errors import MfdsApiError, MfdsConfigError
from recipe_explorer.core.settings import Settings
from recipe_explorer.services.mfds_client import MfdsClient


def make_response(status_code=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = "OK" if response.ok else "Error"
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def client(settings):
    return MfdsClient(settings)


def test_build_url(client):
    assert client.build_url(1, 100) == "http://api.example.com/api/test-key/COOKRCP01/json/1/100"


def test_build_url_strips_trailing_slash():
    client = MfdsClient(Settings(api_key="k", base_url="http://host/api/"))
    assert client.build_url(101, 200) == "http://host/api/k/COOKRCP01/json/101/200"


def test_missing_api_key_raises_before_request():
    client = MfdsClient(Settings(api_key=None))
    with patch("recipe_explorer.services.mfds_client.requests.get") as mock_get:
        with pytest.raises(MfdsConfigError):
            client.fetch_recipe_list(1, 10)
        mock_get.assert_not_called()


@patch("recipe_explorer.services.mfds_client.requests.get")
def test_fetch_returns_rows(mock_get, client):
    rows = [{"RCP_SEQ": "1", "RCP_NM": "Soup"}, {"RCP_SEQ": "2", "RCP_NM": "Stew"}]
    mock_get.return_value = make_response(payload={
        "COOKRCP01": {"total_count": "1146", "row": rows, "RESULT": {"CODE": "INFO-000", "MSG": "OK"}}
    })

    result = client.fetch_recipe_list(1, 2)

    assert result == rows
    mock_get.assert_called_once_with(
        "http://api.example.com/api/test-key/COOKRCP01/json/1/2",
        timeout=10
    )


@patch("recipe_explorer.services.mfds_client.requests.get")
def test_non_ok_status_raises_with_code(mock_get, client):
    mock_get.return_value = make_response(status_code=503)
    with pytest.raises(MfdsApiError) as excinfo:
        client.fetch_recipe_list(1, 10)
    assert excinfo.value.status_code == 503
    assert "503" in str(excinfo.value)


@patch("recipe_explorer.services.mfds_client.requests.get")
def test_transport_error_is_wrapped(mock_get, client):
    mock_get.side_effect = requests.exceptions.Timeout("timed out")
    with pytest.raises(MfdsApiError):
        client.fetch_recipe_list(1, 10)


@patch("recipe_explorer.services.mfds_client.requests.get")
def test_invalid_json_raises(mock_get, client):
    mock_get.return_value = make_response(json_error=ValueError("bad json"))
    with pytest.raises(MfdsApiError, match="invalid JSON"):
        client.fetch_recipe_list(1, 10)


@pytest.mark.parametrize("payload", [
    {"RESULT": {"CODE": "INFO-100", "MSG": "인증키가 유효하지 않습니다."}},
    {"COOKRCP01": {"total_count": "0", "RESULT": {"CODE": "INFO-200", "MSG": "해당하는 데이터가 없습니다."}}},
    {"COOKRCP01": None},
    [],
])
@patch("recipe_explorer.services.mfds_client.requests.get")
def test_unexpected_payload_returns_empty(mock_get, payload, client):
    mock_get.return_value = make_response(payload=payload)
    assert client.fetch_recipe_list(1, 10) == []


@patch("recipe_explorer.services.mfds_client.requests.get")
def test_empty_row_list(mock_get, client):
    mock_get.return_value = make_response(payload={"COOKRCP01": {"total_count": "0", "row": []}})
    assert client.fetch_recipe_list(1000, 1100) == []
