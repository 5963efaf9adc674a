import pytest
import requests
from collector.clients.edgex_compose_client import EdgeXComposeClient
from collector.errors import ConfigFileNotFoundError, FetchError

BASE = "https://raw.githubusercontent.com/edgexfoundry/edgex-compose"

class DummyResponse:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text

@pytest.fixture
def client():
    return EdgeXComposeClient()

@pytest.mark.parametrize("is_security,arch,expected", [
    (True, "amd64", f"{BASE}/jakarta/docker-compose.yml"),
    (False, "amd64", f"{BASE}/jakarta/docker-compose-no-secty.yml"),
    (True, "arm64", f"{BASE}/jakarta/docker-compose-arm64.yml"),
    (False, "arm64", f"{BASE}/jakarta/docker-compose-no-secty-arm64.yml"),
])
def test_compose_url(client, is_security, arch, expected):
    assert client.compose_url("jakarta", is_security, arch) == expected

def test_fetch(monkeypatch, client):
    requested = []
    def get(url, timeout):
        requested.append(url)
        return DummyResponse(200, "services: {}")
    monkeypatch.setattr(requests, "get", get)
    assert client.fetch("jakarta", True, "amd64") == "services: {}"
    assert requested == [f"{BASE}/jakarta/docker-compose.yml"]

def test_fetch_not_found(monkeypatch, client):
    monkeypatch.setattr(requests, "get", lambda url, timeout: DummyResponse(404))
    with pytest.raises(ConfigFileNotFoundError) as exc:
        client.fetch("geneva", True, "arm64")
    assert exc.value.version == "geneva"

def test_fetch_server_error(monkeypatch, client):
    monkeypatch.setattr(requests, "get", lambda url, timeout: DummyResponse(503))
    with pytest.raises(FetchError):
        client.fetch("jakarta", True, "amd64")
