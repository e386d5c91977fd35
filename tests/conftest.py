from unittest.mock import MagicMock

import pytest

from gwsnippets.access import gws

@pytest.fixture(autouse=True)
def clean_gws(tmp_path, monkeypatch):
    """
    Point the singleton at files that don't exist so nothing on the
    machine running the tests gets read or written.
    """
    monkeypatch.setenv(gws.SECRETS_ENV, str(tmp_path / "client_secrets.json"))
    monkeypatch.setenv(gws.CACHE_ENV, str(tmp_path / "tokens.json"))
    gws.reset()
    yield gws
    gws.reset()

@pytest.fixture
def services(monkeypatch):
    """
    Stand in for the discovery clients, keyed by (name, version).
    e.g. services["slides", "v1"].presentations.return_value.create...
    """
    built = {}
    def get_service(name, version):
        return built.setdefault((name, version), MagicMock(name=f"{name}:{version}"))
    monkeypatch.setattr(gws, "get_service", get_service)
    monkeypatch.setattr(gws, "new_http", lambda: MagicMock(name="http"))
    class _Services(dict):
        def __missing__(self, key):
            return get_service(*key)
    return _Services()

@pytest.fixture
def slides_service(services):
    return services["slides", "v1"]

@pytest.fixture
def sheets_service(services):
    return services["sheets", "v4"]

@pytest.fixture
def drive_service(services):
    return services["drive", "v3"]

@pytest.fixture
def chat_service(services):
    return services["chat", "v1"]
