import pytest
from fastapi.testclient import TestClient

from ecommerce_api.main import create_app


@pytest.fixture
def client():
    """In-process client; no socket is opened."""
    return TestClient(create_app())


@pytest.fixture
def no_listen(monkeypatch):
    """Stub out uvicorn's blocking run and record the configs it was given."""
    started = []

    def fake_run(self, sockets=None):
        started.append(self.config)

    monkeypatch.setattr("ecommerce_api.server.ListeningServer.run", fake_run)
    return started
