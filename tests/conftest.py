# tests/conftest.py

import logging

import pytest
from fastapi.testclient import TestClient

from main import create_app
from settings import get_settings


LISTEN_ENV_VARS = ("ENV", "HOST", "PORT", "DEFAULT_PORT", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def _clean_listen_env(monkeypatch):
    for name in LISTEN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    # main() sets this from LOG_LEVEL
    logging.getLogger("listenport").setLevel(logging.NOTSET)


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(), raise_server_exceptions=False)
