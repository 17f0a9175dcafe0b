from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from wg_keygen.config.settings import settings
from wg_keygen.main import app
from wg_keygen.utils import crypto_utils


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def hide_private_keys(monkeypatch):
    monkeypatch.setattr(settings, "expose_private_keys", False)


@pytest.fixture
def broken_entropy(monkeypatch):
    """Make the OS random source fail for the key generator only."""
    def urandom(n):
        raise NotImplementedError("no randomness source")

    monkeypatch.setattr(crypto_utils, "os", SimpleNamespace(urandom=urandom))
