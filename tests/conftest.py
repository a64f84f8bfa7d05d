from datetime import datetime, timezone

import pytest

from dinetime.client import DineTimeClient
from dinetime.config import DineTimeConfig
from dinetime.contracts import Credential
from dinetime.transports.inmemory import InMemoryTransport

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep local config files and credentials out of the tests."""
    monkeypatch.setenv("DINETIME_CONFIG", str(tmp_path / "missing.yaml"))
    for name in (
        "DINETIME_TRANSPORT",
        "DINETIME_COMPANY_UID",
        "DINETIME_ACCESS_KEY",
        "DINETIME_SECRET_KEY",
        "DINETIME_DATABASE_URL",
        "QSR_ACCESSKEY",
        "QSR_SECRETKEY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def credential():
    return Credential("test-access", "test-secret")


@pytest.fixture
def transport():
    return InMemoryTransport()


@pytest.fixture
def config():
    return DineTimeConfig()


@pytest.fixture
def client(credential, transport, config):
    return DineTimeClient(
        "company-1",
        credential,
        transport=transport,
        config=config,
        clock=lambda: FIXED_NOW,
    )
