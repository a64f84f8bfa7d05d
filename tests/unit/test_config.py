"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from dinetime.config import DineTimeConfig, load_config
from dinetime.errors import CredentialError
from dinetime.transports import get_transport
from dinetime.transports.httpx import HttpxTransport
from dinetime.transports.inmemory import InMemoryTransport


def test_defaults_without_config_file():
    config = load_config()
    assert config.company_uid is None
    assert config.transport.backend == "httpx"
    assert config.transport.http.base_url == "https://api.dinetime.com"
    assert config.pagination.page_ceiling is None


def test_load_config_from_file(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
company_uid: company-9
credentials:
  access_key: file-access
  secret_key: file-secret
transport:
  backend: inmemory
  http:
    base_url: https://sandbox.example.com
    timeout: 5
pagination:
  page_ceiling: 25
database_url: sqlite:///tmp/checkpoints.db
"""
    )
    monkeypatch.setenv("DINETIME_CONFIG", str(config_path))

    config = load_config()
    assert config.company_uid == "company-9"
    assert config.credentials.access_key == "file-access"
    assert config.transport.backend == "inmemory"
    assert config.transport.http.base_url == "https://sandbox.example.com"
    assert config.transport.http.timeout == 5.0
    assert config.pagination.page_ceiling == 25
    assert config.database_url == "sqlite:///tmp/checkpoints.db"


def test_environment_overrides_file(tmp_path, monkeypatch):
    config_path = tmp_path / "dinetime.yaml"
    config_path.write_text("credentials:\n  access_key: file-access\n  secret_key: file-secret\n")
    monkeypatch.setenv("DINETIME_ACCESS_KEY", "env-access")
    monkeypatch.setenv("QSR_SECRETKEY", "legacy-secret")
    monkeypatch.setenv("DINETIME_COMPANY_UID", "env-company")

    config = load_config(str(config_path))
    assert config.company_uid == "env-company"
    credential = config.credentials.to_credential()
    assert credential.access_key == "env-access"
    assert credential.secret_key == "legacy-secret"


def test_incomplete_credentials_raise():
    with pytest.raises(CredentialError):
        DineTimeConfig().credentials.to_credential()


def test_get_transport_uses_config(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
transport:
  backend: httpx
  http:
    base_url: https://confighost.example.com
    timeout: 12
"""
    )
    monkeypatch.setenv("DINETIME_CONFIG", str(config_path))

    transport = get_transport()
    assert isinstance(transport, HttpxTransport)
    assert transport.base_url == "https://confighost.example.com"
    assert transport.timeout == 12.0


def test_get_transport_env_override(monkeypatch):
    monkeypatch.setenv("DINETIME_TRANSPORT", "inmemory")
    assert isinstance(get_transport(), InMemoryTransport)


def test_get_transport_rejects_unknown_backend():
    with pytest.raises(ValueError):
        get_transport("carrier-pigeon")


@pytest.mark.parametrize("ceiling", [0, -5])
def test_page_ceiling_must_be_positive(ceiling):
    with pytest.raises(ValidationError):
        DineTimeConfig(pagination={"page_ceiling": ceiling})


def test_page_ceiling_from_file_is_validated(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("pagination:\n  page_ceiling: 0\n")
    with pytest.raises(ValidationError):
        load_config(str(config_path))
