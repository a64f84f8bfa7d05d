from __future__ import annotations

import os
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .contracts import Credential


class CredentialsConfig(BaseModel):
    """API key pair issued by QSR."""

    access_key: Optional[str] = None
    secret_key: Optional[str] = None

    def to_credential(self) -> Credential:
        """Build a :class:`Credential`; raises ``CredentialError`` if incomplete."""
        return Credential(self.access_key or "", self.secret_key or "")


class HttpConfig(BaseModel):
    """Settings for the httpx transport."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


class TransportConfig(BaseModel):
    """Transport configuration settings."""

    backend: Literal["httpx", "inmemory"] = "httpx"
    http: HttpConfig = Field(default_factory=HttpConfig)


class PaginationConfig(BaseModel):
    """Pagination safety settings.

    ``page_ceiling`` caps how many pages a single loop may fetch even when the
    caller asked for an unbounded walk. ``None`` disables the cap; otherwise
    it must be positive.
    """

    page_ceiling: Optional[int] = Field(default=None, gt=0)


class DineTimeConfig(BaseModel):
    """Top-level configuration model."""

    company_uid: Optional[str] = None
    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)
    transport: TransportConfig = Field(default_factory=TransportConfig)
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    database_url: Optional[str] = None


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def load_config(path: Optional[str] = None) -> DineTimeConfig:
    """Load configuration from YAML file and the environment.

    Args:
        path: Optional path to config file. Falls back to DINETIME_CONFIG env
            variable or 'config.yaml' in the current directory.
    """

    config_path = path or os.getenv("DINETIME_CONFIG", "config.yaml")
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        config = DineTimeConfig(**data)
    else:
        config = DineTimeConfig()

    company_uid = _first_env("DINETIME_COMPANY_UID")
    if company_uid:
        config.company_uid = company_uid
    access_key = _first_env("DINETIME_ACCESS_KEY", "QSR_ACCESSKEY")
    if access_key:
        config.credentials.access_key = access_key
    secret_key = _first_env("DINETIME_SECRET_KEY", "QSR_SECRETKEY")
    if secret_key:
        config.credentials.secret_key = secret_key
    database_url = _first_env("DINETIME_DATABASE_URL")
    if database_url:
        config.database_url = database_url
    return config
