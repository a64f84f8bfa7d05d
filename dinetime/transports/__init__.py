"""Transport factory and initialization."""

from __future__ import annotations

import os
from typing import Optional

from ..config import DineTimeConfig, load_config
from .base import BaseTransport
from .inmemory import InMemoryTransport


def get_transport(
    backend: Optional[str] = None, config: Optional[DineTimeConfig] = None
) -> BaseTransport:
    """Factory function to get the configured transport."""

    config = config or load_config()
    backend = (
        backend
        or os.getenv("DINETIME_TRANSPORT")
        or config.transport.backend
    ).lower()

    if backend == "inmemory":
        return InMemoryTransport()
    elif backend == "httpx":
        from .httpx import HttpxTransport

        http_conf = config.transport.http
        return HttpxTransport(base_url=http_conf.base_url, timeout=http_conf.timeout)
    else:
        raise ValueError(f"Unsupported transport backend: {backend}")


__all__ = ["BaseTransport", "InMemoryTransport", "get_transport"]
