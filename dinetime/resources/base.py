"""Shared base for resource groups."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..client import DineTimeClient


class Resource:
    """Maps typed arguments to request descriptors for one API area."""

    def __init__(self, client: "DineTimeClient") -> None:
        self._client = client

    @property
    def company_uid(self) -> str:
        return self._client.company_uid
