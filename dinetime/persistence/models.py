"""Data models for persisted sync state."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Checkpoint(BaseModel):
    """Last cutoff reached by a sync of one collection at one site."""

    key: str
    cutoff: str
    updated_at: Optional[datetime] = None


def checkpoint_key(collection: str, site_uid: str) -> str:
    return f"{collection}:{site_uid}"
