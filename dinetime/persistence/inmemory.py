"""In-memory implementation of the checkpoint repository."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict

from .models import Checkpoint
from .repository import CheckpointRepository


class InMemoryCheckpointRepository(CheckpointRepository):
    """Keep checkpoints in local memory.

    Useful for tests or when no database is configured. Checkpoints do not
    survive a process restart, so every sync starts from its given start.
    """

    def __init__(self) -> None:
        self._checkpoints: Dict[str, Checkpoint] = {}

    async def get_checkpoint(self, key: str) -> Checkpoint | None:
        return self._checkpoints.get(key)

    async def save_checkpoint(self, key: str, cutoff: str) -> Checkpoint:
        checkpoint = Checkpoint(key=key, cutoff=cutoff, updated_at=datetime.now(timezone.utc))
        self._checkpoints[key] = checkpoint
        return checkpoint

    async def list_checkpoints(self) -> list[Checkpoint]:
        return [self._checkpoints[key] for key in sorted(self._checkpoints)]

    def close(self) -> None:
        pass
