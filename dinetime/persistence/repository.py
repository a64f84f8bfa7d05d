"""Repository abstraction for sync checkpoint persistence."""

from __future__ import annotations

from typing import Protocol

from .models import Checkpoint


class CheckpointRepository(Protocol):
    """Protocol for checkpoint persistence backends."""

    async def get_checkpoint(self, key: str) -> Checkpoint | None:
        """Retrieve the checkpoint stored under ``key``."""

    async def save_checkpoint(self, key: str, cutoff: str) -> Checkpoint:
        """Store ``cutoff`` under ``key``, replacing any previous value."""

    async def list_checkpoints(self) -> list[Checkpoint]:
        """Return all stored checkpoints ordered by key."""

    def close(self) -> None:
        """Release backend resources; the repository stays usable."""
