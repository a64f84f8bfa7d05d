"""Persistence layer for sync checkpoints."""

from __future__ import annotations

from typing import Optional

from ..config import DineTimeConfig, load_config
from .inmemory import InMemoryCheckpointRepository
from .models import Checkpoint, checkpoint_key
from .repository import CheckpointRepository
from .sqlite import SQLiteCheckpointRepository

_repository_instance: CheckpointRepository | None = None


def get_repository(
    database_url: Optional[str] = None, config: Optional[DineTimeConfig] = None
) -> CheckpointRepository:
    """Factory function to obtain a checkpoint repository.

    The backend is selected from ``database_url``, given explicitly or taken
    from the loaded configuration (which already honours
    ``DINETIME_DATABASE_URL``). Without a database an in-memory repository is
    returned.
    """

    global _repository_instance
    if _repository_instance is not None and database_url is None and config is None:
        return _repository_instance

    config = config or load_config()
    database_url = database_url or config.database_url

    if not database_url:
        _repository_instance = InMemoryCheckpointRepository()
        return _repository_instance

    if database_url.startswith("sqlite://"):
        path = database_url.replace("sqlite://", "", 1)
        _repository_instance = SQLiteCheckpointRepository(path)
    else:
        raise ValueError(f"Unsupported database backend: {database_url}")

    return _repository_instance


__all__ = [
    "Checkpoint",
    "CheckpointRepository",
    "InMemoryCheckpointRepository",
    "SQLiteCheckpointRepository",
    "checkpoint_key",
    "get_repository",
]
