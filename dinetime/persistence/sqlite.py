"""SQLite implementation of the checkpoint repository."""

from __future__ import annotations

import asyncio
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .models import Checkpoint
from .repository import CheckpointRepository


class SQLiteCheckpointRepository(CheckpointRepository):
    """Persist checkpoints using SQLite."""

    def __init__(self, db_path: str | Path):
        self.db_path = str(db_path)
        self._conn: sqlite3.Connection | None = None
        self._ensure_schema()

    def _connection(self) -> sqlite3.Connection:
        # Reopened on demand after close().
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    # ------------------------------------------------------------------
    # Schema management
    def _ensure_schema(self) -> None:
        conn = self._connection()
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS checkpoints (
                key TEXT PRIMARY KEY,
                cutoff TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        conn.commit()

    # ------------------------------------------------------------------
    # Helper methods
    def _execute(self, query: str, *params: Any) -> None:
        conn = self._connection()
        cur = conn.cursor()
        cur.execute(query, params)
        conn.commit()

    def _fetchone(self, query: str, *params: Any) -> sqlite3.Row | None:
        cur = self._connection().cursor()
        cur.execute(query, params)
        return cur.fetchone()

    def _fetchall(self, query: str, *params: Any) -> list[sqlite3.Row]:
        cur = self._connection().cursor()
        cur.execute(query, params)
        return cur.fetchall()

    @staticmethod
    def _to_checkpoint(row: sqlite3.Row) -> Checkpoint:
        return Checkpoint(
            key=row["key"],
            cutoff=row["cutoff"],
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    # ------------------------------------------------------------------
    # Repository API
    async def get_checkpoint(self, key: str) -> Checkpoint | None:
        row = await asyncio.to_thread(
            self._fetchone,
            "SELECT key, cutoff, updated_at FROM checkpoints WHERE key = ?",
            key,
        )
        return self._to_checkpoint(row) if row else None

    async def save_checkpoint(self, key: str, cutoff: str) -> Checkpoint:
        updated_at = datetime.now(timezone.utc)
        await asyncio.to_thread(
            self._execute,
            "INSERT INTO checkpoints (key, cutoff, updated_at) VALUES (?, ?, ?) "
            "ON CONFLICT(key) DO UPDATE SET cutoff = excluded.cutoff, "
            "updated_at = excluded.updated_at",
            key,
            cutoff,
            updated_at.isoformat(),
        )
        return Checkpoint(key=key, cutoff=cutoff, updated_at=updated_at)

    async def list_checkpoints(self) -> list[Checkpoint]:
        rows = await asyncio.to_thread(
            self._fetchall,
            "SELECT key, cutoff, updated_at FROM checkpoints ORDER BY key",
        )
        return [self._to_checkpoint(row) for row in rows]

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
