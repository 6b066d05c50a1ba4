# src/mcqforge/stores/sqlite_log.py
"""SQLite implementation of the append-only attempt log."""

import json
import sqlite3
from datetime import datetime
from pathlib import Path

from mcqforge.exceptions import PersistenceError
from mcqforge.models import GenerationAttemptLog
from mcqforge.stores.base import AttemptLogStore


class SQLiteAttemptLogStore(AttemptLogStore):
    """SQLite-backed attempt log."""

    def __init__(self, db_path: str) -> None:
        """Initialize the log store.

        Args:
            db_path: Path to SQLite database file
        """
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._db_path = db_path
        self._init_db()

    def _init_db(self) -> None:
        """Initialize the database schema."""
        with sqlite3.connect(self._db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS attempt_logs (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    requester_id TEXT,
                    prompt TEXT NOT NULL,
                    params TEXT,
                    model TEXT,
                    response TEXT,
                    success INTEGER NOT NULL,
                    error TEXT,
                    created_at TEXT NOT NULL
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_log_requester ON attempt_logs(requester_id)")

    def append(self, entry: GenerationAttemptLog) -> GenerationAttemptLog:
        """Append a log row and return it with its id."""
        try:
            with sqlite3.connect(self._db_path) as conn:
                cursor = conn.execute(
                    """
                    INSERT INTO attempt_logs
                        (requester_id, prompt, params, model, response, success, error, created_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        entry.requester_id,
                        entry.prompt,
                        json.dumps(entry.params, default=str),
                        entry.model,
                        json.dumps(entry.response, default=str),
                        int(entry.success),
                        entry.error,
                        entry.created_at.isoformat(),
                    ),
                )
                conn.commit()
                row_id = cursor.lastrowid
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to append attempt log: {e}") from e
        return entry.model_copy(update={"id": row_id})

    def list_logs(self, limit: int = 50, success: bool | None = None) -> list[GenerationAttemptLog]:
        """Most recent log rows, newest first."""
        query = (
            "SELECT id, requester_id, prompt, params, model, response, success, error, created_at "
            "FROM attempt_logs"
        )
        params: list = []
        if success is not None:
            query += " WHERE success = ?"
            params.append(int(success))
        query += " ORDER BY id DESC LIMIT ?"
        params.append(limit)
        with sqlite3.connect(self._db_path) as conn:
            cursor = conn.execute(query, params)
            return [
                GenerationAttemptLog(
                    id=row[0],
                    requester_id=row[1],
                    prompt=row[2],
                    params=json.loads(row[3]) if row[3] else {},
                    model=row[4],
                    response=json.loads(row[5]) if row[5] else None,
                    success=bool(row[6]),
                    error=row[7],
                    created_at=datetime.fromisoformat(row[8]),
                )
                for row in cursor.fetchall()
            ]

    def count_logs(self, success: bool | None = None) -> int:
        """Count log rows."""
        with sqlite3.connect(self._db_path) as conn:
            if success is None:
                cursor = conn.execute("SELECT COUNT(id) FROM attempt_logs")
            else:
                cursor = conn.execute(
                    "SELECT COUNT(id) FROM attempt_logs WHERE success = ?", (int(success),)
                )
            count = cursor.fetchone()
            return count[0] if count else 0
