# src/mcqforge/stores/sqlite_question.py
"""SQLite question store implementation."""

import json
import sqlite3
from datetime import datetime
from pathlib import Path

from mcqforge.exceptions import PersistenceError
from mcqforge.models import ValidatedQuestion
from mcqforge.stores.base import QuestionStore

_COLUMNS = (
    "id, text, choices, correct_answer, explanation, difficulty, topic, "
    "estimated_time_seconds, metadata, created_at"
)


class SQLiteQuestionStore(QuestionStore):
    """SQLite-based store for generated questions."""

    def __init__(self, db_path: str) -> None:
        """Initialize the SQLite question store."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS generated_questions (
                    id TEXT PRIMARY KEY,
                    text TEXT NOT NULL,
                    choices TEXT NOT NULL,
                    correct_answer TEXT NOT NULL,
                    explanation TEXT,
                    difficulty TEXT NOT NULL,
                    topic TEXT NOT NULL,
                    estimated_time_seconds INTEGER NOT NULL,
                    metadata TEXT,
                    created_at TEXT NOT NULL
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_question_topic_created "
                "ON generated_questions(topic, created_at)"
            )
            conn.commit()

    @staticmethod
    def _row_to_question(row: tuple) -> ValidatedQuestion:
        return ValidatedQuestion(
            id=row[0],
            text=row[1],
            choices=json.loads(row[2]),
            correct_answer=row[3],
            explanation=row[4],
            difficulty=row[5],
            topic=row[6],
            estimated_time_seconds=row[7],
            metadata=json.loads(row[8]) if row[8] else {},
            created_at=datetime.fromisoformat(row[9]),
        )

    def insert(self, question: ValidatedQuestion) -> None:
        """Store a new question.

        Ids are never reused; an id collision is a PersistenceError, not an
        overwrite.
        """
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.execute(
                    f"INSERT INTO generated_questions ({_COLUMNS}) "
                    "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                    (
                        question.id,
                        question.text,
                        json.dumps(question.choices),
                        question.correct_answer,
                        question.explanation,
                        question.difficulty,
                        question.topic,
                        question.estimated_time_seconds,
                        json.dumps(question.metadata, default=str),
                        question.created_at.isoformat(),
                    ),
                )
                conn.commit()
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to store question {question.id}: {e}") from e

    def get(self, question_id: str) -> ValidatedQuestion | None:
        """Retrieve a question by ID."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                f"SELECT {_COLUMNS} FROM generated_questions WHERE id = ?",
                (question_id,),
            )
            row = cursor.fetchone()
            return self._row_to_question(row) if row else None

    def query_recent(self, topic: str | None = None, limit: int = 500) -> list[ValidatedQuestion]:
        """Most recent questions, newest first."""
        query = f"SELECT {_COLUMNS} FROM generated_questions"
        params: list = []
        if topic is not None:
            query += " WHERE topic = ?"
            params.append(topic)
        query += " ORDER BY created_at DESC, rowid DESC LIMIT ?"
        params.append(limit)
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(query, params)
            return [self._row_to_question(row) for row in cursor.fetchall()]

    def count_questions(self, topic: str | None = None) -> int:
        """Count stored questions."""
        with sqlite3.connect(self.db_path) as conn:
            if topic is None:
                cursor = conn.execute("SELECT COUNT(id) FROM generated_questions")
            else:
                cursor = conn.execute(
                    "SELECT COUNT(id) FROM generated_questions WHERE topic = ?", (topic,)
                )
            count = cursor.fetchone()
            return count[0] if count else 0
