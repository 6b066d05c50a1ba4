# tests/stores/test_sqlite_log.py
"""Tests for the SQLite attempt log store."""

import os

import pytest

from mcqforge.models import GenerationAttemptLog
from mcqforge.stores.base import AttemptLogStore
from mcqforge.stores.sqlite_log import SQLiteAttemptLogStore


@pytest.fixture
def log_store(temp_dir):
    return SQLiteAttemptLogStore(os.path.join(temp_dir, "attempts.db"))


def _entry(success: bool, attempt: int = 1, **kwargs) -> GenerationAttemptLog:
    return GenerationAttemptLog(
        prompt="Generate a question",
        params={"topic": "Algebra", "difficulty": "beginner", "attempt": attempt},
        success=success,
        **kwargs,
    )


class TestSQLiteAttemptLogStore:
    def test_is_log_store(self, log_store):
        assert isinstance(log_store, AttemptLogStore)

    def test_no_update_or_delete(self, log_store):
        assert not hasattr(log_store, "update")
        assert not hasattr(log_store, "delete")

    def test_append_assigns_ids(self, log_store):
        first = log_store.append(_entry(True))
        second = log_store.append(_entry(False))
        assert first.id is not None
        assert second.id == first.id + 1

    def test_append_does_not_mutate_entry(self, log_store):
        entry = _entry(True)
        log_store.append(entry)
        assert entry.id is None

    def test_round_trip_fields(self, log_store):
        log_store.append(
            _entry(
                False,
                requester_id="user-1",
                model="openai/gpt-4o-mini",
                response={"question": "Q?", "options": ["a"]},
                error="invalid_choices: At least 2 choices are required, got 1",
            )
        )
        (entry,) = log_store.list_logs()
        assert entry.requester_id == "user-1"
        assert entry.model == "openai/gpt-4o-mini"
        assert entry.response == {"question": "Q?", "options": ["a"]}
        assert entry.params["attempt"] == 1
        assert entry.success is False
        assert entry.error.startswith("invalid_choices")

    def test_raw_text_response(self, log_store):
        log_store.append(_entry(False, response="not json"))
        assert log_store.list_logs()[0].response == "not json"

    def test_list_newest_first(self, log_store):
        for attempt in (1, 2, 3):
            log_store.append(_entry(False, attempt=attempt))
        attempts = [entry.params["attempt"] for entry in log_store.list_logs()]
        assert attempts == [3, 2, 1]

    def test_list_limit_and_filter(self, log_store):
        log_store.append(_entry(False))
        log_store.append(_entry(True))
        log_store.append(_entry(False))
        assert len(log_store.list_logs(limit=2)) == 2
        assert all(entry.success for entry in log_store.list_logs(success=True))
        assert len(log_store.list_logs(success=False)) == 2

    def test_count_logs(self, log_store):
        log_store.append(_entry(False))
        log_store.append(_entry(True))
        assert log_store.count_logs() == 2
        assert log_store.count_logs(success=True) == 1
        assert log_store.count_logs(success=False) == 1
