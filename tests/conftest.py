"""Shared fixtures: an in-memory stand-in for the Supabase client."""

import copy
import time
from itertools import count
from typing import Any

import pytest
from fastapi.testclient import TestClient

from studyai.db import supabase_client


class FakeResponse:
    """Mimics the APIResponse returned by ``execute()``."""

    def __init__(self, data: list[dict[str, Any]]):
        self.data = data


class FakeQuery:
    """Records a chained PostgREST query and runs it against in-memory rows."""

    def __init__(self, db: "FakeSupabase", table: str):
        self._db = db
        self._table = table
        self._op = "select"
        self._payload = None
        self._on_conflict = ""
        self._filters: list[tuple[str, Any]] = []
        self._limit = None

    def select(self, columns: str = "*"):
        self._op = "select"
        self._columns = columns
        return self

    def insert(self, payload):
        self._op = "insert"
        self._payload = payload
        return self

    def upsert(self, payload, on_conflict: str = ""):
        self._op = "upsert"
        self._payload = payload
        self._on_conflict = on_conflict
        return self

    def eq(self, column: str, value: Any):
        self._filters.append((column, value))
        return self

    def limit(self, n: int):
        self._limit = n
        return self

    def execute(self) -> FakeResponse:
        self._db.calls.append((self._table, self._op))
        if self._db.delay:
            time.sleep(self._db.delay)
        if self._table in self._db.fail_tables:
            limit = self._db.fail_tables[self._table]
            if limit is None or self._db.writes(self._table) >= limit:
                raise RuntimeError(f"{self._table} unavailable")

        rows = self._db.tables.setdefault(self._table, [])
        if self._op == "insert":
            row = dict(self._payload)
            row.setdefault("id", next(self._db.ids))
            rows.append(row)
            return FakeResponse([copy.deepcopy(row)])

        if self._op == "upsert":
            row = dict(self._payload)
            key = self._on_conflict
            for i, existing in enumerate(rows):
                if existing.get(key) == row.get(key):
                    rows[i] = row
                    break
            else:
                rows.append(row)
            return FakeResponse([copy.deepcopy(row)])

        matched = [
            r for r in rows
            if all(str(r.get(col)) == str(val) for col, val in self._filters)
        ]
        if self._limit is not None:
            matched = matched[:self._limit]
        return FakeResponse(copy.deepcopy(matched))


class FakeSupabase:
    """In-memory Supabase client keyed by table name.

    ``delay`` makes every ``execute()`` block for that many seconds.
    ``fail_tables`` maps a table to the number of successful inserts allowed
    before every further call on it raises (None: fail immediately).
    """

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.calls: list[tuple[str, str]] = []
        self.fail_tables: dict[str, int | None] = {}
        self.ids = count(1)
        self.delay = 0.0

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def rows(self, name: str) -> list[dict[str, Any]]:
        return self.tables.get(name, [])

    def writes(self, name: str) -> int:
        return len(self.rows(name))


@pytest.fixture
def fake_db(monkeypatch):
    """Install a fresh in-memory Supabase client as the shared singleton."""
    db = FakeSupabase()
    monkeypatch.setattr(supabase_client, "_client", db)
    return db


@pytest.fixture
def client(fake_db):
    """Create test client backed by the fake store."""
    from studyai.api.app import app
    return TestClient(app)


@pytest.fixture
def sample_notes():
    """Twelve sentences long enough to qualify for generation."""
    return " ".join(
        f"Sentence number {i} explains a key idea." for i in range(1, 13)
    )
