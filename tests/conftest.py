"""
Pytest configuration for Career Recommender backend tests.

Sets up the test environment and shared fixtures, including an in-memory
stand-in for the Supabase table API used by the services.
"""
import os
import uuid
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Set, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest

# Disable config validation during tests
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_PUBLISHABLE_KEY", "test-publishable-key")
# No model credential: tests inject model clients explicitly
os.environ["OPENROUTER_API_KEY"] = ""

from postgrest.exceptions import APIError  # noqa: E402

from career_backend.agents.career.client import OpenRouterClient  # noqa: E402


class FakeQuery:
    """Chainable query mirroring the subset of the postgrest builder we use."""

    def __init__(self, db: "FakeSupabaseClient", table: str):
        self._db = db
        self._table = table
        self._op = "select"
        self._columns: Optional[List[str]] = None
        self._filters: List[Tuple[str, Any]] = []
        self._payload: List[Dict[str, Any]] = []
        self._order: Optional[Tuple[str, bool]] = None

    def select(self, columns: str = "*") -> "FakeQuery":
        self._op = "select"
        if columns.strip() != "*":
            self._columns = [c.strip() for c in columns.split(",")]
        return self

    def insert(self, rows: Any) -> "FakeQuery":
        self._op = "insert"
        self._payload = rows if isinstance(rows, list) else [rows]
        return self

    def delete(self) -> "FakeQuery":
        self._op = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order = (column, desc)
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in self._filters)

    def execute(self) -> SimpleNamespace:
        self._db.operations.append((self._table, self._op))

        if (self._table, self._op) in self._db.failures:
            raise APIError({
                "message": f"{self._table} {self._op} unavailable",
                "code": "503",
                "hint": None,
                "details": None,
            })

        rows = self._db.tables.setdefault(self._table, [])

        if self._op == "insert":
            inserted = [{"id": str(uuid.uuid4()), **row} for row in self._payload]
            rows.extend(inserted)
            return SimpleNamespace(data=inserted)

        if self._op == "delete":
            removed = [row for row in rows if self._matches(row)]
            self._db.tables[self._table] = [row for row in rows if not self._matches(row)]
            return SimpleNamespace(data=removed)

        selected = [dict(row) for row in rows if self._matches(row)]
        if self._order is not None:
            column, desc = self._order
            selected.sort(key=lambda row: row.get(column), reverse=desc)
        if self._columns is not None:
            selected = [{c: row.get(c) for c in self._columns} for row in selected]
        return SimpleNamespace(data=selected)


class FakeSupabaseClient:
    """
    In-memory tables keyed by name.

    `failures` holds (table, operation) pairs that raise APIError;
    `operations` records every executed (table, operation).
    """

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.failures: Set[Tuple[str, str]] = set()
        self.operations: List[Tuple[str, str]] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def rows(self, table: str, **filters: Any) -> List[Dict[str, Any]]:
        return [
            row for row in self.tables.get(table, [])
            if all(row.get(k) == v for k, v in filters.items())
        ]

    def writes(self) -> List[Tuple[str, str]]:
        return [op for op in self.operations if op[1] in ("insert", "delete")]


@pytest.fixture
def supabase_client():
    """
    Mock Supabase client for chained-call assertions.
    Returns a MagicMock that simulates Supabase client behavior.
    """
    mock_client = MagicMock()
    return mock_client


@pytest.fixture
def fake_db():
    """Empty in-memory Supabase stand-in."""
    return FakeSupabaseClient()


@pytest.fixture
def seeded_db(fake_db):
    """In-memory Supabase stand-in with a resume and quiz answers for user u1."""
    fake_db.tables["profiles"] = [
        {"id": "u1", "resume_text": "Python developer with 3 years of data pipeline experience."},
    ]
    fake_db.tables["quiz_responses"] = [
        {"user_id": "u1", "question_id": "work_style", "answer": "independent", "score": 4},
        {"user_id": "u1", "question_id": "interests", "answer": '["data", "design"]', "score": 5},
        {"user_id": "u2", "question_id": "work_style", "answer": "team", "score": 2},
    ]
    return fake_db


@pytest.fixture
def model_client():
    """OpenRouterClient double whose completion text each test sets."""
    client = MagicMock(spec=OpenRouterClient)
    client.complete = AsyncMock()
    return client


@pytest.fixture
def ai_recommendations() -> List[Dict[str, Any]]:
    """A well-formed model answer with three entries."""
    return [
        {
            "title": "Data Engineer",
            "match_score": 92,
            "description": "Build and maintain data pipelines and warehouses.",
            "skills": ["Python", "SQL", "Airflow", "Spark"],
            "reasoning": "Resume shows pipeline work and the quiz favors data.",
        },
        {
            "title": "Analytics Engineer",
            "match_score": 85,
            "description": "Model data for analysts and dashboards.",
            "skills": ["SQL", "dbt", "Data Modeling"],
            "reasoning": "Combines engineering with an interest in analysis.",
        },
        {
            "title": "Backend Developer",
            "match_score": 78,
            "description": "Design APIs and services.",
            "skills": ["Python", "REST APIs", "PostgreSQL", "Docker", "Testing"],
            "reasoning": "Three years of Python development experience.",
        },
    ]
