"""
Shared test fixtures and configuration for pytest.
"""

import sys
from pathlib import Path

import pytest

# Add lab directory to path for imports
sys.path.insert(0, str(Path(__file__).parent / "lab"))


# ============================================================================
# Pytest hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "slow: Tests that load real models")


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def animal_vectors() -> dict[str, list[float]]:
    """Small hand-made vectors with one close pair and one unrelated word."""
    return {
        "cat": [1.0, 0.0, 0.0],
        "dog": [0.9, 0.1, 0.0],
        "fruit": [0.0, 0.0, 1.0],
    }


class FakeResult:
    def __init__(self, data):
        self.data = data


class FakeTableQuery:
    """Records a chained Supabase table query and applies it to an in-memory table."""

    def __init__(self, client, table: str):
        self.client = client
        self.table = table
        self.rows = client.tables.setdefault(table, {})
        self.action = "select"
        self.payload = None
        self.filters = []
        self.limit_n = None

    def select(self, *_columns):
        self.action = "select"
        return self

    def upsert(self, rows, on_conflict=None):
        self.action = "upsert"
        self.payload = rows
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row[column] == value)
        return self

    def in_(self, column, values):
        values = set(values)
        self.filters.append(lambda row: row[column] in values)
        return self

    def limit(self, n):
        self.limit_n = n
        return self

    def _matching(self):
        return [row for row in self.rows.values() if all(f(row) for f in self.filters)]

    def execute(self):
        self.client.calls.append((self.table, self.action))
        if self.action == "upsert":
            for row in self.payload:
                # PostgREST returns pgvector values as strings
                stored = {"word": row["word"], "embedding": "[" + ",".join(str(v) for v in row["embedding"]) + "]"}
                self.rows[row["word"]] = stored
            return FakeResult(list(self.payload))
        if self.action == "delete":
            matching = self._matching()
            for row in matching:
                del self.rows[row["word"]]
            return FakeResult(matching)
        matching = self._matching()
        if self.limit_n is not None:
            matching = matching[: self.limit_n]
        return FakeResult(matching)


class FakeRpc:
    def __init__(self, client, name, params):
        self.client = client
        self.name = name
        self.params = params

    def execute(self):
        self.client.rpc_calls.append((self.name, self.params))
        return FakeResult(self.client.rpc_results.get(self.name, []))


class FakeSupabaseClient:
    """Minimal stand-in for the Supabase client used by WordVectorQueries."""

    def __init__(self):
        self.tables: dict[str, dict] = {}
        self.calls: list[tuple[str, str]] = []
        self.rpc_calls: list[tuple[str, dict]] = []
        self.rpc_results: dict[str, list[dict]] = {}

    def table(self, name: str) -> FakeTableQuery:
        return FakeTableQuery(self, name)

    def rpc(self, name: str, params: dict) -> FakeRpc:
        return FakeRpc(self, name, params)


@pytest.fixture
def fake_supabase() -> FakeSupabaseClient:
    """Fixture providing an in-memory Supabase client."""
    return FakeSupabaseClient()
