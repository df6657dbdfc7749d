"""
In-memory stand-in for the supabase-py client.

Supports the query-builder subset the app uses (select/insert/update/delete
with eq/in_/order/limit/offset/single/maybe_single) plus Storage uploads.
"""

from __future__ import annotations

import copy
import uuid
from datetime import datetime, timezone
from typing import Any, Callable


class FakeResponse:
    def __init__(self, data: Any) -> None:
        self.data = data


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str) -> None:
        self.db = db
        self.table = table
        self.op = "select"
        self.payload: Any = None
        self.filters: list[tuple[str, str, Any]] = []
        self._order: list[tuple[str, bool]] = []
        self._limit: int | None = None
        self._offset = 0
        self._single: str | None = None

    def select(self, *columns: str, **kwargs: Any) -> "FakeQuery":
        self.op = "select"
        return self

    def insert(self, payload: Any) -> "FakeQuery":
        self.op, self.payload = "insert", payload
        return self

    def update(self, payload: dict) -> "FakeQuery":
        self.op, self.payload = "update", payload
        return self

    def delete(self) -> "FakeQuery":
        self.op = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append(("eq", column, value))
        return self

    def in_(self, column: str, values: list) -> "FakeQuery":
        self.filters.append(("in", column, list(values)))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order.append((column, desc))
        return self

    def limit(self, n: int) -> "FakeQuery":
        self._limit = n
        return self

    def offset(self, n: int) -> "FakeQuery":
        self._offset = n
        return self

    def single(self) -> "FakeQuery":
        self._single = "single"
        return self

    def maybe_single(self) -> "FakeQuery":
        self._single = "maybe"
        return self

    def _matches(self, row: dict) -> bool:
        for kind, column, value in self.filters:
            if kind == "eq" and row.get(column) != value:
                return False
            if kind == "in" and row.get(column) not in value:
                return False
        return True

    def execute(self) -> FakeResponse | None:
        self.db.calls.append((self.table, self.op))
        for hook in list(self.db.hooks):
            hook(self)
        if (self.table, self.op) in self.db.failures or (self.table, "*") in self.db.failures:
            raise Exception(f"simulated failure: {self.op} {self.table}")

        rows = self.db.tables.setdefault(self.table, [])

        if self.op == "insert":
            payload = self.payload if isinstance(self.payload, list) else [self.payload]
            created = []
            for item in payload:
                row = copy.deepcopy(item)
                row.setdefault("id", str(uuid.uuid4()))
                row.setdefault("created_at", datetime.now(timezone.utc).isoformat())
                rows.append(row)
                created.append(copy.deepcopy(row))
            return FakeResponse(created)

        matched = [r for r in rows if self._matches(r)]

        if self.op == "update":
            for row in matched:
                row.update(copy.deepcopy(self.payload))
            return FakeResponse(copy.deepcopy(matched))

        if self.op == "delete":
            self.db.tables[self.table] = [r for r in rows if r not in matched]
            return FakeResponse(copy.deepcopy(matched))

        for column, desc in reversed(self._order):
            matched = sorted(
                matched, key=lambda r: (r.get(column) is None, r.get(column)), reverse=desc
            )
        matched = matched[self._offset:]
        if self._limit is not None:
            matched = matched[: self._limit]
        result = copy.deepcopy(matched)

        if self._single == "maybe":
            return FakeResponse(result[0]) if result else None
        if self._single == "single":
            if len(result) != 1:
                raise Exception("JSON object requested, multiple (or no) rows returned")
            return FakeResponse(result[0])
        return FakeResponse(result)


class FakeBucket:
    def __init__(self, storage: "FakeStorage", name: str) -> None:
        self.storage = storage
        self.name = name

    def upload(self, path: str, content: bytes, file_options: dict | None = None) -> dict:
        if self.storage.fail:
            raise Exception("simulated storage outage")
        self.storage.objects[(self.name, path)] = (content, file_options or {})
        return {"path": path}

    def get_public_url(self, path: str) -> str:
        return f"https://fake.supabase.co/storage/v1/object/public/{self.name}/{path}?"


class FakeStorage:
    def __init__(self) -> None:
        self.objects: dict[tuple[str, str], tuple[bytes, dict]] = {}
        self.fail = False

    def from_(self, bucket: str) -> FakeBucket:
        return FakeBucket(self, bucket)


class FakeSupabase:
    def __init__(self) -> None:
        self.tables: dict[str, list[dict]] = {}
        self.failures: set[tuple[str, str]] = set()
        self.hooks: list[Callable[[FakeQuery], None]] = []
        self.calls: list[tuple[str, str]] = []
        self.storage = FakeStorage()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def seed(self, table: str, rows: list[dict]) -> list[dict]:
        self.tables[table] = [copy.deepcopy(r) for r in rows]
        return self.tables[table]

    def rows(self, table: str) -> list[dict]:
        return self.tables.get(table, [])

    def row(self, table: str, row_id: str) -> dict | None:
        return next((r for r in self.rows(table) if r.get("id") == row_id), None)
