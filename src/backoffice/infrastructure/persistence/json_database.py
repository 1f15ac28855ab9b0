"""Shared JSON document store backing every repository.

Holds all collections plus a monotonic ID counter per collection in one
in-process structure.  With a file path, the whole store is written to
disk after every mutation; without one it lives only in memory.

One re-entrant lock serializes every read-modify-write, which makes each
single-record update atomic.  Nothing spans several records.
"""

from __future__ import annotations

import copy
import json
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)

TABLES = (
    "customers",
    "products",
    "warehouses",
    "stock",
    "orders",
    "shipments",
    "invoices",
)


def _empty_db() -> dict:
    return {
        **{table: [] for table in TABLES},
        "counters": {table: 1 for table in TABLES},
    }


class JsonDatabase:

    def __init__(self, file_path: Path | None = None) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._depth = 0
        self._data = self._load()

    @property
    def file_path(self) -> Path | None:
        return self._file_path

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold the store lock for one read-modify-write; persist on success.

        If the body or the file write raises, the in-memory store is put
        back to its state before the outermost transaction began, so a
        failed step never stays applied.  Nested transactions persist and
        roll back with the outermost one.
        """
        with self._lock:
            if self._depth > 0:
                self._depth += 1
                try:
                    yield
                finally:
                    self._depth -= 1
                return

            backup = copy.deepcopy(self._data)
            self._depth = 1
            try:
                yield
                self._persist()
            except Exception:
                self._data = backup
                logger.debug("transaction_rolled_back", path=str(self._file_path))
                raise
            finally:
                self._depth = 0

    def records(self, table: str) -> list[dict]:
        """The live record list for ``table``.  Callers must hold the lock to mutate."""
        return self._data[table]

    def snapshot(self, table: str) -> list[dict]:
        """Deep copy of ``table`` safe to read without the lock."""
        with self._lock:
            return copy.deepcopy(self._data[table])

    def next_id(self, table: str) -> int:
        with self._lock:
            counters = self._data["counters"]
            value = counters[table]
            counters[table] = value + 1
            return value

    def reload(self) -> None:
        with self._lock:
            self._data = self._load()

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict:
        if self._file_path is None:
            return _empty_db()
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            data = _empty_db()
            self._write(data)
            logger.info("database_initialized", path=str(self._file_path))
            return data

        data = json.loads(self._file_path.read_text(encoding="utf-8"))
        # Files written by older versions may lack newer tables.
        for table in TABLES:
            data.setdefault(table, [])
            data.setdefault("counters", {}).setdefault(
                table, max((r["id"] for r in data[table]), default=0) + 1
            )
        return data

    def _persist(self) -> None:
        if self._file_path is not None:
            self._write(self._data)

    def _write(self, data: dict) -> None:
        tmp_path = self._file_path.with_suffix(".tmp")  # type: ignore[union-attr]
        tmp_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        tmp_path.replace(self._file_path)  # type: ignore[arg-type]
