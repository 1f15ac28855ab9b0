"""Helpers shared by the JSON-backed repositories."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Generic, TypeVar

from backoffice.domain.repository.page import Page
from backoffice.infrastructure.persistence.json_database import JsonDatabase

T = TypeVar("T")


def dump_dt(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def load_dt(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def load_ts(value: str | None) -> datetime:
    """Required timestamp; records written without one read as "now"."""
    return datetime.fromisoformat(value) if value else datetime.now(timezone.utc)


class JsonTable(Generic[T]):
    """One collection inside a JsonDatabase, mapped to domain objects.

    Domain objects handed out are always fresh copies; changes reach the
    store only through ``upsert``.
    """

    def __init__(
        self,
        db: JsonDatabase,
        table: str,
        to_raw: Callable[[T], dict],
        to_domain: Callable[[dict], T],
    ) -> None:
        self._db = db
        self._table = table
        self._to_raw = to_raw
        self._to_domain = to_domain

    @property
    def db(self) -> JsonDatabase:
        return self._db

    def get(self, record_id: int) -> T | None:
        for raw in self._db.snapshot(self._table):
            if raw["id"] == record_id:
                return self._to_domain(raw)
        return None

    def find_first(self, predicate: Callable[[dict], bool]) -> T | None:
        for raw in self._db.snapshot(self._table):
            if predicate(raw):
                return self._to_domain(raw)
        return None

    def find_all(self, predicate: Callable[[dict], bool] | None = None) -> list[T]:
        return [
            self._to_domain(raw)
            for raw in self._db.snapshot(self._table)
            if predicate is None or predicate(raw)
        ]

    def upsert(self, entity: T) -> None:
        """Assign an ID to new entities, then replace or append the record.

        A new entity whose write fails gets its ID taken back, matching the
        rolled-back counter.
        """
        is_new = entity.id is None  # type: ignore[attr-defined]
        try:
            with self._db.transaction():
                if is_new:
                    entity.id = self._db.next_id(self._table)  # type: ignore[attr-defined]
                records = self._db.records(self._table)
                raw = self._to_raw(entity)
                for i, existing in enumerate(records):
                    if existing["id"] == raw["id"]:
                        records[i] = raw
                        break
                else:
                    records.append(raw)
        except Exception:
            if is_new:
                entity.id = None  # type: ignore[attr-defined]
            raise

    def page(self, filters: dict[str, object], skip: int, limit: int) -> Page[T]:
        """Equality-filtered scan, newest ``createdAt`` first."""
        matches = [
            raw
            for raw in self._db.snapshot(self._table)
            if all(raw.get(key) == value for key, value in filters.items() if value is not None)
        ]
        matches.sort(key=lambda r: (r.get("createdAt") or "", r["id"]), reverse=True)
        window = matches[max(skip, 0) : max(skip, 0) + max(limit, 0)]
        return Page(items=[self._to_domain(raw) for raw in window], total=len(matches))
