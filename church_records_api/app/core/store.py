"""
Durable ordered map for one entity type.

``EntityStore`` keeps records of a single pydantic model in one SQLite
table keyed by the record identifier.  Records are stored as JSON and
listed in key order.  Inserting over an existing key replaces the
record (last writer wins) and removing an absent key does nothing.

Any ``sqlite3.Error``, and any stored row that no longer decodes into the
model, is re‑raised as
:class:`~church_records_api.app.core.errors.StoreFailure`.
"""

import sqlite3
from typing import Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .db import get_cursor
from .errors import StoreFailure

T = TypeVar("T", bound=BaseModel)


class EntityStore(Generic[T]):
    """SQLite backed key/value store of ``model`` records."""

    def __init__(self, db_path: str, table: str, model: Type[T]):
        self.db_path = db_path
        self.table = table
        self.model = model

    def __repr__(self) -> str:
        return f"EntityStore({self.table!r}, {self.model.__name__})"

    def _decode(self, data: str) -> T:
        try:
            return self.model.model_validate_json(data)
        except PydanticValidationError as exc:
            raise StoreFailure("decode", self.table, str(exc)) from exc

    def insert(self, entity_id: str, entity: T) -> None:
        """Insert or replace the record stored at ``entity_id``."""
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    f"INSERT OR REPLACE INTO {self.table} (id, data) VALUES (?, ?)",
                    (entity_id, entity.model_dump_json()),
                )
        except sqlite3.Error as exc:
            raise StoreFailure("insert", self.table, str(exc)) from exc

    def get(self, entity_id: str) -> Optional[T]:
        """Return the record stored at ``entity_id`` or ``None``."""
        try:
            with get_cursor(self.db_path) as cursor:
                row = cursor.execute(
                    f"SELECT data FROM {self.table} WHERE id = ?",
                    (entity_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StoreFailure("get", self.table, str(exc)) from exc
        if not row:
            return None
        return self._decode(row["data"])

    def values(self) -> List[T]:
        """Return every record, ordered by identifier."""
        try:
            with get_cursor(self.db_path) as cursor:
                rows = cursor.execute(
                    f"SELECT data FROM {self.table} ORDER BY id"
                ).fetchall()
        except sqlite3.Error as exc:
            raise StoreFailure("values", self.table, str(exc)) from exc
        return [self._decode(row["data"]) for row in rows]

    def remove(self, entity_id: str) -> None:
        """Delete the record at ``entity_id``; absent keys are ignored."""
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(f"DELETE FROM {self.table} WHERE id = ?", (entity_id,))
        except sqlite3.Error as exc:
            raise StoreFailure("remove", self.table, str(exc)) from exc

    def __contains__(self, entity_id: object) -> bool:
        return isinstance(entity_id, str) and self.get(entity_id) is not None

    def __len__(self) -> int:
        try:
            with get_cursor(self.db_path) as cursor:
                row = cursor.execute(f"SELECT COUNT(*) AS n FROM {self.table}").fetchone()
        except sqlite3.Error as exc:
            raise StoreFailure("count", self.table, str(exc)) from exc
        return row["n"]
