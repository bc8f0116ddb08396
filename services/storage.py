from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from core.database import connection_scope

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StorageResult:
    """Utfall av ett lagringsanrop. Anroparen väljer själv om fel ska ignoreras."""

    ok: bool
    value: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Optional[str] = None) -> "StorageResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "StorageResult":
        return cls(ok=False, error=error)


class KeyValueStore(Protocol):
    def get(self, key: str) -> StorageResult: ...

    def set(self, key: str, value: str) -> StorageResult: ...

    def remove(self, key: str) -> StorageResult: ...

    def clear(self) -> StorageResult: ...


class SQLiteStore:
    """Nyckel/värde-lagring per besökare i SQLite (motsvarar webbläsarens localStorage)."""

    def __init__(self, client_id: str, db_path: Path | None = None) -> None:
        self.client_id = client_id
        self.db_path = db_path

    def get(self, key: str) -> StorageResult:
        try:
            with connection_scope(self.db_path) as conn:
                cur = conn.execute(
                    "SELECT value FROM client_storage WHERE client_id = ? AND key = ?",
                    (self.client_id, key),
                )
                row = cur.fetchone()
        except (sqlite3.Error, OSError) as exc:
            return self._failed("read", key, exc)
        return StorageResult.success(row[0] if row else None)

    def set(self, key: str, value: str) -> StorageResult:
        try:
            with connection_scope(self.db_path) as conn:
                conn.execute(
                    "INSERT INTO client_storage (client_id, key, value) VALUES (?, ?, ?) "
                    "ON CONFLICT(client_id, key) DO UPDATE SET value = excluded.value",
                    (self.client_id, key, value),
                )
                conn.commit()
        except (sqlite3.Error, OSError) as exc:
            return self._failed("save", key, exc)
        return StorageResult.success(value)

    def remove(self, key: str) -> StorageResult:
        try:
            with connection_scope(self.db_path) as conn:
                conn.execute(
                    "DELETE FROM client_storage WHERE client_id = ? AND key = ?",
                    (self.client_id, key),
                )
                conn.commit()
        except (sqlite3.Error, OSError) as exc:
            return self._failed("remove", key, exc)
        return StorageResult.success()

    def clear(self) -> StorageResult:
        try:
            with connection_scope(self.db_path) as conn:
                conn.execute("DELETE FROM client_storage WHERE client_id = ?", (self.client_id,))
                conn.commit()
        except (sqlite3.Error, OSError) as exc:
            return self._failed("clear", "*", exc)
        return StorageResult.success()

    def _failed(self, action: str, key: str, exc: Exception) -> StorageResult:
        logger.warning("Could not %s storage key %r for client %s: %s", action, key, self.client_id, exc)
        return StorageResult.failure(str(exc))


__all__ = ["KeyValueStore", "SQLiteStore", "StorageResult"]
