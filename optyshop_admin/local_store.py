# optyshop_admin/local_store.py
"""
Key/value storage for the demo datastore.

A backend only knows raw strings (get/set/remove by key), the same surface
browser storage offers. ``LocalStore`` layers JSON collections on top of it.
"""
import json
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from optyshop_admin.models import StorageEntry

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Underlying persistence failed (quota exceeded, database error)."""


# ----- Backends -----
class MemoryStorage:
    """Process-local storage; ``quota_bytes`` mimics the browser storage limit."""

    def __init__(self, quota_bytes: Optional[int] = None):
        self._items: Dict[str, str] = {}
        self.quota_bytes = quota_bytes

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            used = sum(len(k) + len(v) for k, v in self._items.items() if k != key)
            if used + len(key) + len(value) > self.quota_bytes:
                raise StorageError(f"storage quota exceeded while writing {key!r}")
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class SqlStorage:
    """Storage persisted in the ``demo_storage`` table."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get_item(self, key: str) -> Optional[str]:
        try:
            with self._session_factory() as db:
                row = db.get(StorageEntry, key)
                return row.value if row else None
        except SQLAlchemyError as e:
            raise StorageError(f"read of {key!r} failed: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        try:
            with self._session_factory() as db:
                row = db.get(StorageEntry, key)
                if row is None:
                    db.add(StorageEntry(key=key, value=value))
                else:
                    row.value = value
                db.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"write of {key!r} failed: {e}") from e

    def remove_item(self, key: str) -> None:
        try:
            with self._session_factory() as db:
                row = db.get(StorageEntry, key)
                if row is not None:
                    db.delete(row)
                    db.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"delete of {key!r} failed: {e}") from e


# ----- Collections on top of a backend -----
class LocalStore:
    def __init__(self, backend=None):
        self.backend = backend if backend is not None else MemoryStorage()

    def read_collection(self, key: str) -> Optional[List[dict]]:
        """Return the array stored under ``key``; None when absent or not a valid JSON array."""
        raw = self.backend.get_item(key)
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except ValueError:
            logger.debug("ignoring unparsable value under %s", key)
            return None
        if not isinstance(value, list):
            return None
        return value

    def write_collection(self, key: str, records: List[dict]) -> None:
        """Overwrite ``key`` with ``records`` serialized as a JSON array."""
        self.backend.set_item(key, json.dumps(list(records)))

    # plain values (tokens, the demo marker, auth cache)
    def get_item(self, key: str) -> Optional[str]:
        return self.backend.get_item(key)

    def set_item(self, key: str, value: str) -> None:
        self.backend.set_item(key, value)

    def remove_item(self, key: str) -> None:
        self.backend.remove_item(key)

    def get_json(self, key: str) -> Any:
        raw = self.backend.get_item(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            return None

    def set_json(self, key: str, value: Any) -> None:
        self.backend.set_item(key, json.dumps(value))
