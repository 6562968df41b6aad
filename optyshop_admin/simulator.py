# optyshop_admin/simulator.py
"""
Local CRUD simulation against the demo datastore.

Each operation reads the whole collection, mutates it in memory and writes
it back in one go. None of them awaits, so under asyncio a call always runs
to completion before the next one starts.
"""
import logging
import math
import re
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from optyshop_admin import seeds
from optyshop_admin.local_store import LocalStore
from optyshop_admin.resources.descriptor import ResourceDescriptor
from optyshop_admin.schemas import DeleteAck

logger = logging.getLogger(__name__)

# fields a simulated update never overwrites
PROTECTED_FIELDS = ("id", "created_at")


class NotFoundError(LookupError):
    def __init__(self, message: str, record_id=None):
        super().__init__(message)
        self.message = message
        self.record_id = record_id


def slugify(value: str) -> str:
    slug = re.sub(r"\s+", "-", (value or "").strip().lower())
    return re.sub(r"[^a-z0-9-]", "", slug)


def next_free_slug(slug: str, taken: Iterable[str]) -> str:
    """Smallest ``<slug>-N`` (N >= 1) not in ``taken``."""
    taken = set(taken)
    n = 1
    while f"{slug}-{n}" in taken:
        n += 1
    return f"{slug}-{n}"


def paginate(total_items: int, page: int, limit: int) -> dict:
    if limit < 1:
        raise ValueError("limit must be >= 1")
    return {
        "current_page": page,
        "total_pages": math.ceil(total_items / limit),
        "total_items": total_items,
        "items_per_page": limit,
    }


def _coerce(value):
    # query-string style booleans and numeric ids
    if isinstance(value, str):
        low = value.lower()
        if low in ("true", "false"):
            return low == "true"
        if value.isdigit():
            return int(value)
    return value


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class CrudSimulator:
    def __init__(self, descriptor: ResourceDescriptor, store: LocalStore, clock: Optional[Callable[[], datetime]] = None):
        self.descriptor = descriptor
        self.store = store
        self.clock = clock or _utcnow

    # --- collection access ---
    def load(self) -> list:
        key = self.descriptor.storage_key
        records = self.store.read_collection(key)
        if records is None:
            records = seeds.get_defaults(self.descriptor.name)
            logger.debug("seeding %s with %d default records", key, len(records))
            self.store.write_collection(key, records)
        return records

    def _save(self, records: list):
        self.store.write_collection(self.descriptor.storage_key, records)

    def _index_of(self, records: list, record_id) -> int:
        wanted = _coerce(record_id)
        for i, r in enumerate(records):
            if r.get("id") == wanted:
                return i
        raise NotFoundError(f"{self.descriptor.label} not found", record_id=record_id)

    def _now(self) -> str:
        return self.clock().isoformat()

    def _next_id(self, records: list) -> int:
        # millisecond timestamp, bumped past the highest id already stored
        now_ms = int(self.clock().timestamp() * 1000)
        ids = [r["id"] for r in records if isinstance(r.get("id"), int)]
        return max([now_ms] + [i + 1 for i in ids])

    def suffixed_slug(self, slug: str) -> str:
        """A ``-N`` variant of ``slug`` unused in the local collection."""
        field = self.descriptor.slug_field
        taken = [r.get(field) for r in self.load()]
        return next_free_slug(slug, taken)

    # --- operations ---
    def list(self, filters: Optional[dict] = None, page: int = 1, limit: int = 50,
             sort_by: Optional[str] = None, sort_order: Optional[str] = None) -> dict:
        # sort_by/sort_order are accepted but only honoured by the real backend
        records = self.load()
        for key, value in (filters or {}).items():
            if value is None:
                continue
            wanted = _coerce(value)
            records = [r for r in records if r.get(key) == wanted]
        return {"data": records, "pagination": paginate(len(records), page, limit)}

    def create(self, payload: dict) -> dict:
        records = self.load()
        data = dict(payload)

        field = self.descriptor.slug_field
        if field:
            slug = data.get(field)
            if not slug and data.get("name"):
                slug = slugify(data["name"])
            if slug:
                taken = {r.get(field) for r in records}
                if slug in taken:
                    new_slug = next_free_slug(slug, taken)
                    logger.debug("%s slug %r taken, using %r", self.descriptor.name, slug, new_slug)
                    slug = new_slug
                data[field] = slug

        now = self._now()
        record = {**data, "id": self._next_id(records), "created_at": now, "updated_at": now}
        records.append(record)
        self._save(records)
        return record

    def update(self, record_id, payload: dict) -> dict:
        records = self.load()
        i = self._index_of(records, record_id)
        changes = {k: v for k, v in (payload or {}).items() if k not in PROTECTED_FIELDS}
        record = {**records[i], **changes, "updated_at": self._now()}
        records[i] = record
        self._save(records)
        return record

    def delete(self, record_id) -> dict:
        records = self.load()
        i = self._index_of(records, record_id)
        del records[i]
        self._save(records)
        return DeleteAck(message=f"{self.descriptor.label} deleted successfully").model_dump()
