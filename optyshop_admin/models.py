# optyshop_admin/models.py
from sqlalchemy import Column, String, Text, DateTime, Index
from optyshop_admin.db import Base
from datetime import datetime, timezone


def _utcnow():
    return datetime.now(tz=timezone.utc)


# ----- Persisted key/value entry (one per storage key) -----
class StorageEntry(Base):
    __tablename__ = "demo_storage"

    # e.g. "demo_lens_colors", "demo_user", "admin_token"
    key = Column(String, primary_key=True)

    # raw string value; collections are JSON arrays
    value = Column(Text, nullable=False)

    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)


Index("ix_demo_storage_updated_at", StorageEntry.updated_at)
