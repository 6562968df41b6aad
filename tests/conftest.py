# tests/conftest.py
from datetime import datetime, timedelta, timezone

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fake_backend import BASE_URL, create_backend
from optyshop_admin.db import init_db
from optyshop_admin.local_store import LocalStore, MemoryStorage
from optyshop_admin.main import create_memory_panel



@pytest.fixture
def anyio_backend():
    return "asyncio"


class TickingClock:
    """Deterministic clock advancing a fixed step per reading."""

    def __init__(self, start=None, step_ms=5):
        self.now = start or datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
        self.step = timedelta(milliseconds=step_ms)

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def store():
    return LocalStore(MemoryStorage())


@pytest.fixture
def session_factory():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    init_db(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def backend():
    return create_backend()


@pytest.fixture
def panel(backend):
    return create_memory_panel(BASE_URL, transport=httpx.ASGITransport(app=backend))
