# optyshop_admin/main.py
"""
Composition root: wires storage, session, HTTP client and one client per resource.

    panel = create_panel()
    await panel.session.login("admin@example.com", "secret")
    r = await panel.lens_colors.list(is_active=True)
"""
from typing import Dict, Optional

import httpx
from sqlalchemy.orm import sessionmaker

from optyshop_admin.db import SessionLocal, init_db
from optyshop_admin.http_client import API_BASE_URL, ApiClient
from optyshop_admin.local_store import LocalStore, MemoryStorage, SqlStorage
from optyshop_admin.resources.base import ResourceClient, TypedResourceClient
from optyshop_admin.resources.catalog import CATALOG_RESOURCES
from optyshop_admin.resources.descriptor import ResourceDescriptor
from optyshop_admin.resources.marketing import MARKETING_RESOURCES
from optyshop_admin.session import AdminSession

ALL_RESOURCES = CATALOG_RESOURCES + MARKETING_RESOURCES


class AdminPanel:
    def __init__(self, store: LocalStore, api: ApiClient, session: AdminSession):
        self.store = store
        self.api = api
        self.session = session
        self.resources: Dict[str, ResourceClient] = {}
        for desc in ALL_RESOURCES:
            self.register(desc)

    def register(self, descriptor: ResourceDescriptor) -> ResourceClient:
        cls = TypedResourceClient if descriptor.has_type else ResourceClient
        client = cls(descriptor, self.api, self.store, lambda: self.session.state)
        self.resources[descriptor.name] = client
        return client

    def __getattr__(self, name: str) -> ResourceClient:
        # panel.lens_colors, panel.coupons, ...
        resources = self.__dict__.get("resources", {})
        if name in resources:
            return resources[name]
        raise AttributeError(name)

    async def aclose(self):
        await self.api.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()


def create_panel(
    base_url: str = API_BASE_URL,
    *,
    store: Optional[LocalStore] = None,
    session_factory: Optional[sessionmaker] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    **client_kwargs,
) -> AdminPanel:
    """
    Build a panel. Storage defaults to the SQLAlchemy-backed store; pass
    ``store=LocalStore(MemoryStorage())`` for a throwaway one.
    """
    if store is None:
        if session_factory is None:
            init_db()
            session_factory = SessionLocal
        store = LocalStore(SqlStorage(session_factory))

    session = AdminSession(store)
    api = ApiClient(
        base_url,
        token_provider=lambda: session.token,
        on_unauthorized=session.handle_unauthorized,
        transport=transport,
        **client_kwargs,
    )
    session.api = api
    return AdminPanel(store, api, session)


def create_memory_panel(base_url: str = API_BASE_URL, **kwargs) -> AdminPanel:
    return create_panel(base_url, store=LocalStore(MemoryStorage()), **kwargs)
