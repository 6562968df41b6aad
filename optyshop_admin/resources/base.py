# optyshop_admin/resources/base.py
import logging
from typing import Callable, List, Optional

from optyshop_admin.fallback import should_fallback
from optyshop_admin.http_client import ApiClient, ApiError
from optyshop_admin.local_store import LocalStore
from optyshop_admin.resources.descriptor import ResourceDescriptor
from optyshop_admin.schemas import ApiResponse, ListPage, SessionState, normalize_list
from optyshop_admin.simulator import CrudSimulator

logger = logging.getLogger(__name__)

SORT_ORDERS = {"asc", "desc"}


class ResourceClient:
    """
    REST resource with demo fallback.

    list/create/update/delete try the backend first and, when the fallback
    policy allows it, answer from the local simulator instead. get_by_id and
    bulk_update always go to the backend.
    """

    def __init__(
        self,
        descriptor: ResourceDescriptor,
        api: ApiClient,
        store: LocalStore,
        session_state: Callable[[], SessionState],
        simulator: Optional[CrudSimulator] = None,
    ):
        self.descriptor = descriptor
        self.api = api
        self.session_state = session_state
        self.simulator = simulator or CrudSimulator(descriptor, store)

    def _should_fallback(self, error: Exception) -> bool:
        return should_fallback(error, self.session_state(), self.descriptor.policy)

    def _simulated(self, data) -> ApiResponse:
        return ApiResponse(data=data, status=200, simulated=True)

    def _item_url(self, record_id) -> str:
        return f"{self.descriptor.path}/{record_id}"

    async def list(self, page: int = 1, limit: int = 50, sort_by: str = "created_at",
                   sort_order: str = "desc", **filters) -> ApiResponse:
        if sort_order not in SORT_ORDERS:
            sort_order = "desc"
        unknown = set(filters) - set(self.descriptor.filters)
        if unknown:
            raise TypeError(f"unsupported filters for {self.descriptor.name}: {sorted(unknown)}")
        filters = {k: v for k, v in filters.items() if v is not None}

        params = {"page": page, "limit": limit, "sortBy": sort_by, "sortOrder": sort_order}
        for k, v in filters.items():
            params[k] = str(v).lower() if isinstance(v, bool) else v

        try:
            return await self.api.get(self.descriptor.path, params=params)
        except ApiError as e:
            if not self._should_fallback(e):
                raise
            logger.info("%s list answered from demo store (%r)", self.descriptor.name, e)
            return self._simulated(self.simulator.list(filters, page, limit, sort_by, sort_order))

    async def list_page(self, **kwargs) -> ListPage:
        r = await self.list(**kwargs)
        return normalize_list(r.data, self.descriptor.list_key)

    async def get_by_id(self, record_id) -> ApiResponse:
        return await self.api.get(self._item_url(record_id))

    async def get_active(self) -> ApiResponse:
        return await self.list(is_active=True, sort_by="name", sort_order="asc")

    async def create(self, payload: dict) -> ApiResponse:
        try:
            return await self.api.post(self.descriptor.path, payload)
        except ApiError as e:
            field = self.descriptor.slug_field
            if e.is_slug_conflict and field and payload.get(field):
                return await self._retry_with_suffixed_slug(payload, field)
            if not self._should_fallback(e):
                raise
            logger.info("%s create answered from demo store (%r)", self.descriptor.name, e)
            return self._simulated(self.simulator.create(payload))

    async def _retry_with_suffixed_slug(self, payload: dict, field: str) -> ApiResponse:
        retry = {**payload, field: self.simulator.suffixed_slug(payload[field])}
        logger.info("%s slug %r already exists, retrying as %r", self.descriptor.name, payload[field], retry[field])
        try:
            return await self.api.post(self.descriptor.path, retry)
        except ApiError as e:
            logger.info("%s create retry failed (%r), answering from demo store", self.descriptor.name, e)
            return self._simulated(self.simulator.create(retry))

    async def update(self, record_id, payload: dict) -> ApiResponse:
        try:
            return await self.api.put(self._item_url(record_id), payload)
        except ApiError as e:
            if not self._should_fallback(e):
                raise
            logger.info("%s update answered from demo store (%r)", self.descriptor.name, e)
            return self._simulated(self.simulator.update(record_id, payload))

    async def delete(self, record_id) -> ApiResponse:
        try:
            return await self.api.delete(self._item_url(record_id))
        except ApiError as e:
            if not self._should_fallback(e):
                raise
            logger.info("%s delete answered from demo store (%r)", self.descriptor.name, e)
            return self._simulated(self.simulator.delete(record_id))

    async def bulk_update(self, items: List[dict]) -> ApiResponse:
        return await self.api.put(f"{self.descriptor.path}/{self.descriptor.bulk_path}", {self.descriptor.bulk_key: items})


class TypedResourceClient(ResourceClient):
    async def get_by_type(self, type: str) -> ApiResponse:
        return await self.list(type=type, is_active=True, sort_by="name", sort_order="asc")
