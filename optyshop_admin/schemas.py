# optyshop_admin/schemas.py
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class ApiResponse(BaseModel):
    data: Any = None
    status: int = 200
    # True when the answer came from the local demo datastore
    simulated: bool = False


class Pagination(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class ListPage(BaseModel):
    data: List[dict] = []
    pagination: Optional[Pagination] = None


class DeleteAck(BaseModel):
    success: bool = True
    message: str


class SessionState(BaseModel):
    is_demo: bool = False


class AdminUser(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    created_at: Optional[str] = None


def _as_pagination(raw) -> Optional[Pagination]:
    if not isinstance(raw, dict):
        return None
    try:
        return Pagination(**raw)
    except (TypeError, ValueError):
        return None


def normalize_list(payload: Any, list_key: Optional[str] = None) -> ListPage:
    """
    Bring a list response body into the canonical ``{data: [...], pagination}`` shape.

    Accepted bodies: a bare list, ``{data: [...]}``, ``{data: {<list_key>|data: [...], pagination}}``
    and ``{<list_key>: [...]}``. Anything else is an empty page.
    """
    if isinstance(payload, list):
        return ListPage(data=payload)
    if not isinstance(payload, dict):
        return ListPage()

    body = payload
    inner = payload.get("data")
    if isinstance(inner, dict):
        body = inner

    for key in (list_key, "data"):
        if key and isinstance(body.get(key), list):
            return ListPage(data=body[key], pagination=_as_pagination(body.get("pagination")))
    return ListPage()
