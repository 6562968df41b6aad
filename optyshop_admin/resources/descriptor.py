# optyshop_admin/resources/descriptor.py
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from optyshop_admin.fallback import FallbackPolicy


class ResourceDescriptor(BaseModel):
    """Declarative description of one admin resource."""

    model_config = ConfigDict(frozen=True)

    name: str                       # "lens_colors"
    label: str                      # "Lens color"
    path: str                       # "/admin/lens-colors"
    list_key: Optional[str] = None  # key of the array in list bodies, e.g. "lensColors"
    bulk_key: str = "items"         # body key for PUT <path>/<bulk_path>
    bulk_path: str = "bulk"
    slug_field: Optional[str] = "slug"
    filters: Tuple[str, ...] = ("is_active",)
    policy: FallbackPolicy = FallbackPolicy.strict

    @property
    def storage_key(self) -> str:
        return f"demo_{self.name}"

    @property
    def has_type(self) -> bool:
        return "type" in self.filters
