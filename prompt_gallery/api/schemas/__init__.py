"""API schemas package."""

from prompt_gallery.api.schemas.catalog import (
    CatalogResponse,
    CategorySummary,
    SearchResultResponse,
)
from prompt_gallery.api.schemas.ui import (
    RegionResponse,
    SurfaceResponse,
    UIEventRequest,
)

__all__ = [
    "CatalogResponse",
    "CategorySummary",
    "RegionResponse",
    "SearchResultResponse",
    "SurfaceResponse",
    "UIEventRequest",
]
