"""Read-only JSON routes over the loaded catalog."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from prompt_gallery.api.deps import get_catalog
from prompt_gallery.api.schemas.catalog import (
    CatalogResponse,
    CategorySummary,
    SearchResultResponse,
)
from prompt_gallery.domain.models.catalog import Catalog
from prompt_gallery.domain.services.search_service import SearchService
from prompt_gallery.domain.views.renderer import truncate_preview

router = APIRouter()


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog_document(
    catalog: Annotated[Catalog, Depends(get_catalog)],
) -> CatalogResponse:
    """The catalog in its source document shape."""
    return CatalogResponse(prompt_data=catalog.to_document()["promptData"])


@router.get("/categories", response_model=list[CategorySummary])
async def list_categories(
    catalog: Annotated[Catalog, Depends(get_catalog)],
) -> list[CategorySummary]:
    """Categories and their sub-categories in catalog order."""
    return [
        CategorySummary(
            name=category,
            subcategories=catalog.subcategories(category),
            prompt_count=sum(len(catalog.prompts(category, name)) for name in catalog.subcategories(category)),
        )
        for category in catalog.categories()
    ]


@router.get("/search", response_model=list[SearchResultResponse])
async def search_prompts(
    catalog: Annotated[Catalog, Depends(get_catalog)],
    q: Annotated[str, Query()] = "",
) -> list[SearchResultResponse]:
    """Search prompts; queries below the minimum length return nothing."""
    search_service = SearchService(catalog)
    if not search_service.is_search_query(q):
        return []
    return [
        SearchResultResponse(
            category=result.category,
            subcategory=result.subcategory,
            title=result.prompt.title,
            content=result.prompt.content,
            preview=truncate_preview(result.prompt.content),
        )
        for result in search_service.search(q)
    ]
