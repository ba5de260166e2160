"""Catalog and search schemas."""

from pydantic import BaseModel, ConfigDict, Field

from prompt_gallery.domain.models.catalog import Prompt


class CategorySummary(BaseModel):
    """A category with its sub-categories in catalog order."""

    name: str
    subcategories: list[str]
    prompt_count: int


class CatalogResponse(BaseModel):
    """The whole catalog document."""

    model_config = ConfigDict(populate_by_name=True)

    prompt_data: dict[str, dict[str, list[Prompt]]] = Field(alias="promptData")


class SearchResultResponse(BaseModel):
    """A search hit with its provenance and preview."""

    category: str
    subcategory: str
    title: str
    content: str
    preview: str
