"""Prompt catalog models.

The catalog is built once from the ``promptData`` document and never mutated
afterwards. Category and sub-category order follow the source document.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CatalogLookupError(KeyError):
    """Raised when a category, sub-category or prompt index is not in the catalog."""

    def __init__(self, category: str, subcategory: str | None = None, index: int | None = None) -> None:
        self.category = category
        self.subcategory = subcategory
        self.index = index
        if subcategory is None:
            message = f"Unknown category: {category!r}"
        elif index is None:
            message = f"Unknown sub-category: {category!r} > {subcategory!r}"
        else:
            message = f"No prompt #{index} in {category!r} > {subcategory!r}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class Prompt(BaseModel):
    """A single reusable prompt."""

    model_config = ConfigDict(frozen=True)

    title: str
    content: str


class PromptDocument(BaseModel):
    """Shape of the JSON document the catalog is loaded from."""

    prompt_data: dict[str, dict[str, list[Prompt]]] = Field(alias="promptData")


class SearchResult(BaseModel):
    """A prompt matched by a search, with its provenance."""

    model_config = ConfigDict(frozen=True)

    category: str
    subcategory: str
    prompt: Prompt


class Catalog:
    """Read-only category -> sub-category -> prompts mapping."""

    def __init__(self, data: Mapping[str, Mapping[str, list[Prompt] | tuple[Prompt, ...]]]) -> None:
        self._data: dict[str, dict[str, tuple[Prompt, ...]]] = {
            category: {name: tuple(prompts) for name, prompts in subcategories.items()}
            for category, subcategories in data.items()
        }

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Catalog":
        """Validate a raw ``{"promptData": ...}`` document and build a catalog.

        Raises:
            pydantic.ValidationError: If the document has the wrong shape
        """
        return cls(PromptDocument.model_validate(document).prompt_data)

    def to_document(self) -> dict[str, Any]:
        """Serialize back to the ``{"promptData": ...}`` shape."""
        return {
            "promptData": {
                category: {
                    name: [prompt.model_dump() for prompt in prompts]
                    for name, prompts in subcategories.items()
                }
                for category, subcategories in self._data.items()
            }
        }

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, category: object) -> bool:
        return category in self._data

    def categories(self) -> list[str]:
        """Category names in catalog order."""
        return list(self._data)

    def subcategories(self, category: str) -> list[str]:
        """Sub-category names of a category in catalog order."""
        try:
            return list(self._data[category])
        except KeyError:
            raise CatalogLookupError(category) from None

    def first_subcategory(self, category: str) -> str:
        """The sub-category a category's "see all" action opens."""
        subcategories = self.subcategories(category)
        if not subcategories:
            raise CatalogLookupError(category, "")
        return subcategories[0]

    def prompts(self, category: str, subcategory: str) -> tuple[Prompt, ...]:
        """Prompts of a sub-category in list order."""
        try:
            return self._data[category][subcategory]
        except KeyError:
            raise CatalogLookupError(category, subcategory) from None

    def prompt(self, category: str, subcategory: str, index: int) -> Prompt:
        """A single prompt by its position in the sub-category."""
        prompts = self.prompts(category, subcategory)
        if not 0 <= index < len(prompts):
            raise CatalogLookupError(category, subcategory, index)
        return prompts[index]

    def iter_prompts(self) -> Iterator[SearchResult]:
        """Flattened traversal: categories, then sub-categories, then prompts."""
        for category, subcategories in self._data.items():
            for subcategory, prompts in subcategories.items():
                for prompt in prompts:
                    yield SearchResult(category=category, subcategory=subcategory, prompt=prompt)
