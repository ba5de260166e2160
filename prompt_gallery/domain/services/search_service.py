"""Search across every prompt in the catalog."""

from prompt_gallery.domain.models.catalog import Catalog, SearchResult
from prompt_gallery.settings import settings


class SearchService:
    """Case-insensitive substring search over prompt titles and contents."""

    def __init__(self, catalog: Catalog, min_query_length: int | None = None) -> None:
        """Initialize search service."""
        self.catalog = catalog
        self.min_query_length = (
            settings.search_min_query_length if min_query_length is None else min_query_length
        )

    def is_search_query(self, query: str) -> bool:
        """Whether a raw input value is long enough to run a search.

        Shorter queries mean "no search": callers show the category cards
        instead of calling :meth:`search`.
        """
        return len(query.strip()) >= self.min_query_length

    def search(self, query: str) -> list[SearchResult]:
        """Return matching prompts in catalog traversal order.

        A prompt matches when its title or content contains the trimmed,
        lowercased query. No ranking is applied.
        """
        term = query.strip().lower()
        return [
            result
            for result in self.catalog.iter_prompts()
            if term in result.prompt.title.lower() or term in result.prompt.content.lower()
        ]
