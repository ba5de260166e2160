"""Pure markup rendering for the prompt gallery.

- Homepage: one card per category
- Detail view: a sub-category's prompts plus the quick-links sidebar
- Search results: truncated previews with provenance
- Page: the full document assembled from surface regions
"""

from prompt_gallery.domain.views.renderer import (
    DetailMarkup,
    render_detail_view,
    render_homepage,
    render_load_error,
    render_page,
    render_search_results,
    truncate_preview,
)

__all__ = [
    "DetailMarkup",
    "render_detail_view",
    "render_homepage",
    "render_load_error",
    "render_page",
    "render_search_results",
    "truncate_preview",
]
