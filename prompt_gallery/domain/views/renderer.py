"""Renderer for converting the prompt catalog into page markup.

Every function here is pure: same arguments, same markup. Callers replace a
region's content with the returned string; nothing is patched in place.
"""

from html import escape
from typing import Iterable, NamedTuple

from prompt_gallery.domain.models.catalog import Catalog, SearchResult
from prompt_gallery.domain.models.surface import (
    BACK_TO_HOME,
    CATEGORY_CARDS,
    DETAIL_VIEW,
    HIDDEN,
    HOMEPAGE_VIEW,
    MENU_BUTTON,
    MOBILE_MENU,
    PROMPT_DISPLAY,
    QUICK_LINKS,
    SEARCH_INPUT,
    SEARCH_RESULTS,
    Region,
    Surface,
)
from prompt_gallery.settings import settings

ELLIPSIS = "..."
NO_RESULTS_MESSAGE = "No prompts found."
LOAD_ERROR_MESSAGE = "Error loading prompts. Please try again later."
COPY_LABEL = "Copy"
COPIED_LABEL = "Copied!"
SCRIPT_URL = "/static/gallery.js"

_COPY_ICON = (
    '<svg class="w-4 h-4 mr-1.5" fill="none" stroke="currentColor" viewBox="0 0 24 24">'
    '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" '
    'd="M8 16H6a2 2 0 01-2-2V6a2 2 0 012-2h8a2 2 0 012 2v2m-6 12h8a2 2 0 002-2v-8a2 2 0 00-2-2h-8a2 2 0 00-2 2v8a2 2 0 002 2z">'
    "</path></svg>"
)
_CHECK_ICON = (
    '<svg class="w-4 h-4 mr-1.5" fill="none" stroke="currentColor" viewBox="0 0 24 24">'
    '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="M5 13l4 4L19 7"></path></svg>'
)
_HAMBURGER_ICON = (
    '<svg class="menu-open-icon{hidden}" fill="none" stroke="currentColor" viewBox="0 0 24 24">'
    '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="M4 6h16M4 12h16M4 18h16"></path></svg>'
)
_CLOSE_ICON = (
    '<svg class="menu-close-icon{hidden}" fill="none" stroke="currentColor" viewBox="0 0 24 24">'
    '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="M6 18L18 6M6 6l12 12"></path></svg>'
)


class DetailMarkup(NamedTuple):
    """Markup for the two regions of the detail view."""

    prompt_display: str
    sidebar: str


def _attr(value: str) -> str:
    return escape(value, quote=True)


def _heading(prefix: str | None, name: str) -> str:
    prefix = settings.heading_prefix if prefix is None else prefix
    return f'{escape(prefix)} <span class="accent-text">{escape(name)}</span>'


def truncate_preview(content: str, max_chars: int | None = None) -> str:
    """Shorten prompt content for a search preview.

    Content longer than ``max_chars`` keeps its first ``max_chars`` characters
    followed by ``...``; anything shorter is returned unchanged.
    """
    limit = settings.preview_max_chars if max_chars is None else max_chars
    if len(content) > limit:
        return content[:limit] + ELLIPSIS
    return content


def render_homepage(catalog: Catalog, heading_prefix: str | None = None) -> str:
    """Render one card per category, listing its sub-categories."""
    cards = []
    for category in catalog.categories():
        links = "".join(
            f'<li><a href="#" class="block py-1.5 text-gray-500" '
            f'data-category="{_attr(category)}" data-subcategory="{_attr(name)}">'
            f"&rarr; {escape(name)}</a></li>"
            for name in catalog.subcategories(category)
        )
        cards.append(
            '<div class="prompt-block category-card flex flex-col">'
            f'<div class="p-6"><h2 class="text-xl font-bold text-center main-heading">'
            f"{_heading(heading_prefix, category)}</h2></div>"
            '<div class="flex-grow px-6 category-card-list scrollable-list overflow-y-auto">'
            f"<ul>{links}</ul></div>"
            '<div class="p-6 mt-auto">'
            f'<button class="see-all-btn w-full py-2.5 rounded-md font-semibold" '
            f'data-category="{_attr(category)}">See all prompts &rarr;</button>'
            "</div></div>"
        )
    return "".join(cards)


def render_copy_control(index: int, copied: bool = False) -> str:
    """Render a prompt's copy button, or its temporary "Copied!" state."""
    if copied:
        return (
            f'<button class="copy-btn copied" data-index="{index}" disabled>'
            f"{_CHECK_ICON}<span>{COPIED_LABEL}</span></button>"
        )
    return (
        f'<button class="copy-btn" data-index="{index}">'
        f"{_COPY_ICON}<span>{COPY_LABEL}</span></button>"
    )


def render_prompt_display(
    catalog: Catalog,
    category: str,
    subcategory: str,
    copied: Iterable[int] = (),
    heading_prefix: str | None = None,
) -> str:
    """Render every prompt of a sub-category, in list order."""
    copied = set(copied)
    parts = [f'<h1 class="text-3xl font-bold mb-8 main-heading">{_heading(heading_prefix, subcategory)}</h1>']
    for index, prompt in enumerate(catalog.prompts(category, subcategory)):
        parts.append(
            f'<div class="prompt-item mb-8" data-index="{index}">'
            '<div class="flex justify-between items-center mb-2">'
            f'<h3 class="text-xl font-semibold main-heading">{escape(prompt.title)}</h3>'
            f"{render_copy_control(index, index in copied)}"
            "</div>"
            f'<div class="prompt-display-item p-4 text-gray-700"><p>{escape(prompt.content)}</p></div>'
            "</div>"
        )
    return "".join(parts)


def render_sidebar(
    catalog: Catalog,
    active_category: str,
    active_subcategory: str,
    heading_prefix: str | None = None,
) -> str:
    """Render the quick-links sidebar with the active sub-category marked."""
    parts = []
    for category in catalog.categories():
        parts.append(f'<h4 class="font-bold mt-4 mb-2 main-heading">{_heading(heading_prefix, category)}</h4>')
        items = []
        for name in catalog.subcategories(category):
            active = category == active_category and name == active_subcategory
            css = ' class="active font-semibold"' if active else ""
            items.append(
                f'<li><a href="#"{css} data-category="{_attr(category)}" '
                f'data-subcategory="{_attr(name)}">{escape(name)}</a></li>'
            )
        parts.append(f"<ul>{''.join(items)}</ul>")
    return "".join(parts)


def render_detail_view(
    catalog: Catalog,
    category: str,
    subcategory: str,
    copied: Iterable[int] = (),
    heading_prefix: str | None = None,
) -> DetailMarkup:
    """Render the detail view for one sub-category.

    Both names must exist in the catalog; otherwise
    :class:`~prompt_gallery.domain.models.catalog.CatalogLookupError` is raised.
    """
    return DetailMarkup(
        prompt_display=render_prompt_display(catalog, category, subcategory, copied, heading_prefix),
        sidebar=render_sidebar(catalog, category, subcategory, heading_prefix),
    )


def render_search_results(results: list[SearchResult], max_chars: int | None = None) -> str:
    """Render a grid of search previews, or the empty-result message."""
    if not results:
        return f'<p class="no-results text-center text-gray-500">{NO_RESULTS_MESSAGE}</p>'

    previews = []
    for result in results:
        previews.append(
            '<div class="prompt-block search-result flex flex-col p-6 cursor-pointer" '
            f'data-category="{_attr(result.category)}" data-subcategory="{_attr(result.subcategory)}">'
            f'<h3 class="text-lg font-bold main-heading mb-2">{escape(result.prompt.title)}</h3>'
            f'<p class="text-sm text-gray-500 mb-4"><em>{escape(result.category)} &gt; '
            f"{escape(result.subcategory)}</em></p>"
            f'<p class="preview text-gray-600 text-sm">{escape(truncate_preview(result.prompt.content, max_chars))}</p>'
            "</div>"
        )
    return f'<div class="grid md:grid-cols-2 lg:grid-cols-3 gap-8">{"".join(previews)}</div>'


def render_load_error() -> str:
    """Static message shown in place of the category cards when loading fails."""
    return f'<div class="load-error text-center text-red-500"><p>{LOAD_ERROR_MESSAGE}</p></div>'


def render_menu_button(is_open: bool) -> str:
    """Hamburger icon when the menu is closed, close icon when it is open."""
    open_hidden = f" {HIDDEN}" if is_open else ""
    close_hidden = "" if is_open else f" {HIDDEN}"
    return (
        '<span class="sr-only">Open main menu</span>'
        + _HAMBURGER_ICON.format(hidden=open_hidden)
        + _CLOSE_ICON.format(hidden=close_hidden)
    )


def render_mobile_menu(title: str | None = None) -> str:
    title = settings.site_title if title is None else title
    return (
        '<nav class="px-4 py-3">'
        f'<a href="/" class="block py-2 font-semibold">{escape(title)}</a>'
        "</nav>"
    )


def _open_tag(region: Region, tag: str = "div") -> str:
    attrs = [f'id="{region.id}"']
    if region.classes:
        attrs.append(f'class="{_attr(" ".join(sorted(region.classes)))}"')
    for name, value in region.attributes.items():
        attrs.append(f'{name}="{_attr(value)}"')
    return f"<{tag} {' '.join(attrs)}>"


def _region(region: Region, tag: str = "div") -> str:
    return f"{_open_tag(region, tag)}{region.html}</{tag}>"


def render_page(surface: Surface, title: str | None = None) -> str:
    """Assemble the full HTML document from the surface regions."""
    title = settings.site_title if title is None else title
    ui_prefix = f"{settings.api_v1_prefix}/ui"
    search_input = surface[SEARCH_INPUT]
    search_attrs = dict(search_input.attributes)
    search_attrs.setdefault("type", "search")
    search_attrs.setdefault("placeholder", "Search prompts...")
    search_tag = _open_tag(Region(search_input.id, classes=search_input.classes, attributes=search_attrs), "input")

    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f"<title>{escape(title)}</title>"
        f'<script src="{SCRIPT_URL}" defer></script></head>'
        f'<body data-events-url="{_attr(ui_prefix)}/events" data-surface-url="{_attr(ui_prefix)}/surface" '
        f'data-copy-feedback-ms="{settings.copy_feedback_ms}">'
        "<header>"
        f'<a href="/" class="site-title">{escape(title)}</a>'
        f"{_region(surface[MENU_BUTTON], 'button')}"
        f"{_region(surface[MOBILE_MENU])}"
        "</header>"
        "<main>"
        f"{_open_tag(surface[HOMEPAGE_VIEW])}"
        f"{surface[HOMEPAGE_VIEW].html}"
        f"{search_tag}"
        f"{_region(surface[CATEGORY_CARDS])}"
        f"{_region(surface[SEARCH_RESULTS])}"
        "</div>"
        f"{_open_tag(surface[DETAIL_VIEW])}"
        f"{_region(surface[BACK_TO_HOME], 'button')}"
        '<div class="detail-layout">'
        f"{_region(surface[QUICK_LINKS], 'aside')}"
        f"{_region(surface[PROMPT_DISPLAY])}"
        "</div></div>"
        "</main></body></html>"
    )
