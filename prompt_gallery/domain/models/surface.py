"""Rendering surface: the named regions the page is assembled from.

Rendering never patches a region; it replaces the region's markup wholesale.
Visibility is the ``hidden`` class.
"""

from dataclasses import dataclass, field
from typing import Any

HIDDEN = "hidden"
FADE_IN = "fade-in"
OPEN = "open"

HOMEPAGE_VIEW = "homepage-view"
DETAIL_VIEW = "detail-view"
CATEGORY_CARDS = "category-cards-container"
SEARCH_INPUT = "search-input"
SEARCH_RESULTS = "search-results-container"
PROMPT_DISPLAY = "prompt-display-area"
QUICK_LINKS = "quick-links-sidebar"
BACK_TO_HOME = "back-to-home-btn"
MENU_BUTTON = "menu-button"
MOBILE_MENU = "mobile-menu"

REGION_IDS = (
    HOMEPAGE_VIEW,
    DETAIL_VIEW,
    CATEGORY_CARDS,
    SEARCH_INPUT,
    SEARCH_RESULTS,
    PROMPT_DISPLAY,
    QUICK_LINKS,
    BACK_TO_HOME,
    MENU_BUTTON,
    MOBILE_MENU,
)


@dataclass
class Region:
    """One addressable part of the page."""

    id: str
    html: str = ""
    classes: set[str] = field(default_factory=set)
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def hidden(self) -> bool:
        return HIDDEN in self.classes

    def replace(self, html: str) -> None:
        self.html = html

    def show(self, *extra_classes: str) -> None:
        self.classes.discard(HIDDEN)
        self.classes.update(extra_classes)

    def hide(self) -> None:
        self.classes.add(HIDDEN)

    def toggle_class(self, name: str) -> bool:
        """Toggle a class; returns True if the class is now present."""
        if name in self.classes:
            self.classes.discard(name)
            return False
        self.classes.add(name)
        return True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "html": self.html,
            "classes": sorted(self.classes),
            "attributes": dict(self.attributes),
        }


@dataclass
class Surface:
    """All regions of the page plus viewport and notification state."""

    regions: dict[str, Region] = field(default_factory=dict)
    scroll_y: int = 0
    alert: str | None = None

    @classmethod
    def initial(cls) -> "Surface":
        """Region layout as served before the catalog is rendered."""
        regions = {region_id: Region(region_id) for region_id in REGION_IDS}
        regions[DETAIL_VIEW].hide()
        regions[SEARCH_RESULTS].hide()
        regions[SEARCH_INPUT].attributes["value"] = ""
        regions[MENU_BUTTON].attributes["aria-expanded"] = "false"
        return cls(regions=regions)

    def __getitem__(self, region_id: str) -> Region:
        return self.regions[region_id]

    def take_alert(self) -> str | None:
        """Return and clear the pending notification."""
        alert, self.alert = self.alert, None
        return alert

    def to_dict(self) -> dict[str, Any]:
        return {
            "regions": {region_id: region.to_dict() for region_id, region in self.regions.items()},
            "scroll_y": self.scroll_y,
        }
