"""Navigation controller: the homepage/detail state machine.

States are ``Homepage`` and ``Detail(category, subcategory)``. Search is an
independent toggle on the homepage region: it swaps the category cards for
the search results and never touches the detail state.
"""

import enum
import logging

from prompt_gallery.domain.models.catalog import Catalog
from prompt_gallery.domain.models.navigation import NavigationState
from prompt_gallery.domain.models.surface import (
    BACK_TO_HOME,
    CATEGORY_CARDS,
    DETAIL_VIEW,
    FADE_IN,
    HOMEPAGE_VIEW,
    MENU_BUTTON,
    MOBILE_MENU,
    OPEN,
    PROMPT_DISPLAY,
    QUICK_LINKS,
    SEARCH_INPUT,
    SEARCH_RESULTS,
    Surface,
)
from prompt_gallery.domain.services.search_service import SearchService
from prompt_gallery.domain.views import renderer
from prompt_gallery.infrastructure.clipboard import ClipboardHelper, CopyControl

logger = logging.getLogger(__name__)


class UIEvent(str, enum.Enum):
    """Named UI events the controller handles."""
    SELECT_SUBCATEGORY = "select_subcategory"
    SEE_ALL = "see_all"
    SELECT_SIDEBAR_LINK = "select_sidebar_link"
    SELECT_SEARCH_RESULT = "select_search_result"
    BACK = "back"
    SEARCH_INPUT = "search_input"
    COPY_PROMPT = "copy_prompt"
    TOGGLE_MENU = "toggle_menu"


class InvalidTransitionError(Exception):
    """Raised when an event is not valid in the current view."""


class NavigationController:
    """Owns the navigation state and keeps the surface consistent with it."""

    def __init__(
        self,
        catalog: Catalog,
        search_service: SearchService | None = None,
        clipboard: ClipboardHelper | None = None,
        surface: Surface | None = None,
    ) -> None:
        """Initialize navigation controller.

        Args:
            catalog: The loaded prompt catalog
            search_service: Search over the same catalog
            clipboard: Clipboard helper; defaults to the system clipboard with
                failures reported through ``surface.alert``
            surface: Region model to render into
        """
        self.catalog = catalog
        self.search_service = search_service or SearchService(catalog)
        self.surface = surface or Surface.initial()
        self.clipboard = clipboard or ClipboardHelper(notifier=self.notify)
        self.state = NavigationState.homepage()
        self.query = ""
        self.menu_open = False
        self._copy_controls: dict[tuple[str, str, int], CopyControl] = {}

    # --- lifecycle ---

    def start(self) -> Surface:
        """Enter the Homepage state after a successful load."""
        self.surface[BACK_TO_HOME].replace("&larr; Back to all categories")
        self.surface[MOBILE_MENU].replace(renderer.render_mobile_menu())
        self._render_menu()
        self.surface[CATEGORY_CARDS].replace(renderer.render_homepage(self.catalog))
        self.surface[HOMEPAGE_VIEW].show()
        self.surface[DETAIL_VIEW].hide()
        self._apply_search("")
        return self.surface

    def reset(self) -> Surface:
        """Reload semantics: Homepage, empty search, closed menu."""
        self.state = NavigationState.homepage()
        self.menu_open = False
        self._copy_controls.clear()
        self.surface[PROMPT_DISPLAY].replace("")
        self.surface[QUICK_LINKS].replace("")
        self.surface[HOMEPAGE_VIEW].classes.discard(FADE_IN)
        self.surface[DETAIL_VIEW].classes.discard(FADE_IN)
        self.surface[MOBILE_MENU].classes.discard(OPEN)
        self.surface.scroll_y = 0
        self.surface.alert = None
        return self.start()

    def notify(self, message: str) -> None:
        """Blocking user notification; the adapter shows it as an alert."""
        self.surface.alert = message

    # --- command handlers ---

    def show_detail(self, category: str, subcategory: str) -> Surface:
        """Homepage -> Detail(category, subcategory)."""
        self.render_detail(category, subcategory)
        self.surface[HOMEPAGE_VIEW].hide()
        self.surface[DETAIL_VIEW].show(FADE_IN)
        self.surface.scroll_y = 0
        logger.info(f"[NAV] Detail view {category!r} > {subcategory!r}")
        return self.surface

    def select_subcategory(self, category: str, subcategory: str) -> Surface:
        return self.show_detail(category, subcategory)

    def see_all(self, category: str) -> Surface:
        """Open a category's first sub-category."""
        return self.show_detail(category, self.catalog.first_subcategory(category))

    def select_search_result(self, category: str, subcategory: str) -> Surface:
        return self.show_detail(category, subcategory)

    def select_sidebar_link(self, category: str, subcategory: str) -> Surface:
        """Detail -> Detail: re-render in place, visibility unchanged."""
        if not self.state.is_detail:
            raise InvalidTransitionError("Sidebar links are only available in the detail view")
        self.render_detail(category, subcategory)
        return self.surface

    def show_homepage(self) -> Surface:
        """Detail -> Homepage. The search state is left as it is."""
        self.state = NavigationState.homepage()
        self.surface[DETAIL_VIEW].hide()
        self.surface[HOMEPAGE_VIEW].show(FADE_IN)
        return self.surface

    def back(self) -> Surface:
        return self.show_homepage()

    def search_input(self, value: str) -> Surface:
        """Live search input; runs the search only for long enough queries."""
        self._apply_search(value)
        return self.surface

    async def copy_prompt(self, index: int) -> Surface:
        """Copy one prompt of the active sub-category to the clipboard."""
        if not self.state.is_detail:
            raise InvalidTransitionError("Copy is only available in the detail view")
        category, subcategory = self.state.active_category, self.state.active_subcategory
        prompt = self.catalog.prompt(category, subcategory, index)

        key = (category, subcategory, index)
        control = self._copy_controls.setdefault(key, CopyControl())
        if control.disabled:
            return self.surface
        # Held disabled while the clipboard write is in flight
        control.disabled = True

        def _release() -> None:
            if self._copy_controls.get(key) is control:
                del self._copy_controls[key]

        def _on_change(changed: CopyControl) -> None:
            if self._copy_controls.get(key) is not changed:
                return
            if not changed.copied:
                _release()
            if self.state.active_category == category and self.state.active_subcategory == subcategory:
                self._render_prompt_display()

        copied = False
        try:
            copied = await self.clipboard.copy(prompt.content, control, on_change=_on_change)
        finally:
            if not copied:
                _release()
        return self.surface

    def toggle_menu(self) -> Surface:
        """Open or close the mobile navigation menu."""
        self.menu_open = self.surface[MOBILE_MENU].toggle_class(OPEN)
        self._render_menu()
        return self.surface

    async def dispatch(
        self,
        event: UIEvent,
        category: str | None = None,
        subcategory: str | None = None,
        value: str | None = None,
        index: int | None = None,
    ) -> Surface:
        """Route a named UI event to its command handler.

        Raises:
            ValueError: If a required event argument is missing
            InvalidTransitionError: If the event is not valid in the current view
            CatalogLookupError: If the event names something not in the catalog
        """
        event = UIEvent(event)
        if event in (UIEvent.SELECT_SUBCATEGORY, UIEvent.SELECT_SIDEBAR_LINK, UIEvent.SELECT_SEARCH_RESULT):
            if category is None or subcategory is None:
                raise ValueError(f"{event.value} requires category and subcategory")
        if event is UIEvent.SEE_ALL and category is None:
            raise ValueError("see_all requires category")
        if event is UIEvent.COPY_PROMPT and index is None:
            raise ValueError("copy_prompt requires index")

        if event is UIEvent.SELECT_SUBCATEGORY:
            return self.select_subcategory(category, subcategory)
        if event is UIEvent.SEE_ALL:
            return self.see_all(category)
        if event is UIEvent.SELECT_SIDEBAR_LINK:
            return self.select_sidebar_link(category, subcategory)
        if event is UIEvent.SELECT_SEARCH_RESULT:
            return self.select_search_result(category, subcategory)
        if event is UIEvent.BACK:
            return self.back()
        if event is UIEvent.SEARCH_INPUT:
            return self.search_input(value or "")
        if event is UIEvent.COPY_PROMPT:
            return await self.copy_prompt(index)
        return self.toggle_menu()

    # --- rendering ---

    def render_detail(self, category: str, subcategory: str) -> None:
        """Render the detail regions and make (category, subcategory) active."""
        markup = renderer.render_detail_view(
            self.catalog, category, subcategory, copied=self._copied_indices(category, subcategory)
        )
        self.state = NavigationState.detail(category, subcategory)
        self.surface[PROMPT_DISPLAY].replace(markup.prompt_display)
        self.surface[QUICK_LINKS].replace(markup.sidebar)

    def _render_prompt_display(self) -> None:
        category, subcategory = self.state.active_category, self.state.active_subcategory
        self.surface[PROMPT_DISPLAY].replace(
            renderer.render_prompt_display(
                self.catalog, category, subcategory, copied=self._copied_indices(category, subcategory)
            )
        )

    def _copied_indices(self, category: str, subcategory: str) -> set[int]:
        return {
            index
            for (cat, sub, index), control in self._copy_controls.items()
            if cat == category and sub == subcategory and control.copied
        }

    def _apply_search(self, value: str) -> None:
        self.query = value
        self.surface[SEARCH_INPUT].attributes["value"] = value
        results_region = self.surface[SEARCH_RESULTS]
        cards_region = self.surface[CATEGORY_CARDS]

        if not self.search_service.is_search_query(value):
            results_region.hide()
            results_region.replace("")
            cards_region.show()
            return

        results = self.search_service.search(value)
        logger.debug(f"[SEARCH] {value.strip()!r} matched {len(results)} prompts")
        cards_region.hide()
        results_region.show()
        results_region.replace(renderer.render_search_results(results))

    def _render_menu(self) -> None:
        button = self.surface[MENU_BUTTON]
        button.attributes["aria-expanded"] = "true" if self.menu_open else "false"
        button.replace(renderer.render_menu_button(self.menu_open))
