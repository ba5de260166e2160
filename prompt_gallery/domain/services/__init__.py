"""Domain services."""

from prompt_gallery.domain.services.navigation_service import NavigationController, UIEvent
from prompt_gallery.domain.services.search_service import SearchService

__all__ = ["NavigationController", "SearchService", "UIEvent"]
