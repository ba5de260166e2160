"""Navigation state for the homepage/detail view machine."""

import enum
from dataclasses import dataclass


class View(str, enum.Enum):
    """Which top-level view is shown."""
    HOMEPAGE = "homepage"
    DETAIL = "detail"


@dataclass(frozen=True)
class NavigationState:
    """Current view and, in the detail view, the active sub-category."""

    view: View = View.HOMEPAGE
    active_category: str | None = None
    active_subcategory: str | None = None

    @classmethod
    def homepage(cls) -> "NavigationState":
        return cls()

    @classmethod
    def detail(cls, category: str, subcategory: str) -> "NavigationState":
        return cls(View.DETAIL, category, subcategory)

    @property
    def is_detail(self) -> bool:
        return self.view is View.DETAIL
