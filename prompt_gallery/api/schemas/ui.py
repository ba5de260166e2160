"""UI event and surface schemas."""

from pydantic import BaseModel, Field

from prompt_gallery.domain.services.navigation_service import UIEvent


class UIEventRequest(BaseModel):
    """A named UI event captured by the page."""

    event: UIEvent
    category: str | None = None
    subcategory: str | None = None
    value: str | None = None  # search input value
    index: int | None = Field(default=None, ge=0)  # prompt position for copy


class RegionResponse(BaseModel):
    """One page region after the event was handled."""

    id: str
    html: str
    classes: list[str]
    attributes: dict[str, str]


class SurfaceResponse(BaseModel):
    """All regions, viewport position and any pending alert."""

    view: str
    active_category: str | None = None
    active_subcategory: str | None = None
    regions: dict[str, RegionResponse]
    scroll_y: int = 0
    alert: str | None = None
