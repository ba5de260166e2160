"""HTML page route."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from prompt_gallery.api.deps import GalleryContext, get_gallery
from prompt_gallery.domain.views.renderer import render_page

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(
    gallery: Annotated[GalleryContext, Depends(get_gallery)],
) -> HTMLResponse:
    """Serve the gallery document.

    Navigation is not URL-addressable, so every page load starts over on the
    homepage with an empty search. When the catalog failed to load the
    document shows the error message in place of the category cards.
    """
    if gallery.controller is None:
        return HTMLResponse(render_page(gallery.error_surface))
    surface = gallery.controller.reset()
    return HTMLResponse(render_page(surface))
