"""FastAPI dependencies for the loaded catalog and navigation controller."""

from dataclasses import dataclass, field
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from prompt_gallery.domain.models.catalog import Catalog
from prompt_gallery.domain.models.surface import CATEGORY_CARDS, Surface
from prompt_gallery.domain.services.navigation_service import NavigationController
from prompt_gallery.domain.services.search_service import SearchService
from prompt_gallery.domain.views.renderer import render_load_error
from prompt_gallery.infrastructure.catalog_loader import CatalogLoadError


@dataclass
class GalleryContext:
    """What the lifespan hands to the routes: a catalog, or the load failure."""

    catalog: Catalog | None = None
    controller: NavigationController | None = None
    load_error: CatalogLoadError | None = None
    error_surface: Surface = field(default_factory=Surface.initial)

    @classmethod
    def loaded(cls, catalog: Catalog) -> "GalleryContext":
        controller = NavigationController(catalog, SearchService(catalog))
        controller.start()
        return cls(catalog=catalog, controller=controller)

    @classmethod
    def failed(cls, error: CatalogLoadError) -> "GalleryContext":
        context = cls(load_error=error)
        context.error_surface[CATEGORY_CARDS].replace(render_load_error())
        return context


def get_gallery(request: Request) -> GalleryContext:
    """Get the gallery context set up at startup."""
    gallery = getattr(request.app.state, "gallery", None)
    if gallery is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Prompt catalog is still loading",
        )
    return gallery


def get_catalog(
    gallery: Annotated[GalleryContext, Depends(get_gallery)],
) -> Catalog:
    """Get the loaded catalog.

    Raises:
        HTTPException: If the catalog failed to load
    """
    if gallery.catalog is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Prompt catalog failed to load",
        )
    return gallery.catalog


def get_controller(
    gallery: Annotated[GalleryContext, Depends(get_gallery)],
) -> NavigationController:
    """Get the navigation controller.

    Raises:
        HTTPException: If the catalog failed to load
    """
    if gallery.controller is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Prompt catalog failed to load",
        )
    return gallery.controller
