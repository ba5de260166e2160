"""UI event endpoint: the page reports an event, gets back the new regions."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from prompt_gallery.api.deps import get_controller
from prompt_gallery.api.schemas.ui import RegionResponse, SurfaceResponse, UIEventRequest
from prompt_gallery.domain.models.catalog import CatalogLookupError
from prompt_gallery.domain.services.navigation_service import (
    InvalidTransitionError,
    NavigationController,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _surface_response(controller: NavigationController) -> SurfaceResponse:
    surface = controller.surface
    return SurfaceResponse(
        view=controller.state.view.value,
        active_category=controller.state.active_category,
        active_subcategory=controller.state.active_subcategory,
        regions={
            region_id: RegionResponse(**region.to_dict())
            for region_id, region in surface.regions.items()
        },
        scroll_y=surface.scroll_y,
        alert=surface.take_alert(),
    )


@router.get("/surface", response_model=SurfaceResponse)
async def get_surface(
    controller: Annotated[NavigationController, Depends(get_controller)],
) -> SurfaceResponse:
    """Current regions without handling an event."""
    return _surface_response(controller)


@router.post("/events", response_model=SurfaceResponse)
async def handle_event(
    event_request: UIEventRequest,
    controller: Annotated[NavigationController, Depends(get_controller)],
) -> SurfaceResponse:
    """Dispatch a named UI event to the navigation controller."""
    try:
        await controller.dispatch(
            event_request.event,
            category=event_request.category,
            subcategory=event_request.subcategory,
            value=event_request.value,
            index=event_request.index,
        )
    except CatalogLookupError as e:
        logger.warning(f"[UI] {event_request.event.value}: {e}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except InvalidTransitionError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return _surface_response(controller)
