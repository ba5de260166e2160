"""API routes."""

from fastapi import APIRouter

from prompt_gallery.api.routes import catalog, ui_events

api_router = APIRouter()

# Catalog data
api_router.include_router(catalog.router, tags=["catalog"])

# Page interaction
api_router.include_router(ui_events.router, prefix="/ui", tags=["ui"])
