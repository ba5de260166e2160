"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from prompt_gallery.api.deps import GalleryContext
from prompt_gallery.api.middleware import RequestIdMiddleware
from prompt_gallery.api.routes import api_router
from prompt_gallery.api.routes import pages
from prompt_gallery.infrastructure.catalog_loader import CatalogLoader, CatalogLoadError
from prompt_gallery.logging_config import setup_logging
from prompt_gallery.settings import settings

# Setup logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup: load the catalog once; a failure is terminal for this process
    loader = CatalogLoader(settings.prompts_source)
    try:
        catalog = await loader.load()
    except CatalogLoadError as e:
        app.state.gallery = GalleryContext.failed(e)
    else:
        app.state.gallery = GalleryContext.loaded(catalog)
    yield
    # Shutdown
    app.state.gallery = None


# Create FastAPI app
app = FastAPI(
    title="Prompt Gallery",
    description="Browse, search and copy categorized prompts",
    version="0.1.0",
    lifespan=lifespan,
)

# Add request id middleware
app.add_middleware(RequestIdMiddleware)

# Include API routes
app.include_router(api_router, prefix=settings.api_v1_prefix)

# Serve static files (page script)
static_dir = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

# Page
app.include_router(pages.router, tags=["pages"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    gallery = getattr(app.state, "gallery", None)
    return {
        "status": "healthy",
        "catalog_loaded": bool(gallery and gallery.catalog is not None),
    }
