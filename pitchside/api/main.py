"""FastAPI application for the Pitchside board."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pitchside import __version__
from pitchside.api.routers import layout_router, websocket_router
from pitchside.api.services.layout_service import layout_service
from pitchside.events import EntityMovedEvent, LoadStatus
from pitchside.sources import SheetSource

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the configured sheet on startup unless a load was already attempted."""
    controller = layout_service.controller
    url = controller.config.source_url
    if url and controller.status is LoadStatus.IDLE:
        logger.info("Loading roster from %s", url)
        await controller.load(SheetSource(url, timeout=controller.config.fetch_timeout))
    yield
    logger.info("Pitchside API shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Pitchside API",
        description="Tactical board layout and 3D scene",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",  # Vite dev server
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(layout_router, prefix="/api/v1")
    app.include_router(websocket_router)

    @app.get("/")
    async def root() -> dict:
        """Root endpoint - API info."""
        return {
            "name": "Pitchside API",
            "version": __version__,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        controller = layout_service.controller
        return {
            "status": "healthy",
            "roster_status": controller.status.value,
            "entities": len(controller.store),
            "websocket_clients": layout_service.connection_count,
            "move_listeners": controller.event_bus.handler_count(EntityMovedEvent),
        }

    return app


app = create_app()


def run_api(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server."""
    uvicorn.run(
        "pitchside.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    run_api(reload=True)
