"""Layout API router - REST endpoints over the shared layout store."""

from fastapi import APIRouter, HTTPException, status

from pitchside.api.schemas.layout import (
    EntitySchema,
    LayoutSchema,
    MoveRequest,
    RosterReloadRequest,
    RosterTextRequest,
    ScenePropSchema,
)
from pitchside.api.services.layout_service import layout_service, parse_entity_id
from pitchside.core.colors import entity_color
from pitchside.sources import SheetSource

router = APIRouter(tags=["layout"])


@router.get("/layout", response_model=LayoutSchema)
async def get_layout() -> LayoutSchema:
    """Current board state, ball last."""
    return layout_service.layout()


@router.post("/roster", response_model=LayoutSchema)
async def load_roster(request: RosterTextRequest) -> LayoutSchema:
    """Replace the roster with one parsed from raw sheet text."""
    layout_service.controller.load_text(request.text, source="<api>")
    return layout_service.layout()


@router.post("/roster/reload", response_model=LayoutSchema)
async def reload_roster(request: RosterReloadRequest) -> LayoutSchema:
    """
    Fetch the roster from a sheet URL.

    A failed fetch is not an HTTP error: the board is left empty and the
    returned status says "failed".
    """
    controller = layout_service.controller
    url = request.url or controller.config.source_url
    if not url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No sheet URL given and none configured",
        )
    await controller.load(SheetSource(url, timeout=controller.config.fetch_timeout))
    return layout_service.layout()


@router.put("/layout/entities/{entity_id}", response_model=EntitySchema)
async def move_entity(entity_id: str, request: MoveRequest) -> EntitySchema:
    """Move one entity to new board coordinates."""
    key = parse_entity_id(entity_id)
    store = layout_service.controller.store
    if not store.move_entity(key, request.x, request.y):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Entity {entity_id} not found",
        )
    entity = store.get(key)
    return EntitySchema.from_model(entity, entity_color(entity, layout_service.controller.config.colors))


@router.get("/scene", response_model=list[ScenePropSchema])
async def get_scene() -> list[ScenePropSchema]:
    """Current layout projected into 3D world coordinates."""
    return layout_service.scene_props()
