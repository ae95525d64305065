"""Diagram generation routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from notediagram.api.dependencies import get_settings
from notediagram.api.schemas import (
    APIResponse,
    DiagramTypeInfo,
    TextRequest,
)
from notediagram.config import Settings
from notediagram.constants import DiagramType
from notediagram.errors import (
    EmptyContentError,
    UnsupportedDiagramTypeError,
    parse_diagram_type,
)
from notediagram.services.analysis_service import generate_after_delay

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["diagrams"])


@router.get("/diagram-types")
async def list_diagram_types() -> APIResponse:
    """All supported diagram types, in canonical order."""
    items = [
        DiagramTypeInfo(
            type=t.value,
            display_name=t.display_name,
            icon=t.icon,
            width=t.canvas[0],
            height=t.canvas[1],
        ).model_dump()
        for t in DiagramType
    ]
    return APIResponse(success=True, data=items)


@router.post("/diagrams/{diagram_type}")
async def create_diagram(
    diagram_type: str,
    body: TextRequest,
    settings: Settings = Depends(get_settings),
) -> APIResponse:
    """Synthesize one diagram from the posted text.

    Unknown types and empty text are reported in the envelope rather
    than as HTTP errors.
    """
    try:
        resolved = parse_diagram_type(diagram_type)
    except UnsupportedDiagramTypeError as exc:
        return APIResponse(success=False, error=str(exc))

    diagram = await generate_after_delay(
        resolved, body.text, settings.analysis_delay_seconds
    )
    if diagram is None:
        logger.info(
            "event=diagram_rejected type=%s reason=empty_input", resolved
        )
        return APIResponse(success=False, error=str(EmptyContentError()))

    return APIResponse(success=True, data=diagram.to_payload())
