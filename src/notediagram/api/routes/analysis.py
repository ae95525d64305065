"""Content analysis and diagram suggestion routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from notediagram.analysis.advisor import suggest_diagram_types
from notediagram.api.dependencies import get_settings
from notediagram.api.schemas import (
    APIResponse,
    DiagramTypeInfo,
    TextRequest,
)
from notediagram.config import Settings
from notediagram.services.analysis_service import analyze_after_delay

router = APIRouter(prefix="/api", tags=["analysis"])


@router.post("/analyze")
async def analyze(
    body: TextRequest,
    settings: Settings = Depends(get_settings),
) -> APIResponse:
    """Classify the text and suggest diagram types."""
    result = await analyze_after_delay(
        body.text, settings.analysis_delay_seconds
    )
    return APIResponse(
        success=True,
        data=result.to_payload(),
        metadata={"chars": len(body.text)},
    )


@router.post("/suggestions")
async def suggestions(body: TextRequest) -> APIResponse:
    """Suggested diagram types with their presentation metadata."""
    items = [
        DiagramTypeInfo(
            type=t.value, display_name=t.display_name, icon=t.icon
        ).model_dump(exclude_none=True)
        for t in suggest_diagram_types(body.text)
    ]
    return APIResponse(success=True, data=items)
