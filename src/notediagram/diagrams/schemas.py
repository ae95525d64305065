"""Pydantic models for synthesized diagrams."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from notediagram.constants import DiagramType


class GeneratedDiagram(BaseModel):
    """A rendered diagram. ``id`` and ``created_at`` are fresh per call."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    type: DiagramType
    title: str
    svg_markup: str
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC)
    )

    def to_payload(self) -> dict[str, object]:
        return {
            "id": self.id,
            "type": self.type.value,
            "display_name": self.type.display_name,
            "title": self.title,
            "svg_markup": self.svg_markup,
            "created_at": self.created_at.isoformat(),
        }
