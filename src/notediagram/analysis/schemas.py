"""Pydantic models for the analysis data flow."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from notediagram.constants import (
    ContentCategory,
    ContentPattern,
    DiagramType,
    Language,
)


class AnalysisResult(BaseModel):
    """Output of :func:`analyze_content`: rebuilt wholesale per call."""

    model_config = ConfigDict(frozen=True)

    content_category: ContentCategory
    language: Language | None = None
    patterns: frozenset[ContentPattern] = frozenset()
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    suggested_diagram_types: tuple[DiagramType, ...] = ()

    @field_validator("suggested_diagram_types")
    @classmethod
    def _no_duplicate_suggestions(
        cls, v: tuple[DiagramType, ...]
    ) -> tuple[DiagramType, ...]:
        if len(set(v)) != len(v):
            raise ValueError(
                "suggested_diagram_types must not contain duplicates"
            )
        return v

    def to_payload(self) -> dict[str, object]:
        """JSON-friendly dict with patterns sorted for stable output."""
        return {
            "content_category": self.content_category.value,
            "language": self.language.value if self.language else None,
            "patterns": sorted(p.value for p in self.patterns),
            "confidence": self.confidence,
            "suggested_diagram_types": [
                t.value for t in self.suggested_diagram_types
            ],
        }
