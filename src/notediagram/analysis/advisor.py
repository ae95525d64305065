"""Diagram type suggestions from trigger vocabularies."""

from __future__ import annotations

from notediagram.analysis.catalog import DIAGRAM_TRIGGERS, all_matches
from notediagram.constants import DiagramType


def suggest_diagram_types(text: str) -> list[DiagramType]:
    """Diagram types whose trigger fires, in canonical type order.

    Each type is tested once, so the result never holds duplicates.
    """
    return [
        DiagramType(entry.tag)
        for entry in all_matches(DIAGRAM_TRIGGERS, text)
    ]
