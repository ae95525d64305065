"""JSON export: structured envelope."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from notediagram.diagrams.schemas import GeneratedDiagram


def export_json(diagrams: list[GeneratedDiagram]) -> str:
    """Export diagrams as structured JSON."""
    payload: dict[str, Any] = {
        "generated_at": datetime.now(UTC).isoformat(),
        "diagram_count": len(diagrams),
        "diagrams": [d.to_payload() for d in diagrams],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def export_single_diagram_json(diagram: GeneratedDiagram) -> str:
    """Export a single diagram as JSON."""
    return json.dumps(diagram.to_payload(), indent=2, ensure_ascii=False)
