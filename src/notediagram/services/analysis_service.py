"""Note-level orchestration: analysis plus suggested diagrams.

The core is synchronous and never suspends. The optional delay here is
a presentation affordance owned by the caller: the task sleeps first,
then invokes the core in one synchronous step.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field

from notediagram.analysis.classifier import analyze_content
from notediagram.analysis.schemas import AnalysisResult
from notediagram.constants import DiagramType
from notediagram.diagrams.schemas import GeneratedDiagram
from notediagram.diagrams.synthesizer import (
    generate_diagram,
    generate_diagrams,
)

logger = logging.getLogger(__name__)


@dataclass
class NoteInsights:
    """Analysis of a note plus a diagram per suggested type."""

    analysis: AnalysisResult
    diagrams: list[GeneratedDiagram] = field(
        default_factory=lambda: list[GeneratedDiagram]()
    )
    duration_ms: float = 0.0

    @property
    def has_diagrams(self) -> bool:
        return bool(self.diagrams)


def build_note_insights(text: str) -> NoteInsights:
    """Analyze *text* and render every suggested diagram type."""
    start = time.monotonic()
    analysis = analyze_content(text)
    diagrams = generate_diagrams(
        text, list(analysis.suggested_diagram_types)
    )
    duration_ms = (time.monotonic() - start) * 1000
    logger.info(
        "event=note_insights chars=%d suggestions=%d diagrams=%d "
        "duration_ms=%.1f",
        len(text),
        len(analysis.suggested_diagram_types),
        len(diagrams),
        duration_ms,
    )
    return NoteInsights(
        analysis=analysis, diagrams=diagrams, duration_ms=duration_ms
    )


async def analyze_after_delay(
    text: str, delay_seconds: float = 0.0
) -> AnalysisResult:
    """Sleep for *delay_seconds*, then run the synchronous analysis."""
    if delay_seconds < 0:
        raise ValueError("delay_seconds must be >= 0")
    if delay_seconds:
        await asyncio.sleep(delay_seconds)
    return analyze_content(text)


async def generate_after_delay(
    diagram_type: DiagramType,
    text: str,
    delay_seconds: float = 0.0,
) -> GeneratedDiagram | None:
    """Sleep for *delay_seconds*, then synthesize the diagram."""
    if delay_seconds < 0:
        raise ValueError("delay_seconds must be >= 0")
    if delay_seconds:
        await asyncio.sleep(delay_seconds)
    return generate_diagram(diagram_type, text)
