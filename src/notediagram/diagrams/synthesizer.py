"""Turn raw text into a :class:`GeneratedDiagram` for a given type."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from notediagram.constants import DiagramType
from notediagram.diagrams.extractors import extract_main_class_name
from notediagram.diagrams.schemas import GeneratedDiagram
from notediagram.diagrams.svg import (
    render_architecture_diagram,
    render_class_diagram,
    render_component_diagram,
    render_flow_chart,
    render_sequence_diagram,
)

logger = logging.getLogger(__name__)


def _first_cue(
    text: str, cues: tuple[tuple[str, str], ...], default: str
) -> str:
    """Title for the first cue word present in the lowercased text."""
    lowered = text.lower()
    for word, subtitle in cues:
        if word in lowered:
            return subtitle
    return default


def _class_subtitle(text: str) -> str:
    return extract_main_class_name(text)


def _sequence_subtitle(text: str) -> str:
    return _first_cue(
        text,
        (("login", "Login Process"), ("auth", "Authentication")),
        "System Interaction",
    )


def _flow_subtitle(text: str) -> str:
    return _first_cue(
        text,
        (("login", "Login Flow"), ("process", "Business Process")),
        "Process Flow",
    )


def _component_subtitle(text: str) -> str:
    return _first_cue(
        text, (("system", "System Components"),), "Application Components"
    )


def _architecture_subtitle(text: str) -> str:
    return _first_cue(
        text,
        (
            ("microservice", "Microservices Architecture"),
            ("layer", "Layered Architecture"),
        ),
        "System Architecture",
    )


@dataclass(frozen=True)
class DiagramSpec:
    """How one diagram type derives its title and renders its SVG."""

    subtitle: Callable[[str], str]
    render: Callable[[str, str], str]


DIAGRAM_SPECS: dict[DiagramType, DiagramSpec] = {
    DiagramType.CLASS_DIAGRAM: DiagramSpec(
        _class_subtitle, render_class_diagram
    ),
    DiagramType.SEQUENCE_DIAGRAM: DiagramSpec(
        _sequence_subtitle, render_sequence_diagram
    ),
    DiagramType.FLOW_CHART: DiagramSpec(
        _flow_subtitle, render_flow_chart
    ),
    DiagramType.COMPONENT_DIAGRAM: DiagramSpec(
        _component_subtitle, render_component_diagram
    ),
    DiagramType.ARCHITECTURE_DIAGRAM: DiagramSpec(
        _architecture_subtitle, render_architecture_diagram
    ),
}


def diagram_title(diagram_type: DiagramType, text: str) -> str:
    """``"<display name> - <cue>"``, e.g. ``Flow Chart - Login Flow``."""
    spec = DIAGRAM_SPECS[diagram_type]
    return f"{diagram_type.display_name} - {spec.subtitle(text)}"


def generate_diagram(
    diagram_type: DiagramType, text: str
) -> GeneratedDiagram | None:
    """Synthesize a diagram, or ``None`` when *text* is empty."""
    if not text:
        logger.debug(
            "event=diagram_skipped type=%s reason=empty_input",
            diagram_type,
        )
        return None

    spec = DIAGRAM_SPECS[diagram_type]
    title = diagram_title(diagram_type, text)
    markup = spec.render(text, title)

    logger.debug(
        "event=diagram_generated type=%s title=%r svg_chars=%d",
        diagram_type,
        title,
        len(markup),
    )
    return GeneratedDiagram(
        type=diagram_type, title=title, svg_markup=markup
    )


def generate_diagrams(
    text: str, diagram_types: list[DiagramType] | None = None
) -> list[GeneratedDiagram]:
    """Generate one diagram per requested type (default: all five).

    Returns an empty list for empty text.
    """
    types = diagram_types if diagram_types is not None else list(DiagramType)
    diagrams: list[GeneratedDiagram] = []
    for diagram_type in types:
        diagram = generate_diagram(diagram_type, text)
        if diagram is not None:
            diagrams.append(diagram)
    return diagrams
