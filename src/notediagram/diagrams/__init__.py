"""Diagram synthesis: structure extraction and SVG rendering."""

from notediagram.diagrams.extractors import (
    extract_actors,
    extract_classes,
    extract_components,
    extract_interactions,
    extract_layers,
    extract_steps,
)
from notediagram.diagrams.schemas import GeneratedDiagram
from notediagram.diagrams.synthesizer import (
    diagram_title,
    generate_diagram,
    generate_diagrams,
)

__all__ = [
    "GeneratedDiagram",
    "diagram_title",
    "extract_actors",
    "extract_classes",
    "extract_components",
    "extract_interactions",
    "extract_layers",
    "extract_steps",
    "generate_diagram",
    "generate_diagrams",
]
