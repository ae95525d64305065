"""Shared constants: single source of truth for cross-module values.

StrEnum members are str-compatible, so downstream code (JSON payloads,
CLI arguments, API paths) works unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class ContentCategory(StrEnum):
    """Coarse purpose of a piece of text."""

    CODE = "code"
    TEXT = "text"
    ARCHITECTURE = "architecture"
    DOCUMENTATION = "documentation"


class Language(StrEnum):
    """Programming languages recognised by signature matching."""

    SWIFT = "Swift"
    JAVASCRIPT = "JavaScript"
    PYTHON = "Python"
    JAVA = "Java"
    TYPESCRIPT = "TypeScript"
    CSHARP = "C#"
    GO = "Go"
    RUST = "Rust"


class ContentPattern(StrEnum):
    """Structural heuristics that can fire on a text."""

    CLASS_DEFINITION = "classDefinition"
    FUNCTION_DEFINITION = "functionDefinition"
    API_ENDPOINT = "apiEndpoint"
    SYSTEM_ARCHITECTURE = "systemArchitecture"
    DATABASE_DESIGN = "databaseDesign"


class DiagramType(StrEnum):
    """The five supported visualisations, in canonical order."""

    CLASS_DIAGRAM = "classDiagram"
    SEQUENCE_DIAGRAM = "sequenceDiagram"
    FLOW_CHART = "flowChart"
    COMPONENT_DIAGRAM = "componentDiagram"
    ARCHITECTURE_DIAGRAM = "architectureDiagram"

    @property
    def display_name(self) -> str:
        return DIAGRAM_DISPLAY_NAMES[self]

    @property
    def icon(self) -> str:
        return DIAGRAM_ICONS[self]

    @property
    def canvas(self) -> tuple[int, int]:
        """Fixed (width, height) of the rendered SVG."""
        return DIAGRAM_CANVAS[self]


class ExportFormat(StrEnum):
    """Supported diagram export formats."""

    SVG = "svg"
    HTML = "html"
    JSON = "json"


# ── Diagram Presentation ─────────────────────────────────

DIAGRAM_DISPLAY_NAMES: dict[str, str] = {
    DiagramType.CLASS_DIAGRAM: "Class Diagram",
    DiagramType.SEQUENCE_DIAGRAM: "Sequence Diagram",
    DiagramType.FLOW_CHART: "Flow Chart",
    DiagramType.COMPONENT_DIAGRAM: "Component Diagram",
    DiagramType.ARCHITECTURE_DIAGRAM: "Architecture Diagram",
}

DIAGRAM_ICONS: dict[str, str] = {
    DiagramType.CLASS_DIAGRAM: "rectangle.3.group",
    DiagramType.SEQUENCE_DIAGRAM: "arrow.right.arrow.left",
    DiagramType.FLOW_CHART: "flowchart",
    DiagramType.COMPONENT_DIAGRAM: "square.3.layers.3d",
    DiagramType.ARCHITECTURE_DIAGRAM: "building.2",
}

DIAGRAM_CANVAS: dict[str, tuple[int, int]] = {
    DiagramType.CLASS_DIAGRAM: (400, 300),
    DiagramType.SEQUENCE_DIAGRAM: (500, 400),
    DiagramType.FLOW_CHART: (300, 400),
    DiagramType.COMPONENT_DIAGRAM: (400, 300),
    DiagramType.ARCHITECTURE_DIAGRAM: (400, 350),
}

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# ── Confidence Weights ───────────────────────────────────


class ConfidenceWeight:
    """Additive weights for the confidence heuristic."""

    LANGUAGE = 0.3
    PER_PATTERN = 0.2
    LONG_TEXT = 0.2
    CEILING = 1.0


LONG_TEXT_THRESHOLD = 100  # chars; strictly greater counts as long

# ── Extraction Limits ────────────────────────────────────

MAX_ACTORS = 4
MAX_INTERACTIONS = 5
INTERACTION_LABEL_CHARS = 20
MAX_STEPS = 6
STEP_LABEL_CHARS = 30
FLOW_STEP_PREVIEW_CHARS = 15
MAX_COMPONENTS = 4
MAX_LAYERS = 4

# ── Extraction Fallbacks ─────────────────────────────────

FALLBACK_ACTORS = ("User", "Frontend", "API", "Database")
FALLBACK_INTERACTIONS = ("request", "process", "response")
FALLBACK_STEPS = ("Start", "Process", "End")
FALLBACK_COMPONENTS = ("Frontend", "Backend", "Database", "Cache")
FALLBACK_LAYERS = ("Presentation Layer", "Business Layer", "Data Layer")
FALLBACK_CLASS_NAME = "System"
INTERACTION_PLACEHOLDER = "message"

# ── Misc ─────────────────────────────────────────────────

EMPTY_CONTENT_MESSAGE = "no content to diagram"
MAX_INPUT_CHARS = 200_000  # API request bodies only
